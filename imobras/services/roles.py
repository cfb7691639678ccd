"""
Imobras - Role Service
Resolução de papel e gestão das atribuições (user_roles)
"""
import logging
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.exceptions import NotFoundError, ValidationError
from imobras.core.policy import Principal, Role, has_admin_role
from imobras.models import Profile, UserRole
from imobras.schemas import RoleAssignmentCreate
from .access import scope_query, get_scoped, require_admin

logger = logging.getLogger(__name__)


async def resolve_roles(db: AsyncSession, identity_id: str) -> List[str]:
    """Lista os papéis atribuídos à identidade (pode ser vazia ou repetida)"""
    result = await db.execute(
        select(UserRole.role).where(UserRole.user_id == identity_id)
    )
    return list(result.scalars().all())


async def is_admin(db: AsyncSession, identity_id: str) -> bool:
    """True se existir ao menos uma atribuição admin; sem linhas = usuário comum"""
    return has_admin_role(await resolve_roles(db, identity_id))


class RoleAssignmentService:
    """
    CRUD das atribuições de papel.

    As atribuições formam um conjunto de tuplas (user_id, role): conceder admin
    é uma união, revogar é a diferença (remove todas as linhas admin). Não há
    update; alterar papel = inserir e/ou remover linhas.
    """

    def __init__(self, db: AsyncSession, principal: Principal):
        self.db = db
        self.principal = principal

    async def list(self, user_id: Optional[str] = None) -> List[UserRole]:
        query = scope_query(select(UserRole), UserRole, self.principal)
        if user_id:
            query = query.where(UserRole.user_id == user_id)
        query = query.order_by(UserRole.created_at.desc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, request: RoleAssignmentCreate) -> UserRole:
        require_admin(self.principal, "atribuição de papéis")

        result = await self.db.execute(
            select(Profile.id).where(Profile.id == request.user_id)
        )
        if not result.scalar_one_or_none():
            raise ValidationError("Usuário não encontrado")

        assignment = UserRole(user_id=request.user_id, role=request.role)
        self.db.add(assignment)
        await self.db.commit()
        await self.db.refresh(assignment)

        logger.info(f"Papel {assignment.role} atribuído a {assignment.user_id} por {self.principal.email}")
        return assignment

    async def delete(self, assignment_id: str):
        require_admin(self.principal, "remoção de papéis")

        assignment = await get_scoped(
            self.db, UserRole, assignment_id, self.principal, "Atribuição não encontrada"
        )
        if assignment.user_id == self.principal.identity_id and assignment.role == Role.ADMIN.value:
            raise ValidationError("Você não pode remover o próprio papel de administrador")

        await self.db.delete(assignment)
        await self.db.commit()

        logger.info(f"Atribuição {assignment_id} removida por {self.principal.email}")

    async def grant_admin(self, user_id: str) -> List[UserRole]:
        """Adiciona o papel admin se ainda não existir (união)"""
        require_admin(self.principal, "concessão de administrador")
        await self._require_profile(user_id)

        roles = await resolve_roles(self.db, user_id)
        if not has_admin_role(roles):
            await self.create(RoleAssignmentCreate(user_id=user_id, role=Role.ADMIN))
            logger.info(f"Privilégios de admin concedidos a {user_id}")

        return await self.list(user_id=user_id)

    async def revoke_admin(self, user_id: str) -> List[UserRole]:
        """Remove todas as linhas admin da identidade (diferença)"""
        require_admin(self.principal, "revogação de administrador")
        if user_id == self.principal.identity_id:
            raise ValidationError("Você não pode remover o próprio papel de administrador")
        await self._require_profile(user_id)

        await self.db.execute(
            delete(UserRole).where(
                UserRole.user_id == user_id,
                UserRole.role == Role.ADMIN.value
            )
        )
        await self.db.commit()

        logger.info(f"Privilégios de admin removidos de {user_id} por {self.principal.email}")
        return await self.list(user_id=user_id)

    async def toggle_admin(self, user_id: str) -> List[UserRole]:
        if await is_admin(self.db, user_id):
            return await self.revoke_admin(user_id)
        return await self.grant_admin(user_id)

    async def _require_profile(self, user_id: str):
        result = await self.db.execute(select(Profile.id).where(Profile.id == user_id))
        if not result.scalar_one_or_none():
            raise NotFoundError("Usuário não encontrado")
