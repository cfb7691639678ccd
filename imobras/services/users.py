"""
Imobras - User Management Service
Painel administrativo: convites, papéis e remoção de identidades
"""
import logging
from typing import List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.exceptions import NotFoundError, ValidationError
from imobras.core.policy import Principal, has_admin_role
from imobras.models import Profile, UserRole
from imobras.schemas import InviteRequest
from .access import require_admin
from .auth import sign_up

logger = logging.getLogger(__name__)


def user_to_dict(profile: Profile, roles: List[UserRole]) -> dict:
    data = profile.to_dict()
    data["roles"] = [r.to_dict() for r in roles]
    data["is_admin"] = has_admin_role(r.role for r in roles)
    return data


class UserService:
    """Operações restritas a administradores sobre identidades"""

    def __init__(self, db: AsyncSession, principal: Principal):
        self.db = db
        self.principal = principal

    async def list(self) -> List[dict]:
        """Lista perfis (mais recentes primeiro) com suas atribuições"""
        require_admin(self.principal, "listagem de usuários")

        result = await self.db.execute(
            select(Profile).order_by(Profile.created_at.desc())
        )
        profiles = result.scalars().all()

        result = await self.db.execute(select(UserRole))
        roles_by_user = {}
        for role in result.scalars().all():
            roles_by_user.setdefault(role.user_id, []).append(role)

        return [user_to_dict(p, roles_by_user.get(p.id, [])) for p in profiles]

    async def get(self, user_id: str) -> dict:
        require_admin(self.principal, "consulta de usuários")
        profile = await self._get_profile(user_id)

        result = await self.db.execute(select(UserRole).where(UserRole.user_id == user_id))
        return user_to_dict(profile, list(result.scalars().all()))

    async def invite(self, request: InviteRequest) -> dict:
        """Cria conta para um novo usuário com o papel escolhido"""
        require_admin(self.principal, "convite de usuários")

        profile = await sign_up(
            self.db,
            request.email,
            request.password,
            request.full_name,
            role=request.role
        )
        logger.info(f"Usuário {profile.email} convidado por {self.principal.email} como {request.role}")
        return await self.get(profile.id)

    async def delete(self, user_id: str):
        """
        Remove a identidade e suas atribuições. Registros criados por ela
        (contratos, receitas, despesas) permanecem visíveis para admins.
        """
        require_admin(self.principal, "remoção de usuários")

        if user_id == self.principal.identity_id:
            raise ValidationError("Você não pode remover o próprio usuário")

        profile = await self._get_profile(user_id)

        await self.db.execute(delete(UserRole).where(UserRole.user_id == user_id))
        await self.db.delete(profile)
        await self.db.commit()

        logger.info(f"Usuário {profile.email} removido por {self.principal.email}")

    async def _get_profile(self, user_id: str) -> Profile:
        result = await self.db.execute(select(Profile).where(Profile.id == user_id))
        profile = result.scalar_one_or_none()
        if not profile:
            raise NotFoundError("Usuário não encontrado")
        return profile
