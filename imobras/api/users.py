"""
Imobras - Users API
Painel de administração de usuários e atribuições de papel
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.database import get_db
from imobras.core import Principal
from imobras.schemas import (
    InviteRequest,
    RoleAssignmentCreate,
    RoleAssignmentResponse,
    UserResponse
)
from imobras.services import RoleAssignmentService, UserService
from imobras.api.auth import get_current_principal, get_current_admin

router = APIRouter(prefix="/users", tags=["Users"])
roles_router = APIRouter(prefix="/user-roles", tags=["User Roles"])


def get_user_service(
    db: AsyncSession = Depends(get_db),
    admin: Principal = Depends(get_current_admin)
) -> UserService:
    return UserService(db, admin)


def get_role_service(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
) -> RoleAssignmentService:
    return RoleAssignmentService(db, principal)


def get_admin_role_service(
    db: AsyncSession = Depends(get_db),
    admin: Principal = Depends(get_current_admin)
) -> RoleAssignmentService:
    return RoleAssignmentService(db, admin)


@router.get("", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """Lista usuários com seus papéis"""
    return await service.list()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def invite_user(request: InviteRequest, service: UserService = Depends(get_user_service)):
    """Convida novo usuário (cria conta com o papel escolhido)"""
    return await service.invite(request)


@router.post("/{user_id}/toggle-admin", response_model=List[RoleAssignmentResponse])
async def toggle_admin(user_id: str, service: RoleAssignmentService = Depends(get_admin_role_service)):
    """Tornar admin / remover admin"""
    roles = await service.toggle_admin(user_id)
    return [r.to_dict() for r in roles]


@router.post("/{user_id}/admin", response_model=List[RoleAssignmentResponse])
async def grant_admin(user_id: str, service: RoleAssignmentService = Depends(get_admin_role_service)):
    roles = await service.grant_admin(user_id)
    return [r.to_dict() for r in roles]


@router.delete("/{user_id}/admin", response_model=List[RoleAssignmentResponse])
async def revoke_admin(user_id: str, service: RoleAssignmentService = Depends(get_admin_role_service)):
    roles = await service.revoke_admin(user_id)
    return [r.to_dict() for r in roles]


@router.delete("/{user_id}")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Remove usuário"""
    await service.delete(user_id)
    return {"message": "Usuário removido com sucesso"}


@roles_router.get("", response_model=List[RoleAssignmentResponse])
async def list_role_assignments(
    user_id: Optional[str] = Query(None),
    service: RoleAssignmentService = Depends(get_role_service)
):
    """Atribuições visíveis (usuário comum vê apenas as próprias)"""
    roles = await service.list(user_id=user_id)
    return [r.to_dict() for r in roles]


@roles_router.post("", response_model=RoleAssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_role_assignment(
    request: RoleAssignmentCreate,
    service: RoleAssignmentService = Depends(get_role_service)
):
    assignment = await service.create(request)
    return assignment.to_dict()


@roles_router.delete("/{assignment_id}")
async def delete_role_assignment(
    assignment_id: str,
    service: RoleAssignmentService = Depends(get_role_service)
):
    await service.delete(assignment_id)
    return {"message": "Atribuição removida"}
