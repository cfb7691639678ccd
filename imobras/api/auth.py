"""
Imobras - Auth API
Cadastro, login, logout e dependências de autorização
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from slowapi import Limiter
from slowapi.util import get_remote_address
from typing import Optional
import logging

from imobras.database import get_db
from imobras.models import Profile
from imobras.schemas import (
    LoginRequest,
    LoginResponse,
    SignUpRequest,
    ProfileUpdate,
    ProfileResponse
)
from imobras.core import settings, Principal, Role, Decision, DenialReason, decide
from imobras.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])
security = HTTPBearer(auto_error=False)
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Principal:
    """Dependency para obter o usuário autenticado com o papel resolvido"""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Autenticação necessária"
        )

    return await auth_service.resolve_principal(db, credentials.credentials)


async def get_current_admin(
    principal: Principal = Depends(get_current_principal)
) -> Principal:
    """Dependency que exige papel de administrador"""
    result = decide(False, principal, requires_admin=True, is_admin=principal.is_admin)

    if result.decision != Decision.ALLOWED:
        logger.warning(f"Acesso restrito negado a {principal.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN
            if result.reason == DenialReason.INSUFFICIENT_PRIVILEGE
            else status.HTTP_401_UNAUTHORIZED,
            detail="Apenas administradores autorizados podem acessar esta área"
        )

    return principal


@router.post("/signup", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def signup(request: Request, payload: SignUpRequest, db: AsyncSession = Depends(get_db)):
    """Cadastro de novo usuário (papel padrão: user)"""
    profile = await auth_service.sign_up(db, payload.email, payload.password, payload.full_name)
    return {**profile.to_dict(), "is_admin": False}


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(request: Request, payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Login por email e senha"""
    profile, access_token = await auth_service.authenticate(db, payload.email, payload.password)
    principal = await auth_service.resolve_principal(db, access_token)

    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        user={**profile.to_dict(), "is_admin": principal.is_admin}
    )


@router.post("/logout")
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    """Encerra a sessão revogando o token atual"""
    await auth_service.sign_out(db, credentials.credentials)
    return {"message": "Sessão encerrada"}


@router.get("/me", response_model=ProfileResponse)
async def get_me(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    """Retorna dados do usuário atual"""
    profile = await _load_profile(db, principal)
    return {**profile.to_dict(), "is_admin": principal.is_admin}


@router.put("/me", response_model=ProfileResponse)
async def update_me(
    payload: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
):
    """Atualiza o nome de exibição"""
    profile = await _load_profile(db, principal)
    profile.full_name = payload.full_name.strip()
    await db.commit()
    await db.refresh(profile)

    return {**profile.to_dict(), "is_admin": principal.is_admin}


@router.post("/setup")
async def initial_setup(db: AsyncSession = Depends(get_db)):
    """Setup inicial - cria admin padrão se não existir nenhum usuário"""
    result = await db.execute(select(Profile).limit(1))
    existing = result.scalar_one_or_none()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Setup já realizado"
        )

    await auth_service.sign_up(
        db,
        settings.ADMIN_EMAIL,
        settings.ADMIN_PASSWORD,
        settings.ADMIN_FULL_NAME,
        role=Role.ADMIN.value
    )

    return {"message": "Setup concluído", "email": settings.ADMIN_EMAIL}


async def _load_profile(db: AsyncSession, principal: Principal) -> Profile:
    result = await db.execute(select(Profile).where(Profile.id == principal.identity_id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuário não encontrado"
        )
    return profile
