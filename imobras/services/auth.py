"""
Imobras - Auth Service
Cadastro, login, logout e resolução do principal a partir do token
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core import settings
from imobras.core.exceptions import AuthError
from imobras.core.policy import Principal, Role
from imobras.core.security import (
    create_access_token,
    verify_access_token,
    verify_password,
    get_password_hash,
    validate_credentials
)
from imobras.models import Profile, UserRole, RevokedToken
from .roles import is_admin

logger = logging.getLogger(__name__)


async def sign_up(
    db: AsyncSession,
    email: str,
    password: str,
    full_name: Optional[str] = None,
    role: str = Role.USER.value
) -> Profile:
    """
    Cria identidade e sua atribuição de papel.
    Email duplicado levanta AuthError (409).
    """
    email = validate_credentials(email, password)

    result = await db.execute(select(Profile).where(Profile.email == email))
    if result.scalar_one_or_none():
        raise AuthError("Email já cadastrado", status_code=409)

    profile = Profile(
        email=email,
        hashed_password=get_password_hash(password),
        full_name=(full_name or "").strip() or None
    )
    db.add(profile)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise AuthError("Email já cadastrado", status_code=409)

    db.add(UserRole(user_id=profile.id, role=role))
    await db.commit()
    await db.refresh(profile)

    logger.info(f"Usuário cadastrado: {email} ({role})")
    return profile


async def authenticate(db: AsyncSession, email: str, password: str) -> Tuple[Profile, str]:
    """Valida credenciais e emite o token de sessão"""
    email = (email or "").strip().lower()

    result = await db.execute(select(Profile).where(Profile.email == email))
    profile = result.scalar_one_or_none()

    if not profile or not verify_password(password, profile.hashed_password):
        logger.info(f"Login recusado para: {email}")
        raise AuthError("Email ou senha incorretos")

    profile.last_login_at = datetime.utcnow()
    await db.commit()

    access_token = create_access_token(
        data={"sub": profile.id, "email": profile.email},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    logger.info(f"Login realizado: {email}")
    return profile, access_token


async def resolve_principal(db: AsyncSession, token: str) -> Principal:
    """
    Decodifica o token, confere revogação e existência da identidade e
    resolve o papel a partir de user_roles.
    """
    payload = verify_access_token(token)
    if not payload or not payload.get("sub"):
        raise AuthError("Token inválido ou expirado")

    jti = payload.get("jti")
    if jti:
        result = await db.execute(select(RevokedToken.jti).where(RevokedToken.jti == jti))
        if result.scalar_one_or_none():
            raise AuthError("Sessão encerrada")

    result = await db.execute(select(Profile).where(Profile.id == payload["sub"]))
    profile = result.scalar_one_or_none()
    if not profile:
        raise AuthError("Usuário não encontrado")

    return Principal(
        identity_id=profile.id,
        email=profile.email,
        is_admin=await is_admin(db, profile.id)
    )


async def sign_out(db: AsyncSession, token: str):
    """Revoga o token atual (jti)"""
    payload = verify_access_token(token)
    if not payload or not payload.get("jti"):
        raise AuthError("Token inválido ou expirado")

    exp = payload.get("exp")
    db.add(RevokedToken(
        jti=payload["jti"],
        user_id=payload.get("sub"),
        expires_at=datetime.utcfromtimestamp(exp) if exp else None
    ))
    await db.commit()

    logger.info(f"Logout: {payload.get('email')}")
