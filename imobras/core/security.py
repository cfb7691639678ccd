"""
Imobras - Security
Hash de senhas e tokens JWT de sessão
"""
import uuid
from datetime import datetime, timedelta
from typing import Optional

from jose import jwt, JWTError
from email_validator import validate_email, EmailNotValidError
import bcrypt

from .config import settings
from .exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica password usando bcrypt"""
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """Gera hash bcrypt do password"""
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt()
    ).decode('utf-8')


def validate_credentials(email: str, password: str) -> str:
    """
    Valida formato de email e tamanho mínimo da senha.
    Retorna o email normalizado (minúsculo, sem espaços).
    """
    try:
        normalized = validate_email(
            (email or "").strip(),
            check_deliverability=False
        ).normalized.lower()
    except EmailNotValidError:
        raise ValidationError("Email inválido")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"A senha deve ter no mínimo {MIN_PASSWORD_LENGTH} caracteres"
        )
    return normalized


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Cria JWT token de sessão com jti único (usado na revogação)"""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "jti": str(uuid.uuid4())})

    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def verify_access_token(token: str) -> Optional[dict]:
    """Verifica JWT token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None
