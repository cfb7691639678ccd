"""
Imobras - Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
import secrets
from pathlib import Path
from dotenv import load_dotenv

# Carrega .env da raiz do projeto; variáveis já definidas no ambiente prevalecem
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=False)


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Imobras"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database (accepts DATABASE_URL or IMOBRAS_DATABASE_URL)
    DATABASE_URL: Optional[str] = None
    IMOBRAS_DATABASE_URL: str = "sqlite+aiosqlite:///./imobras.db"

    @property
    def db_url(self) -> str:
        """Returns DATABASE_URL if set, otherwise IMOBRAS_DATABASE_URL"""
        return self.DATABASE_URL or self.IMOBRAS_DATABASE_URL

    # Security
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Admin inicial (criado via /api/auth/setup)
    ADMIN_EMAIL: str = "admin@imobras.com.br"
    ADMIN_PASSWORD: str = "change-me-in-production"
    ADMIN_FULL_NAME: str = "Administrador"

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Rate limiting (login e cadastro)
    RATE_LIMIT_ENABLED: bool = True
    AUTH_RATE_LIMIT: str = "10/minute"

    # Exclusão de contrato remove as receitas vinculadas
    CASCADE_REVENUES_ON_CONTRACT_DELETE: bool = False

    # Cliente / CLI
    API_URL: str = "http://localhost:8080"
    SESSION_FILE: str = ".imobras_session"
    SESSION_RESOLVE_TIMEOUT_SECONDS: float = 10.0
    REQUEST_TIMEOUT_SECONDS: float = 15.0

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
