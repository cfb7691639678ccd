"""
Imobras - Database Session
"""
import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy import text

from imobras.core.config import settings

logger = logging.getLogger(__name__)

# Engine assíncrono
engine = create_async_engine(
    settings.db_url,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# Session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

# Base para models
Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency para injetar sessão do banco"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def verify_admin_integrity():
    """
    Verifica na inicialização se existe ao menos um administrador.
    Sem admin, ninguém consegue gerenciar usuários: o aviso orienta a rodar
    POST /api/auth/setup (banco vazio) ou conceder o papel manualmente.
    """
    async with AsyncSessionLocal() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM profiles"))
        profiles = result.scalar() or 0

        if not profiles:
            logger.warning("Nenhum usuário cadastrado - execute POST /api/auth/setup")
            return

        result = await session.execute(
            text("SELECT COUNT(*) FROM user_roles WHERE role = 'admin'")
        )
        admins = result.scalar() or 0

        if not admins:
            logger.error(f"ALERTA: {profiles} usuário(s) cadastrado(s) e nenhum administrador!")
        else:
            logger.info(f"{admins} atribuição(ões) de administrador encontrada(s)")


async def init_db():
    """Inicializa banco de dados (cria tabelas) e verifica se há administrador"""
    # Garante que todos os models estão registrados no metadata
    import imobras.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await verify_admin_integrity()
