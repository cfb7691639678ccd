"""
Fixtures da suíte de testes.

Cada teste roda contra um banco SQLite novo; a API é exercitada em processo
via httpx.ASGITransport (o lifespan não roda, as tabelas são criadas aqui).
"""
import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="imobras-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SESSION_FILE"] = os.path.join(_tmp_dir, "session")

import httpx  # noqa: E402
import pytest  # noqa: E402

import imobras.models  # noqa: E402,F401
from imobras.core import Role  # noqa: E402
from imobras.database import AsyncSessionLocal, Base, engine  # noqa: E402
from imobras.main import app  # noqa: E402
from tests.helpers import create_user  # noqa: E402


@pytest.fixture(autouse=True)
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def db():
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as c:
        yield c


@pytest.fixture
async def admin():
    return await create_user("admin@imobras.com.br", role=Role.ADMIN.value, full_name="Admin")


@pytest.fixture
async def alice():
    return await create_user("alice@imobras.com.br", full_name="Alice Souza")


@pytest.fixture
async def bob():
    return await create_user("bob@imobras.com.br", full_name="Bob Lima")
