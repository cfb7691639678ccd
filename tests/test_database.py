import logging

from imobras.database import init_db
from tests.helpers import create_user


async def test_init_db_warns_when_empty(caplog):
    with caplog.at_level(logging.WARNING, logger="imobras.database.session"):
        await init_db()
    assert "execute POST /api/auth/setup" in caplog.text


async def test_init_db_flags_missing_administrator(caplog):
    await create_user("alice@imobras.com.br")

    with caplog.at_level(logging.WARNING, logger="imobras.database.session"):
        await init_db()
    assert "nenhum administrador" in caplog.text


async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
