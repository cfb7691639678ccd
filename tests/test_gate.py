import pytest

from imobras.client import AuthorizationGate, GateBlockedError, MemoryTokenStore, SessionStore
from imobras.core import Decision, DenialReason
from tests.test_session_store import ALICE, FakeBackend


async def make_gate(token=None, roles=None):
    backend = FakeBackend(users={"t1": ALICE}, roles=roles or {})
    session = SessionStore(backend, token_store=MemoryTokenStore(token))
    return AuthorizationGate(session), session


async def test_pending_while_session_loads():
    gate, _ = await make_gate(token="t1")

    result = await gate.guard()
    assert result.decision == Decision.PENDING

    with pytest.raises(GateBlockedError) as exc:
        await gate.run(lambda: None)
    assert exc.value.message == "Carregando..."


async def test_denied_without_identity():
    gate, session = await make_gate()
    await session.initialize()

    result = await gate.guard(requires_admin=True)
    assert result.decision == Decision.DENIED
    assert result.reason == DenialReason.UNAUTHENTICATED


async def test_regular_user_allowed_on_plain_pages():
    gate, session = await make_gate(token="t1", roles={"u-alice": ["user"]})
    await session.initialize()

    assert (await gate.guard()).allowed

    result = await gate.guard(requires_admin=True)
    assert result.reason == DenialReason.INSUFFICIENT_PRIVILEGE


async def test_admin_allowed_on_admin_pages():
    gate, session = await make_gate(token="t1", roles={"u-alice": ["user", "admin"]})
    await session.initialize()

    assert (await gate.guard(requires_admin=True)).allowed


async def test_run_executes_only_when_allowed():
    gate, session = await make_gate(token="t1", roles={"u-alice": ["user"]})
    await session.initialize()
    calls = []

    async def action():
        calls.append("ran")
        return "ok"

    assert await gate.run(action) == "ok"

    with pytest.raises(GateBlockedError) as exc:
        await gate.run(action, requires_admin=True)
    assert exc.value.status_code == 403
    assert exc.value.result.reason == DenialReason.INSUFFICIENT_PRIVILEGE
    assert calls == ["ran"]

    await session.sign_out()
    with pytest.raises(GateBlockedError) as exc:
        await gate.run(action)
    assert exc.value.status_code == 401
