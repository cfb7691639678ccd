import httpx

from imobras.cli import format_brl, main, resolve_command
from imobras.client import ApiBackend, MemoryTokenStore
from imobras.main import app
from tests.helpers import create_contract, create_expense, create_revenue


def api_backend():
    return ApiBackend(base_url="http://test", transport=httpx.ASGITransport(app=app))


def test_format_brl():
    assert format_brl("1234.5") == "R$ 1.234,50"
    assert format_brl(0) == "R$ 0,00"


def test_resolve_command():
    command, args = resolve_command(["expenses", "toggle", "abc"])
    assert command.__name__ == "cmd_expenses_toggle"
    assert args == ["abc"]

    command, _ = resolve_command(["nada"])
    assert command is None


async def test_unknown_command(capsys):
    assert await main(["nada"], backend=api_backend(), token_store=MemoryTokenStore()) == 1
    assert "Comando desconhecido" in capsys.readouterr().out


async def test_commands_require_login(capsys):
    code = await main(["contracts", "list"], backend=api_backend(), token_store=MemoryTokenStore())
    assert code == 1
    assert "Você precisa estar logado" in capsys.readouterr().out


async def test_dashboard(client, alice, capsys):
    contract = await create_contract(client, alice)
    await create_revenue(client, alice, contract["id"], value="1000.00", month=3, year=2025)
    await create_expense(client, alice, value="400.00", due_date="2025-03-15")

    code = await main(
        ["dashboard", "3", "2025"], backend=api_backend(), token_store=MemoryTokenStore(alice["token"])
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Receitas: R$ 1.000,00" in out
    assert "Lucro líquido: R$ 600,00" in out


async def test_admin_commands_blocked_for_regular_user(alice, capsys):
    code = await main(["users", "list"], backend=api_backend(), token_store=MemoryTokenStore(alice["token"]))
    assert code == 1
    assert "Apenas administradores" in capsys.readouterr().out


async def test_admin_lists_users(admin, alice, capsys):
    code = await main(["users", "list"], backend=api_backend(), token_store=MemoryTokenStore(admin["token"]))
    assert code == 0
    assert "Total: 2 usuários" in capsys.readouterr().out


async def test_non_numeric_period_is_reported(alice, capsys):
    code = await main(
        ["dashboard", "marco"], backend=api_backend(), token_store=MemoryTokenStore(alice["token"])
    )
    assert code == 1
    assert "✗ Erro: Uso: imobras dashboard [mes] [ano]" in capsys.readouterr().out


async def test_invalid_month_and_year_are_reported(alice, capsys):
    tokens = MemoryTokenStore(alice["token"])

    assert await main(["expenses", "list", "13", "2025"], backend=api_backend(), token_store=tokens) == 1
    assert "Uso: imobras expenses list [mes] [ano]" in capsys.readouterr().out

    assert await main(["yearly", "2025a"], backend=api_backend(), token_store=tokens) == 1
    assert "Uso: imobras yearly [ano]" in capsys.readouterr().out
