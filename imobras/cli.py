"""
Imobras - CLI
Ferramenta de linha de comando sobre a API

Uso:
    imobras login
    imobras contracts list
    imobras revenues list [mes] [ano]
    imobras expenses list [mes] [ano]
    imobras expenses toggle <id>
    imobras dashboard [mes] [ano]
    imobras yearly [ano]
    imobras users list
"""
import asyncio
import getpass
import sys
from datetime import datetime
from decimal import Decimal

from imobras.core.exceptions import ImobrasError, ValidationError
from imobras.client import ApiBackend, AuthorizationGate, SessionStore

REVENUE_TYPES = {"admin": "Taxa Adm.", "location": "Aluguel", "insurance": "Seguro"}
EXPENSE_STATUS = {"paid": "Paga", "pending": "Pendente"}


def format_brl(value) -> str:
    """Formata em reais: R$ 1.234,56"""
    text = f"{Decimal(str(value)):,.2f}"
    return "R$ " + text.replace(",", "_").replace(".", ",").replace("_", ".")


def _require_args(args, count: int, usage: str):
    if len(args) < count:
        raise ValidationError(f"Uso: imobras {usage}")


def _number(value: str, usage: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Uso: imobras {usage}")


def _period(args, today, usage: str):
    month = _number(args[0], usage) if len(args) > 0 else today.month
    year = _number(args[1], usage) if len(args) > 1 else today.year
    if not 1 <= month <= 12:
        raise ValidationError(f"Uso: imobras {usage}")
    return month, year


async def cmd_login(session: SessionStore, gate: AuthorizationGate, args):
    """Login no sistema"""
    email = args[0] if args else input("Email: ").strip()
    password = getpass.getpass("Senha: ")

    identity = await session.sign_in(email, password)
    print(f"\n✓ Login bem sucedido!")
    print(f"  Usuário: {identity.email}")
    if await session.is_admin():
        print(f"  Perfil: Administrador")


async def cmd_signup(session: SessionStore, gate: AuthorizationGate, args):
    """Primeiro acesso: cria conta"""
    full_name = input("Nome completo: ").strip()
    email = input("Email: ").strip()
    password = getpass.getpass("Senha: ")

    identity = await session.sign_up(email, password, full_name)
    print(f"\n✓ Conta criada para {identity.email}. Faça login para continuar.")


async def cmd_logout(session: SessionStore, gate: AuthorizationGate, args):
    await session.sign_out()
    print("✓ Sessão encerrada")


async def cmd_whoami(session: SessionStore, gate: AuthorizationGate, args):
    async def show():
        identity = session.current_identity()
        role = "Administrador" if await session.is_admin() else "Usuário"
        print(f"{identity.display_name or 'Sem nome'} <{identity.email}> - {role}")

    await gate.run(show)


async def cmd_contracts_list(session: SessionStore, gate: AuthorizationGate, args):
    """Lista contratos"""
    async def show():
        contracts = await session.backend.list(session.token, "contracts")
        print(f"\n{'='*90}")
        print(f"{'ID':<36} | {'Nome':<20} | {'Inquilino':<18} | {'Aluguel':>12}")
        print(f"{'='*90}")
        for c in contracts:
            print(f"{c['id']:<36} | {c['name'][:20]:<20} | {c['tenant_name'][:18]:<18} | {format_brl(c['rent_value']):>12}")
        print(f"\nTotal: {len(contracts)} contratos")

    await gate.run(show)


async def cmd_revenues_list(session: SessionStore, gate: AuthorizationGate, args):
    """Lista receitas do período"""
    month, year = _period(args, datetime.now(), "revenues list [mes] [ano]")

    async def show():
        revenues = await session.backend.list(session.token, "revenues", month=month, year=year)
        print(f"\nReceitas {month:02d}/{year}")
        print(f"{'='*70}")
        for r in revenues:
            label = REVENUE_TYPES.get(r["type"], r["type"])
            print(f"{r['contract_name'][:30]:<30} | {label:<10} | {format_brl(r['value']):>14}")
        total = sum((Decimal(r["value"]) for r in revenues), Decimal("0"))
        print(f"\nTotal: {format_brl(total)}")

    await gate.run(show)


async def cmd_expenses_list(session: SessionStore, gate: AuthorizationGate, args):
    """Lista despesas do período"""
    month, year = _period(args, datetime.now(), "expenses list [mes] [ano]")

    async def show():
        expenses = await session.backend.list(session.token, "expenses", month=month, year=year)
        print(f"\nDespesas {month:02d}/{year}")
        print(f"{'='*90}")
        for e in expenses:
            status = EXPENSE_STATUS.get(e["status"], e["status"])
            print(f"{e['id']:<36} | {e['description'][:20]:<20} | {e['due_date']} | {status:<8} | {format_brl(e['value']):>12}")
        print(f"\nTotal: {len(expenses)} despesas")

    await gate.run(show)


async def cmd_expenses_toggle(session: SessionStore, gate: AuthorizationGate, args):
    """Alterna pago/pendente"""
    _require_args(args, 1, "expenses toggle <id>")

    async def toggle():
        expense = await session.backend.request(
            "PATCH", f"/expenses/{args[0]}/toggle-status", token=session.token
        )
        print(f"✓ Despesa marcada como {EXPENSE_STATUS.get(expense['status'])}")

    await gate.run(toggle)


async def cmd_dashboard(session: SessionStore, gate: AuthorizationGate, args):
    """Resumo do mês"""
    month, year = _period(args, datetime.now(), "dashboard [mes] [ano]")

    async def show():
        stats = await session.backend.request(
            "GET", "/dashboard/summary", token=session.token, params={"month": month, "year": year}
        )
        print(f"\n{'='*40}")
        print(f"  RESUMO {month:02d}/{year}")
        print(f"{'='*40}")
        print(f"  Contratos ativos: {stats['active_contracts']}")
        print(f"  Receitas: {format_brl(stats['total_revenue'])}")
        print(f"  Despesas: {format_brl(stats['total_expense'])}")
        print(f"    - Pagas: {format_brl(stats['paid_expense'])}")
        print(f"    - Pendentes: {format_brl(stats['pending_expense'])}")
        print(f"  Lucro líquido: {format_brl(stats['net_profit'])}")
        print(f"{'='*40}")

    await gate.run(show)


async def cmd_yearly(session: SessionStore, gate: AuthorizationGate, args):
    """Visão geral anual"""
    year = _number(args[0], "yearly [ano]") if args else datetime.now().year

    async def show():
        data = await session.backend.request(
            "GET", "/dashboard/yearly", token=session.token, params={"year": year}
        )
        print(f"\nVisão Geral {year}")
        print(f"{'='*56}")
        print(f"{'Mês':<5} | {'Receitas':>14} | {'Despesas':>14} | {'Lucro':>14}")
        for m in data["months"]:
            print(f"{m['label']:<5} | {format_brl(m['revenue']):>14} | {format_brl(m['expense']):>14} | {format_brl(m['profit']):>14}")
        print(f"{'='*56}")
        print(f"{'Total':<5} | {format_brl(data['total_revenue']):>14} | {format_brl(data['total_expense']):>14} | {format_brl(data['total_profit']):>14}")

    await gate.run(show)


async def cmd_users_list(session: SessionStore, gate: AuthorizationGate, args):
    """Lista usuários (admin)"""
    async def show():
        users = await session.backend.request("GET", "/users", token=session.token)
        print(f"\n{'='*80}")
        for u in users:
            role = "Admin" if u["is_admin"] else "Usuário"
            print(f"{u['id']:<36} | {(u['full_name'] or 'Sem nome')[:20]:<20} | {u['email'][:20]:<20} | {role}")
        print(f"\nTotal: {len(users)} usuários")

    await gate.run(show, requires_admin=True)


async def cmd_users_invite(session: SessionStore, gate: AuthorizationGate, args):
    """Convida usuário (admin)"""
    _require_args(args, 2, 'users invite "Nome" email [admin|user]')
    full_name, email = args[0], args[1]
    role = args[2] if len(args) > 2 else "user"
    password = getpass.getpass("Senha inicial: ")

    async def invite():
        user = await session.backend.request(
            "POST",
            "/users",
            token=session.token,
            json={"email": email, "password": password, "full_name": full_name, "role": role}
        )
        print(f"✓ {user['full_name']} adicionado como {'administrador' if user['is_admin'] else 'usuário'}")

    await gate.run(invite, requires_admin=True)


async def cmd_users_toggle_admin(session: SessionStore, gate: AuthorizationGate, args):
    _require_args(args, 1, "users toggle-admin <id>")

    async def toggle():
        roles = await session.backend.request("POST", f"/users/{args[0]}/toggle-admin", token=session.token)
        if any(r["role"] == "admin" for r in roles):
            print("✓ Privilégios de admin concedidos")
        else:
            print("✓ Privilégios de admin removidos")

    await gate.run(toggle, requires_admin=True)


async def cmd_users_delete(session: SessionStore, gate: AuthorizationGate, args):
    _require_args(args, 1, "users delete <id>")

    async def remove():
        await session.backend.request("DELETE", f"/users/{args[0]}", token=session.token)
        print("✓ Usuário removido com sucesso")

    await gate.run(remove, requires_admin=True)


COMMANDS = {
    ("login",): cmd_login,
    ("signup",): cmd_signup,
    ("logout",): cmd_logout,
    ("whoami",): cmd_whoami,
    ("contracts", "list"): cmd_contracts_list,
    ("revenues", "list"): cmd_revenues_list,
    ("expenses", "list"): cmd_expenses_list,
    ("expenses", "toggle"): cmd_expenses_toggle,
    ("dashboard",): cmd_dashboard,
    ("yearly",): cmd_yearly,
    ("users", "list"): cmd_users_list,
    ("users", "invite"): cmd_users_invite,
    ("users", "toggle-admin"): cmd_users_toggle_admin,
    ("users", "delete"): cmd_users_delete,
}


def print_help():
    print("""
Imobras - CLI
=============

Comandos disponíveis:

  imobras signup                                 - Primeiro acesso (criar conta)
  imobras login [email]                          - Fazer login
  imobras logout                                 - Encerrar sessão
  imobras whoami                                 - Usuário atual

  imobras contracts list                         - Listar contratos
  imobras revenues list [mes] [ano]              - Listar receitas
  imobras expenses list [mes] [ano]              - Listar despesas
  imobras expenses toggle <id>                   - Alternar pago/pendente
  imobras dashboard [mes] [ano]                  - Resumo do mês
  imobras yearly [ano]                           - Visão geral anual

  imobras users list                             - Listar usuários (admin)
  imobras users invite "Nome" email [admin|user] - Convidar usuário (admin)
  imobras users toggle-admin <id>                - Tornar/remover admin
  imobras users delete <id>                      - Remover usuário
""")


def resolve_command(argv):
    """Retorna (função, argumentos restantes) ou (None, argv)"""
    if len(argv) >= 2 and (argv[0], argv[1]) in COMMANDS:
        return COMMANDS[(argv[0], argv[1])], argv[2:]
    if argv and (argv[0],) in COMMANDS:
        return COMMANDS[(argv[0],)], argv[1:]
    return None, argv


async def main(argv, backend=None, token_store=None) -> int:
    command, args = resolve_command(argv)
    if command is None:
        print(f"Comando desconhecido: {' '.join(argv)}")
        print_help()
        return 1

    backend = backend or ApiBackend()
    session = SessionStore(backend, token_store=token_store)
    gate = AuthorizationGate(session)

    try:
        await session.initialize()
        await command(session, gate, args)
        return 0
    except ImobrasError as e:
        print(f"✗ Erro: {e.message}")
        return 1
    finally:
        await backend.aclose()


def run():
    if len(sys.argv) < 2 or sys.argv[1] in ("help", "-h", "--help"):
        print_help()
        sys.exit(0)

    sys.exit(asyncio.run(main(sys.argv[1:])))


if __name__ == "__main__":
    run()
