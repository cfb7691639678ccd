"""
Imobras - Dashboard Service
Resumos mensal e anual calculados a partir das listagens de receitas e despesas.
Nada é armazenado: cada chamada recalcula tudo.
"""
from decimal import Decimal
from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.policy import Principal
from imobras.models import ExpenseStatus, RevenueType
from .contracts import ContractService
from .expenses import ExpenseService
from .revenues import RevenueService

CENTS = Decimal("0.01")

MONTH_LABELS = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]


def money_sum(values: Iterable) -> Decimal:
    """Soma decimal arredondada em centavos"""
    total = sum((Decimal(str(v)) for v in values), Decimal("0"))
    return total.quantize(CENTS)


def summarize_month(revenues, expenses, month: int, year: int, active_contracts: int = 0) -> dict:
    """Totais do mês: receitas, despesas (pagas/pendentes) e lucro líquido"""
    month_revenues = [r for r in revenues if r.month == month and r.year == year]
    month_expenses = [e for e in expenses if e.month == month and e.year == year]

    total_revenue = money_sum(r.value for r in month_revenues)
    total_expense = money_sum(e.value for e in month_expenses)

    return {
        "month": month,
        "year": year,
        "total_revenue": total_revenue,
        "total_expense": total_expense,
        "paid_expense": money_sum(
            e.value for e in month_expenses if e.status == ExpenseStatus.PAID.value
        ),
        "pending_expense": money_sum(
            e.value for e in month_expenses if e.status == ExpenseStatus.PENDING.value
        ),
        "net_profit": total_revenue - total_expense,
        "active_contracts": active_contracts,
        "revenue_count": len(month_revenues),
        "expense_count": len(month_expenses),
    }


def summarize_year(revenues, expenses, year: int) -> dict:
    """Quebra mensal (12 meses), totais, receita por tipo e despesa por status"""
    year_revenues = [r for r in revenues if r.year == year]
    year_expenses = [e for e in expenses if e.year == year]

    months = []
    for index, label in enumerate(MONTH_LABELS):
        month = index + 1
        revenue = money_sum(r.value for r in year_revenues if r.month == month)
        expense = money_sum(e.value for e in year_expenses if e.month == month)
        months.append({
            "month": month,
            "label": label,
            "revenue": revenue,
            "expense": expense,
            "profit": revenue - expense,
        })

    revenue_by_type = {t.value: Decimal("0.00") for t in RevenueType}
    for r in year_revenues:
        revenue_by_type[r.type] = money_sum([revenue_by_type.get(r.type, 0), r.value])

    expense_by_status = {s.value: Decimal("0.00") for s in ExpenseStatus}
    for e in year_expenses:
        expense_by_status[e.status] = money_sum([expense_by_status.get(e.status, 0), e.value])

    total_revenue = money_sum(r.value for r in year_revenues)
    total_expense = money_sum(e.value for e in year_expenses)

    return {
        "year": year,
        "months": months,
        "total_revenue": total_revenue,
        "total_expense": total_expense,
        "total_profit": total_revenue - total_expense,
        "revenue_by_type": revenue_by_type,
        "expense_by_status": expense_by_status,
    }


class DashboardService:
    """Agrega as listagens dos serviços de CRUD no escopo do principal"""

    def __init__(self, db: AsyncSession, principal: Principal):
        self.contracts = ContractService(db, principal)
        self.revenues = RevenueService(db, principal)
        self.expenses = ExpenseService(db, principal)

    async def summarize(self, month: int, year: int) -> dict:
        contracts = await self.contracts.list()
        revenues = await self.revenues.list(month=month, year=year)
        expenses = await self.expenses.list(month=month, year=year)
        return summarize_month(revenues, expenses, month, year, active_contracts=len(contracts))

    async def summarize_yearly(self, year: int) -> dict:
        revenues = await self.revenues.list(year=year)
        expenses = await self.expenses.list(year=year)
        return summarize_year(revenues, expenses, year)
