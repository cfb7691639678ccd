"""
Imobras - Expense Service
CRUD de despesas e alternância pago/pendente
"""
import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.policy import Principal
from imobras.models import Expense, ExpenseStatus
from imobras.schemas import ExpenseCreate, ExpenseUpdate
from .access import scope_query, get_scoped

logger = logging.getLogger(__name__)


class ExpenseService:
    """
    month/year são derivados de due_date somente quando due_date é gravado
    (create, ou update que traga novo vencimento).
    """

    def __init__(self, db: AsyncSession, principal: Principal):
        self.db = db
        self.principal = principal

    async def list(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
        status: Optional[str] = None
    ) -> List[Expense]:
        query = scope_query(select(Expense), Expense, self.principal)

        if month is not None:
            query = query.where(Expense.month == month)
        if year is not None:
            query = query.where(Expense.year == year)
        if status:
            query = query.where(Expense.status == status)

        query = query.order_by(Expense.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, expense_id: str) -> Expense:
        return await get_scoped(
            self.db, Expense, expense_id, self.principal, "Despesa não encontrada"
        )

    async def create(self, request: ExpenseCreate) -> Expense:
        data = request.model_dump()
        expense = Expense(
            **data,
            month=request.due_date.month,
            year=request.due_date.year,
            user_id=self.principal.identity_id
        )
        self.db.add(expense)
        await self.db.commit()
        await self.db.refresh(expense)

        logger.info(f"Despesa {expense.id} criada por {self.principal.email}")
        return expense

    async def update(self, expense_id: str, request: ExpenseUpdate) -> Expense:
        expense = await self.get(expense_id)

        update_data = request.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is not None:
                setattr(expense, field, value)

        if update_data.get("due_date") is not None:
            expense.month = expense.due_date.month
            expense.year = expense.due_date.year

        await self.db.commit()
        await self.db.refresh(expense)

        logger.info(f"Despesa {expense.id} atualizada por {self.principal.email}")
        return expense

    async def toggle_status(self, expense_id: str) -> Expense:
        """Alterna pago <-> pendente"""
        expense = await self.get(expense_id)

        if expense.status == ExpenseStatus.PAID.value:
            expense.status = ExpenseStatus.PENDING.value
        else:
            expense.status = ExpenseStatus.PAID.value

        await self.db.commit()
        await self.db.refresh(expense)

        logger.info(f"Despesa {expense.id} marcada como {expense.status} por {self.principal.email}")
        return expense

    async def delete(self, expense_id: str):
        expense = await self.get(expense_id)

        await self.db.delete(expense)
        await self.db.commit()

        logger.info(f"Despesa {expense_id} removida por {self.principal.email}")
