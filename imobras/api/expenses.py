"""
Imobras - Expenses API
CRUD de despesas
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.database import get_db
from imobras.core import Principal
from imobras.models import ExpenseStatus
from imobras.schemas import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from imobras.services import ExpenseService
from imobras.api.auth import get_current_principal

router = APIRouter(prefix="/expenses", tags=["Expenses"])


def get_service(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
) -> ExpenseService:
    return ExpenseService(db, principal)


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1900, le=2100),
    status_filter: Optional[ExpenseStatus] = Query(None, alias="status"),
    service: ExpenseService = Depends(get_service)
):
    """Lista despesas, com filtros opcionais de período e status"""
    expenses = await service.list(
        month=month,
        year=year,
        status=status_filter.value if status_filter else None
    )
    return [e.to_dict() for e in expenses]


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(expense_id: str, service: ExpenseService = Depends(get_service)):
    """Retorna uma despesa específica"""
    expense = await service.get(expense_id)
    return expense.to_dict()


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(request: ExpenseCreate, service: ExpenseService = Depends(get_service)):
    """Cria nova despesa (mês/ano derivados do vencimento)"""
    expense = await service.create(request)
    return expense.to_dict()


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: str,
    request: ExpenseUpdate,
    service: ExpenseService = Depends(get_service)
):
    """Atualiza despesa"""
    expense = await service.update(expense_id, request)
    return expense.to_dict()


@router.patch("/{expense_id}/toggle-status", response_model=ExpenseResponse)
async def toggle_expense_status(expense_id: str, service: ExpenseService = Depends(get_service)):
    """Alterna status pago/pendente"""
    expense = await service.toggle_status(expense_id)
    return expense.to_dict()


@router.delete("/{expense_id}")
async def delete_expense(expense_id: str, service: ExpenseService = Depends(get_service)):
    """Remove despesa"""
    await service.delete(expense_id)
    return {"message": "Despesa excluída com sucesso"}
