"""
Imobras - Revenues API
Inclusão, consulta e exclusão de receitas
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.database import get_db
from imobras.core import Principal
from imobras.schemas import RevenueCreate, RevenueResponse
from imobras.services import RevenueService
from imobras.api.auth import get_current_principal

router = APIRouter(prefix="/revenues", tags=["Revenues"])


def get_service(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
) -> RevenueService:
    return RevenueService(db, principal)


@router.get("", response_model=List[RevenueResponse])
async def list_revenues(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1900, le=2100),
    service: RevenueService = Depends(get_service)
):
    """Lista receitas com o nome do contrato (ou 'Contrato removido')"""
    revenues = await service.list(month=month, year=year)
    names = await service.contract_names(revenues)
    return [r.to_dict(contract_name=names.get(r.contract_id)) for r in revenues]


@router.get("/{revenue_id}", response_model=RevenueResponse)
async def get_revenue(revenue_id: str, service: RevenueService = Depends(get_service)):
    """Retorna uma receita específica"""
    revenue = await service.get(revenue_id)
    names = await service.contract_names([revenue])
    return revenue.to_dict(contract_name=names.get(revenue.contract_id))


@router.post("", response_model=RevenueResponse, status_code=status.HTTP_201_CREATED)
async def create_revenue(request: RevenueCreate, service: RevenueService = Depends(get_service)):
    """Cria nova receita para um contrato existente"""
    revenue = await service.create(request)
    names = await service.contract_names([revenue])
    return revenue.to_dict(contract_name=names.get(revenue.contract_id))


@router.delete("/{revenue_id}")
async def delete_revenue(revenue_id: str, service: RevenueService = Depends(get_service)):
    """Remove receita"""
    await service.delete(revenue_id)
    return {"message": "Receita excluída com sucesso"}
