"""
Imobras - Dashboard API
Resumo mensal e visão geral anual
"""
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.database import get_db
from imobras.core import Principal
from imobras.schemas import MonthlySummary, YearlySummary
from imobras.services import DashboardService
from imobras.api.auth import get_current_principal

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_service(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
) -> DashboardService:
    return DashboardService(db, principal)


@router.get("/summary", response_model=MonthlySummary)
async def get_monthly_summary(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1900, le=2100),
    service: DashboardService = Depends(get_service)
):
    """Resumo financeiro do mês (padrão: mês corrente)"""
    today = datetime.utcnow()
    return await service.summarize(month or today.month, year or today.year)


@router.get("/yearly", response_model=YearlySummary)
async def get_yearly_summary(
    year: Optional[int] = Query(None, ge=1900, le=2100),
    service: DashboardService = Depends(get_service)
):
    """Visão geral anual: meses, receita por tipo e despesa por status"""
    return await service.summarize_yearly(year or datetime.utcnow().year)
