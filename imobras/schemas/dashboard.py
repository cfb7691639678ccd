"""
Imobras - Dashboard Schemas
"""
from decimal import Decimal
from pydantic import BaseModel
from typing import Dict, List


class MonthlySummary(BaseModel):
    month: int
    year: int
    total_revenue: Decimal
    total_expense: Decimal
    paid_expense: Decimal
    pending_expense: Decimal
    net_profit: Decimal
    active_contracts: int = 0
    revenue_count: int = 0
    expense_count: int = 0


class MonthBreakdown(BaseModel):
    month: int
    label: str
    revenue: Decimal
    expense: Decimal
    profit: Decimal


class YearlySummary(BaseModel):
    year: int
    months: List[MonthBreakdown]
    total_revenue: Decimal
    total_expense: Decimal
    total_profit: Decimal
    revenue_by_type: Dict[str, Decimal]
    expense_by_status: Dict[str, Decimal]
