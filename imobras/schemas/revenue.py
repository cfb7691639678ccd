"""
Imobras - Revenue Schemas
"""
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from imobras.models.revenue import RevenueType


class RevenueCreate(BaseModel):
    contract_id: str = Field(..., min_length=1)
    type: RevenueType
    value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1900, le=2100)

    class Config:
        use_enum_values = True


class RevenueResponse(BaseModel):
    id: str
    user_id: str
    contract_id: str
    contract_name: str
    type: str
    value: Decimal
    month: int
    year: int
    created_at: Optional[str] = None
