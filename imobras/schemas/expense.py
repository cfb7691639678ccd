"""
Imobras - Expense Schemas
"""
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from imobras.models.expense import ExpenseStatus


class ExpenseCreate(BaseModel):
    description: str = Field(..., min_length=1)
    value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    due_date: date
    status: ExpenseStatus = ExpenseStatus.PENDING
    bank: str = Field("", max_length=100)
    payment_method: str = Field("", max_length=50)

    class Config:
        use_enum_values = True


class ExpenseUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1)
    value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    due_date: Optional[date] = None
    status: Optional[ExpenseStatus] = None
    bank: Optional[str] = Field(None, max_length=100)
    payment_method: Optional[str] = Field(None, max_length=50)

    class Config:
        use_enum_values = True


class ExpenseResponse(BaseModel):
    id: str
    user_id: str
    description: str
    value: Decimal
    due_date: date
    status: str
    bank: str
    payment_method: str
    month: int
    year: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        from_attributes = True
