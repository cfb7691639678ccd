"""
Imobras - Contract Schemas
"""
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class ContractCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    owner_name: str = Field(..., min_length=1, max_length=255)
    owner_document: str = Field(..., min_length=1, max_length=20)
    tenant_name: str = Field(..., min_length=1, max_length=255)
    tenant_document: str = Field(..., min_length=1, max_length=20)
    property_address: str = Field(..., min_length=1)
    property_iptu: str = Field(..., min_length=1, max_length=50)
    property_due_day: int = Field(..., ge=1, le=31)
    property_type: str = Field("Apartamento", max_length=50)
    start_date: date
    end_date: date
    rent_value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    iptu_value: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    admin_fee_percentage: Decimal = Field(Decimal("0"), ge=0, le=100, decimal_places=2)


class ContractUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    owner_name: Optional[str] = Field(None, min_length=1, max_length=255)
    owner_document: Optional[str] = Field(None, min_length=1, max_length=20)
    tenant_name: Optional[str] = Field(None, min_length=1, max_length=255)
    tenant_document: Optional[str] = Field(None, min_length=1, max_length=20)
    property_address: Optional[str] = Field(None, min_length=1)
    property_iptu: Optional[str] = Field(None, min_length=1, max_length=50)
    property_due_day: Optional[int] = Field(None, ge=1, le=31)
    property_type: Optional[str] = Field(None, max_length=50)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    rent_value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    iptu_value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    admin_fee_percentage: Optional[Decimal] = Field(None, ge=0, le=100, decimal_places=2)


class ContractResponse(BaseModel):
    id: str
    user_id: str
    name: str
    owner_name: str
    owner_document: str
    tenant_name: str
    tenant_document: str
    property_address: str
    property_iptu: str
    property_due_day: int
    property_type: Optional[str] = "Apartamento"
    start_date: date
    end_date: date
    rent_value: Decimal
    iptu_value: Decimal
    admin_fee_percentage: Decimal
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        from_attributes = True
