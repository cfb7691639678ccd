"""
Imobras - Expense Model
Despesas com vencimento, banco e forma de pagamento
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, DateTime, Date, Integer, Numeric, Text

from imobras.database import Base


class ExpenseStatus(str, Enum):
    """Status da despesa"""
    PENDING = "pending"
    PAID = "paid"


class Expense(Base):
    """
    Modelo de Despesa.
    month/year são cópias de due_date gravadas na escrita; a leitura nunca
    recalcula a partir do vencimento.
    """
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)

    description = Column(Text, nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default=ExpenseStatus.PENDING.value)
    bank = Column(String(100), nullable=False, default="")
    payment_method = Column(String(50), nullable=False, default="")

    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "description": self.description,
            "value": self.value,
            "due_date": self.due_date,
            "status": self.status,
            "bank": self.bank,
            "payment_method": self.payment_method,
            "month": self.month,
            "year": self.year,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
