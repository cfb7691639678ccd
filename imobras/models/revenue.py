"""
Imobras - Revenue Model
Receitas mensais vinculadas a contratos
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, DateTime, Integer, Numeric

from imobras.database import Base

# Rótulo exibido quando o contrato referenciado foi excluído
REMOVED_CONTRACT_LABEL = "Contrato removido"


class RevenueType(str, Enum):
    """Tipo da receita"""
    ADMIN = "admin"           # Taxa de administração
    LOCATION = "location"     # Aluguel
    INSURANCE = "insurance"   # Seguro


class Revenue(Base):
    """
    Modelo de Receita.
    contract_id é uma referência fraca (sem FK): a exclusão do contrato
    não remove a receita, que passa a exibir REMOVED_CONTRACT_LABEL.
    """
    __tablename__ = "revenues"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    contract_id = Column(String(36), nullable=False, index=True)

    type = Column(String(20), nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self, contract_name: str = None):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "contract_id": self.contract_id,
            "contract_name": contract_name or REMOVED_CONTRACT_LABEL,
            "type": self.type,
            "value": self.value,
            "month": self.month,
            "year": self.year,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
