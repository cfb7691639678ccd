"""
Imobras - Contract Model
Contratos de locação (proprietário, inquilino, imóvel e valores)
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Integer, Numeric, Text

from imobras.database import Base


class Contract(Base):
    """Modelo de Contrato de locação"""
    __tablename__ = "contracts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)

    name = Column(String(255), nullable=False, index=True)

    # Proprietário
    owner_name = Column(String(255), nullable=False)
    owner_document = Column(String(20), nullable=False)

    # Inquilino
    tenant_name = Column(String(255), nullable=False)
    tenant_document = Column(String(20), nullable=False)

    # Imóvel
    property_address = Column(Text, nullable=False)
    property_iptu = Column(String(50), nullable=False)
    property_due_day = Column(Integer, nullable=False)
    property_type = Column(String(50), default="Apartamento")

    # Vigência e valores
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    rent_value = Column(Numeric(12, 2), nullable=False, default=0)
    iptu_value = Column(Numeric(12, 2), nullable=False, default=0)
    admin_fee_percentage = Column(Numeric(5, 2), nullable=False, default=0)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "owner_name": self.owner_name,
            "owner_document": self.owner_document,
            "tenant_name": self.tenant_name,
            "tenant_document": self.tenant_document,
            "property_address": self.property_address,
            "property_iptu": self.property_iptu,
            "property_due_day": self.property_due_day,
            "property_type": self.property_type,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "rent_value": self.rent_value,
            "iptu_value": self.iptu_value,
            "admin_fee_percentage": self.admin_fee_percentage,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
