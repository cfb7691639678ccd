"""
Imobras - User Role Model
Atribuições de papel (admin/user) por identidade
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey

from imobras.database import Base
from imobras.core.policy import Role


class UserRole(Base):
    """
    Atribuição de papel.
    Não há restrição de unicidade: a mesma identidade pode ter várias linhas,
    inclusive repetidas; o que importa é existir ao menos uma com role=admin.
    """
    __tablename__ = "user_roles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    role = Column(String(20), nullable=False, default=Role.USER.value)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
