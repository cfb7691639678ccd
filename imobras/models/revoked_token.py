"""
Imobras - Revoked Token Model
Tokens invalidados no logout
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime

from imobras.database import Base


class RevokedToken(Base):
    __tablename__ = "revoked_tokens"

    jti = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    expires_at = Column(DateTime)
    revoked_at = Column(DateTime, default=datetime.utcnow)
