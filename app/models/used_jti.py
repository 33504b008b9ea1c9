"""
Used JTI Model - Consumed QR attendance tokens
"""
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from atams.db import Base


class UsedJti(Base):
    """Used JTI model for hris schema - Table: hris.used_jti"""
    __tablename__ = "used_jti"
    __table_args__ = {"schema": "hris"}

    user_id = Column(BigInteger, ForeignKey("hris.users.id"), primary_key=True)
    jti = Column(String(64), primary_key=True, index=True)  # JWT ID
    used_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
