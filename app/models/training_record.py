"""
Training Record Model - Scheduled or completed training sessions
"""
from sqlalchemy import Column, BigInteger, String, Date, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from atams.db import Base

from app.core.enums import TrainingStatus
from app.db.types import BigIntId


class TrainingRecord(Base):
    """Training record model for hris schema - Table: hris.training_records"""
    __tablename__ = "training_records"
    __table_args__ = {"schema": "hris"}

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    training_title = Column(String(255), nullable=False)
    training_type = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    department = Column(String(50), nullable=True)
    status = Column(String(20), nullable=False, default=TrainingStatus.SCHEDULED.value)
    trainer_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=True)
    venue = Column(String(255), nullable=True)
    objectives = Column(Text, nullable=True)
    materials = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
