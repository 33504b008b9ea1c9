"""
Training Attendee Model - Employees registered for a training
"""
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from atams.db import Base

from app.core.enums import AttendeeStatus
from app.db.types import BigIntId


class TrainingAttendee(Base):
    """Training attendee model for hris schema - Table: hris.training_attendees"""
    __tablename__ = "training_attendees"
    __table_args__ = (
        UniqueConstraint("training_id", "user_id", name="uq_training_attendee"),
        {"schema": "hris"},
    )

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    training_id = Column(BigInteger, ForeignKey("hris.training_records.id"), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=False, index=True)
    attendance_status = Column(String(20), nullable=False, default=AttendeeStatus.REGISTERED.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    user = relationship("User")
