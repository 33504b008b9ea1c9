"""
Leave Request Model - Time-off requests and their approval outcome
"""
from sqlalchemy import Column, BigInteger, String, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from atams.db import Base

from app.core.enums import LeaveStatus
from app.db.types import BigIntId


class LeaveRequest(Base):
    """Leave request model for hris schema - Table: hris.leave_requests"""
    __tablename__ = "leave_requests"
    __table_args__ = {"schema": "hris"}

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    type = Column(String(20), nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=LeaveStatus.PENDING.value, index=True)
    approved_by_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=True)
    request_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    response_date = Column(DateTime(timezone=True), nullable=True)
    response_notes = Column(Text, nullable=True)

    user = relationship("User", foreign_keys=[user_id])
