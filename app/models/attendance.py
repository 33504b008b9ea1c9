"""
Attendance Model - One row per employee per calendar date
"""
from sqlalchemy import Column, BigInteger, String, Date, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from atams.db import Base

from app.core.enums import AttendanceStatus
from app.db.types import BigIntId


class Attendance(Base):
    """Attendance model for hris schema - Table: hris.attendance"""
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_attendance_user_date"),
        {"schema": "hris"},
    )

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    check_in_time = Column(DateTime(timezone=True), nullable=True)
    check_out_time = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=False, default=AttendanceStatus.PRESENT.value)
    check_in_method = Column(String(20), nullable=True)
    check_out_method = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    user = relationship("User")
