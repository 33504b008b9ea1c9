"""
User Model - Employee records
"""
from sqlalchemy import Column, String, Date, DateTime, Boolean, Text
from sqlalchemy.sql import func
from atams.db import Base

from app.core.enums import Role
from app.db.types import BigIntId


class User(Base):
    """User model for hris schema - Table: hris.users"""
    __tablename__ = "users"
    __table_args__ = {"schema": "hris"}

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(String(20), nullable=False, default=Role.EMPLOYEE.value)  # admin, manager, employee
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=True)
    department = Column(String(50), nullable=True)
    position = Column(String(100), nullable=True)
    employee_id = Column(String(50), nullable=True, unique=True)
    qr_code = Column(String(255), nullable=True, unique=True)
    join_date = Column(Date, nullable=False)
    address = Column(Text, nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)  # False = soft deleted
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
