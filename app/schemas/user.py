"""
User Schemas for request/response validation
"""
from typing import Optional
from datetime import datetime, date
from pydantic import EmailStr, Field, field_validator

from app.core.enums import Role, Department
from app.schemas.common import CamelModel, normalize_pg_datetime


class UserBase(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = None
    department: Optional[Department] = None
    position: Optional[str] = None
    employee_id: Optional[str] = None
    qr_code: Optional[str] = None
    address: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserCreate(UserBase):
    role: Optional[Role] = None
    join_date: Optional[date] = None


class UserUpdate(CamelModel):
    username: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[Role] = None
    department: Optional[Department] = None
    position: Optional[str] = None
    employee_id: Optional[str] = None
    qr_code: Optional[str] = None
    join_date: Optional[date] = None
    address: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: Optional[bool] = None


class UserInDB(UserBase):
    id: int
    role: Role
    join_date: date
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator('created_at', 'updated_at', mode='before')
    @classmethod
    def fix_datetime_timezone(cls, v):
        return normalize_pg_datetime(v)


class User(UserInDB):
    pass


class UserSummary(CamelModel):
    """Employee fields embedded in attendance and leave listings"""
    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    department: Optional[Department] = None
    position: Optional[str] = None
    employee_id: Optional[str] = None
