"""
Leave Request Schemas
"""
from typing import Literal, Optional
from datetime import datetime, date
from pydantic import field_validator

from app.core.enums import LeaveStatus, LeaveType
from app.schemas.common import CamelModel, normalize_pg_datetime
from app.schemas.user import UserSummary


class LeaveRequestCreate(CamelModel):
    user_id: int
    start_date: date
    end_date: date
    type: LeaveType
    reason: Optional[str] = None


class LeaveDecision(CamelModel):
    status: Literal["approved", "rejected"]
    notes: Optional[str] = None


class LeaveRequestInDB(CamelModel):
    id: int
    user_id: int
    start_date: date
    end_date: date
    type: LeaveType
    reason: Optional[str] = None
    status: LeaveStatus
    approved_by_id: Optional[int] = None
    request_date: datetime
    response_date: Optional[datetime] = None
    response_notes: Optional[str] = None

    @field_validator('request_date', 'response_date', mode='before')
    @classmethod
    def fix_datetime_timezone(cls, v):
        return normalize_pg_datetime(v)


class LeaveRequest(LeaveRequestInDB):
    pass


class LeaveRequestWithUser(LeaveRequest):
    user: Optional[UserSummary] = None
