"""
Attendance Schemas for daily records, bulk marking and check-in flows
"""
import datetime as dt
from typing import List, Literal, Optional
from pydantic import BaseModel, field_validator

from app.core.enums import AttendanceStatus, CheckMethod
from app.schemas.common import CamelModel, normalize_pg_datetime
from app.schemas.user import UserSummary


class AttendanceFields(CamelModel):
    check_in_time: Optional[dt.datetime] = None
    check_out_time: Optional[dt.datetime] = None
    status: Optional[AttendanceStatus] = None
    check_in_method: Optional[CheckMethod] = None
    check_out_method: Optional[CheckMethod] = None
    notes: Optional[str] = None


class AttendanceCreate(AttendanceFields):
    user_id: int
    date: dt.date


class AttendanceUpdate(AttendanceFields):
    pass


class AttendanceInDB(CamelModel):
    id: int
    user_id: int
    date: dt.date
    check_in_time: Optional[dt.datetime] = None
    check_out_time: Optional[dt.datetime] = None
    status: AttendanceStatus
    check_in_method: Optional[CheckMethod] = None
    check_out_method: Optional[CheckMethod] = None
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    @field_validator('check_in_time', 'check_out_time', 'created_at', 'updated_at', mode='before')
    @classmethod
    def fix_datetime_timezone(cls, v):
        return normalize_pg_datetime(v)


class Attendance(AttendanceInDB):
    pass


class AttendanceWithUser(Attendance):
    user: Optional[UserSummary] = None


class BulkAttendanceCreate(CamelModel):
    """Mark the same attendance for many employees on one date"""
    date: dt.date
    employee_ids: List[int]
    status: AttendanceStatus = AttendanceStatus.PRESENT
    check_in_time: Optional[dt.datetime] = None
    check_out_time: Optional[dt.datetime] = None
    check_in_method: Optional[CheckMethod] = None
    check_out_method: Optional[CheckMethod] = None
    notes: Optional[str] = None


# Request/Response schemas for check-in flows
class ScanRequest(BaseModel):
    """Request schema for QR scan endpoint"""
    token: str  # JWT from the employee's QR code


class BiometricRequest(CamelModel):
    """Request schema for biometric device check"""
    user_id: int


class QrTokenResponse(CamelModel):
    """Response schema for QR token endpoint"""
    token: str
    user_id: int
    expires_in: int


class CheckResponse(CamelModel):
    """Response schema for scan and biometric endpoints"""
    action: Literal["checked-in", "checked-out"]
    attendance: Attendance
    timestamp: dt.datetime
    message: str
