"""
Attendance Endpoints - Daily records, bulk marking, QR and biometric check-in
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.attendance_service import AttendanceService
from app.schemas import (
    Attendance,
    AttendanceCreate,
    AttendanceUpdate,
    BulkAttendanceCreate,
    ScanRequest,
    BiometricRequest,
    QrTokenResponse,
    CheckResponse,
    DataResponse,
    BulkResponse
)
from app.models.user import User as UserModel
from app.core.enums import role_level, Role
from app.api.deps import get_current_employee, require_admin, require_manager
from app.core.config import settings
from atams.encryption import encrypt_response_data
from atams.exceptions import BadRequestException, ForbiddenException

router = APIRouter()
attendance_service = AttendanceService()


def _parse_date(value: Optional[str], name: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise BadRequestException(f"Invalid {name} format. Use YYYY-MM-DD")


@router.get(
    "/today",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def get_today_attendance(
    db: Session = Depends(get_db)
):
    """
    Today's attendance for every employee, with the employee attached
    """
    rows = attendance_service.get_today_attendance(db)

    response = DataResponse(
        success=True,
        message="Attendance retrieved successfully",
        data=rows
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/user/{user_id}",
    status_code=status.HTTP_200_OK
)
async def get_user_attendance(
    user_id: int,
    date_str: Optional[str] = Query(None, alias="date", description="Single date (YYYY-MM-DD)"),
    start_date: Optional[str] = Query(None, alias="startDate", description="Range start (YYYY-MM-DD)"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Range end (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Attendance history for one employee

    **Authorization:**
    - Own history, or manager/admin for anyone

    **Query Parameters:**
    - date: a single day, or
    - startDate / endDate: inclusive range (either end optional)
    """
    if user_id != current_employee.id and role_level(current_employee.role) < role_level(Role.MANAGER):
        raise ForbiddenException("You can only view your own attendance")

    rows = attendance_service.get_user_attendance(
        db,
        user_id,
        target_date=_parse_date(date_str, "date"),
        date_from=_parse_date(start_date, "startDate"),
        date_to=_parse_date(end_date, "endDate")
    )

    response = DataResponse(
        success=True,
        message="Attendance retrieved successfully",
        data=rows
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/qr-token",
    response_model=DataResponse[QrTokenResponse],
    status_code=status.HTTP_200_OK
)
async def get_qr_token(
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Issue a short-lived QR token for the signed-in employee

    **Response:**
    - token: signed JWT to render as a QR code
    - expiresIn: seconds until the token expires
    """
    token_response = attendance_service.issue_qr_token(db, current_employee.id)

    return DataResponse(
        success=True,
        message="QR token generated successfully",
        data=token_response
    )


@router.post(
    "",
    response_model=DataResponse[Attendance],
    status_code=status.HTTP_201_CREATED
)
async def record_attendance(
    attendance: AttendanceCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Record attendance for an employee and date

    Re-submitting for the same employee and date updates the existing row.

    **Authorization:**
    - Own attendance, or manager/admin for anyone

    **Response:**
    - 201 when a row was created, 200 when an existing row was updated
    """
    if attendance.user_id != current_employee.id and role_level(current_employee.role) < role_level(Role.MANAGER):
        raise ForbiddenException("You can only record your own attendance")

    row, created = attendance_service.record(db, attendance)
    if not created:
        response.status_code = status.HTTP_200_OK

    return DataResponse(
        success=True,
        message="Attendance recorded successfully" if created else "Attendance updated successfully",
        data=row
    )


@router.post(
    "/bulk",
    response_model=BulkResponse[Attendance],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)]
)
async def bulk_mark_attendance(
    payload: BulkAttendanceCreate,
    db: Session = Depends(get_db)
):
    """
    Mark the same attendance for many employees on one date

    **Authorization:**
    - Admin only

    **Response:**
    - errors: [{userId, error}] for employees that could not be marked
    """
    summary = attendance_service.bulk_mark(db, payload)

    return BulkResponse(
        success=True,
        message=f"Processed {summary['processed']} attendance records",
        **summary
    )


@router.put(
    "/{attendance_id}",
    response_model=DataResponse[Attendance],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_manager)]
)
async def update_attendance(
    attendance_id: int,
    attendance: AttendanceUpdate,
    db: Session = Depends(get_db)
):
    """
    Correct an attendance row

    **Authorization:**
    - Manager or admin
    """
    row = attendance_service.update_attendance(db, attendance_id, attendance)

    return DataResponse(
        success=True,
        message="Attendance updated successfully",
        data=row
    )


@router.post(
    "/scan",
    response_model=DataResponse[CheckResponse],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def scan_attendance(
    request: ScanRequest,
    db: Session = Depends(get_db)
):
    """
    Process a scanned employee QR code (check-in/check-out)

    **Flow:**
    1. Verify the token signature, expiry and issuer
    2. Reject a token id that was already used
    3. Check in if today has no check-in, otherwise check out

    **Errors:**
    - 400: Invalid or expired token
    - 409: Token replayed, or already checked in and out today
    """
    result = attendance_service.scan_qr(db, request.token)

    return DataResponse(
        success=True,
        message=result.message,
        data=result
    )


@router.post(
    "/biometric",
    response_model=DataResponse[CheckResponse],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_manager)]
)
async def biometric_check(
    request: BiometricRequest,
    db: Session = Depends(get_db)
):
    """
    Check an employee in or out from a biometric device

    **Authorization:**
    - Manager or admin (device account)
    """
    result = attendance_service.biometric_check(db, request.user_id)

    return DataResponse(
        success=True,
        message=result.message,
        data=result
    )
