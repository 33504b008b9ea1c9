"""
Attendance Service - Main business logic for attendance operations
"""
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime, date
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.enums import AttendanceStatus, CheckMethod
from app.models.attendance import Attendance as AttendanceModel
from app.models.user import User as UserModel
from app.repositories.attendance_repository import AttendanceRepository
from app.repositories.user_repository import UserRepository
from app.repositories.used_jti_repository import UsedJtiRepository
from app.services.bulk_service import BulkService
from app.services.jwt_service import JwtService
from app.schemas.attendance import (
    Attendance,
    AttendanceCreate,
    AttendanceUpdate,
    AttendanceWithUser,
    BulkAttendanceCreate,
    CheckResponse,
    QrTokenResponse
)
from atams.exceptions import (
    NotFoundException,
    BadRequestException,
    ConflictException
)
from atams.logging import get_logger

logger = get_logger(__name__)


def late_cutoff():
    return datetime.strptime(settings.LATE_CHECKIN_AFTER, "%H:%M").time()


class AttendanceService:
    def __init__(self) -> None:
        self.repo = AttendanceRepository()
        self.user_repo = UserRepository()
        self.jti_repo = UsedJtiRepository()
        self.jwt_service = JwtService()
        self.bulk_service = BulkService()

    def _validate_times(self, check_in: Optional[datetime], check_out: Optional[datetime], stored: bool = False) -> None:
        """Submitted times must agree on timezone awareness; stored rows may not"""
        if check_in is None or check_out is None:
            return
        if (check_in.tzinfo is None) != (check_out.tzinfo is None):
            if stored:
                return
            raise BadRequestException("checkInTime and checkOutTime must both include a timezone or both omit it")
        if check_out < check_in:
            raise BadRequestException("checkOutTime cannot be earlier than checkInTime")

    def record_attendance(
        self,
        db: Session,
        user_id: int,
        attendance_date: date,
        fields: Dict[str, Any]
    ) -> Tuple[AttendanceModel, bool]:
        """
        Upsert the attendance row keyed by (user, date)

        An existing row only receives the submitted fields. An insert that loses
        the race against a concurrent insert of the same key is retried as an
        update of the row that won.

        Returns:
            (row, created)

        Raises:
            NotFoundException: User does not exist
            BadRequestException: Check-out before check-in
        """
        if not self.user_repo.exists(db, user_id):
            raise NotFoundException(f"User with ID {user_id} not found")

        fields = {k: v for k, v in fields.items() if not (k == "status" and v is None)}
        self._validate_times(fields.get("check_in_time"), fields.get("check_out_time"))

        existing = self.repo.get_by_user_and_date(db, user_id, attendance_date)
        if existing is not None:
            self._validate_times(
                fields.get("check_in_time", existing.check_in_time),
                fields.get("check_out_time", existing.check_out_time),
                stored=True
            )
            return self.repo.update(db, existing, fields), False

        data = {"status": AttendanceStatus.PRESENT.value, **fields, "user_id": user_id, "date": attendance_date}
        try:
            return self.repo.create(db, data), True
        except IntegrityError:
            db.rollback()
            existing = self.repo.get_by_user_and_date(db, user_id, attendance_date)
            if existing is None:
                raise
            return self.repo.update(db, existing, fields), False

    def record(self, db: Session, payload: AttendanceCreate) -> Tuple[Attendance, bool]:
        fields = payload.model_dump(exclude_unset=True, exclude={"user_id", "date"})
        row, created = self.record_attendance(db, payload.user_id, payload.date, fields)
        return Attendance.model_validate(row), created

    def update_attendance(self, db: Session, attendance_id: int, payload: AttendanceUpdate) -> Attendance:
        row = self.repo.get(db, attendance_id)
        if not row:
            raise NotFoundException(f"Attendance with ID {attendance_id} not found")

        update_data = payload.model_dump(exclude_unset=True)
        if "status" in update_data and update_data["status"] is None:
            raise BadRequestException("status cannot be null")
        self._validate_times(
            update_data.get("check_in_time", row.check_in_time),
            update_data.get("check_out_time", row.check_out_time),
            stored="check_in_time" not in update_data or "check_out_time" not in update_data
        )

        row = self.repo.update(db, row, update_data)
        return Attendance.model_validate(row)

    def get_today_attendance(self, db: Session) -> List[AttendanceWithUser]:
        rows = self.repo.get_by_date_with_users(db, date.today())
        return [AttendanceWithUser.model_validate(r) for r in rows]

    def get_user_attendance(
        self,
        db: Session,
        user_id: int,
        target_date: Optional[date] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None
    ) -> List[Attendance]:
        """
        Get a user's attendance for one date, an inclusive range, or all dates

        Raises:
            BadRequestException: Range end before range start
        """
        if target_date is not None:
            date_from = date_to = target_date
        elif date_from and date_to and date_to < date_from:
            raise BadRequestException("endDate cannot be earlier than startDate")

        rows = self.repo.get_user_attendance(db, user_id, date_from, date_to)
        return [Attendance.model_validate(r) for r in rows]

    def bulk_mark(self, db: Session, payload: BulkAttendanceCreate) -> Dict[str, Any]:
        """Upsert the same attendance for every listed employee on one date"""
        fields = payload.model_dump(exclude_unset=True, exclude={"date", "employee_ids"})
        fields["status"] = AttendanceStatus(payload.status).value

        def mark_one(user_id: int) -> Attendance:
            row, _ = self.record_attendance(db, user_id, payload.date, dict(fields))
            return Attendance.model_validate(row)

        return self.bulk_service.run(
            db,
            payload.employee_ids,
            mark_one,
            key_name="userId",
            key_of=lambda user_id: user_id,
            label="Bulk attendance"
        )

    def issue_qr_token(self, db: Session, user_id: int) -> QrTokenResponse:
        token_data = self.jwt_service.generate_attendance_token(user_id)
        return QrTokenResponse(
            token=token_data["token"],
            user_id=user_id,
            expires_in=token_data["expires_in"]
        )

    def _active_user(self, db: Session, user_id: int) -> UserModel:
        user = self.user_repo.get(db, user_id)
        if not user or not user.is_active:
            raise NotFoundException(f"Active user with ID {user_id} not found")
        return user

    def check_in_or_out(
        self,
        db: Session,
        user: UserModel,
        method: CheckMethod,
        now: Optional[datetime] = None
    ) -> CheckResponse:
        """
        Check in if today has no check-in yet, otherwise check out

        Check-ins after LATE_CHECKIN_AFTER are marked late.

        Raises:
            ConflictException: Already checked in and out today
        """
        if now is None:
            now = datetime.now()
        today = now.date()
        method_value = CheckMethod(method).value

        existing = self.repo.get_by_user_and_date(db, user.id, today)

        if existing is None or existing.check_in_time is None:
            status = AttendanceStatus.LATE if now.time() > late_cutoff() else AttendanceStatus.PRESENT
            row, _ = self.record_attendance(db, user.id, today, {
                "check_in_time": now,
                "check_in_method": method_value,
                "status": status.value
            })
            action = "checked-in"
            message = f"Checked in at {now.strftime('%H:%M')}"
        elif existing.check_out_time is None:
            row, _ = self.record_attendance(db, user.id, today, {
                "check_out_time": now,
                "check_out_method": method_value
            })
            action = "checked-out"
            message = f"Checked out at {now.strftime('%H:%M')}"
        else:
            raise ConflictException("Already checked in and out today")

        logger.info(
            "Attendance check recorded",
            extra={"extra_data": {"user_id": user.id, "action": action, "method": method_value}}
        )

        return CheckResponse(
            action=action,
            attendance=Attendance.model_validate(row),
            timestamp=now,
            message=message
        )

    def scan_qr(self, db: Session, token: str) -> CheckResponse:
        """
        Process a scanned employee QR token

        Raises:
            BadRequestException: Invalid or expired token
            NotFoundException: Token user missing or inactive
            ConflictException: Token already used
        """
        try:
            payload = self.jwt_service.verify_token(token)
        except BadRequestException as e:
            raise BadRequestException(f"Token validation failed: {e.message}")

        user = self._active_user(db, payload["uid"])

        if not self.jti_repo.mark_jti_as_used(db, user.id, payload["jti"]):
            raise ConflictException("Replay detected")

        return self.check_in_or_out(db, user, CheckMethod.QR_CODE)

    def biometric_check(self, db: Session, user_id: int) -> CheckResponse:
        """Device-confirmed check for an employee"""
        user = self._active_user(db, user_id)
        return self.check_in_or_out(db, user, CheckMethod.BIOMETRIC)
