"""
Dashboard Service - Headline counts for today
"""
from datetime import date
from sqlalchemy.orm import Session

from app.core.enums import AttendanceStatus, LeaveStatus
from app.repositories.attendance_repository import AttendanceRepository
from app.repositories.leave_request_repository import LeaveRequestRepository
from app.repositories.user_repository import UserRepository
from app.schemas.dashboard import DashboardStats


class DashboardService:
    def __init__(self) -> None:
        self.user_repo = UserRepository()
        self.attendance_repo = AttendanceRepository()
        self.leave_repo = LeaveRequestRepository()

    def get_stats(self, db: Session) -> DashboardStats:
        today = date.today()
        return DashboardStats(
            total_employees=self.user_repo.count_active_users(db),
            present_today=self.attendance_repo.count_by_date_and_status(db, today, AttendanceStatus.PRESENT.value),
            on_leave=self.attendance_repo.count_by_date_and_status(db, today, AttendanceStatus.ON_LEAVE.value),
            pending_requests=self.leave_repo.count_by_status(db, LeaveStatus.PENDING.value)
        )
