"""
Attendance Repository - Data access layer for daily attendance rows
"""
from typing import Optional, List
from datetime import date
from sqlalchemy.orm import Session, joinedload

from app.models.attendance import Attendance
from app.repositories.base import HrisRepository


class AttendanceRepository(HrisRepository[Attendance]):
    def __init__(self):
        super().__init__(Attendance)

    def get_by_user_and_date(self, db: Session, user_id: int, target_date: date) -> Optional[Attendance]:
        """Get the attendance row for a user on a date using ORM"""
        return db.query(Attendance).filter(
            Attendance.user_id == user_id,
            Attendance.date == target_date
        ).first()

    def get_by_date_with_users(self, db: Session, target_date: date) -> List[Attendance]:
        """Get all attendance rows for a date with their users using ORM"""
        return db.query(Attendance).options(
            joinedload(Attendance.user)
        ).filter(
            Attendance.date == target_date
        ).order_by(Attendance.id.asc()).all()

    def get_user_attendance(
        self,
        db: Session,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None
    ) -> List[Attendance]:
        """Get a user's attendance, newest first, optionally within an inclusive date range"""
        query = db.query(Attendance).filter(Attendance.user_id == user_id)

        if date_from:
            query = query.filter(Attendance.date >= date_from)
        if date_to:
            query = query.filter(Attendance.date <= date_to)

        return query.order_by(Attendance.date.desc()).all()

    def count_by_date_and_status(self, db: Session, target_date: date, status: str) -> int:
        """Count attendance rows for a date and status using ORM"""
        return self.count_filtered(db, {"date": target_date, "status": status})

    def delete_by_user(self, db: Session, user_id: int) -> int:
        """Delete every attendance row of a user without committing"""
        deleted = db.query(Attendance).filter(
            Attendance.user_id == user_id
        ).delete(synchronize_session=False)
        db.flush()
        return deleted
