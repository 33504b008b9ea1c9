"""
User Repository - Data access layer for employee records
"""
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import func, or_

from app.models.user import User
from app.repositories.base import HrisRepository


class UserRepository(HrisRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username (case-insensitive) using ORM"""
        return db.query(User).filter(func.lower(User.username) == username.lower()).first()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email (case-insensitive) using ORM"""
        return db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def get_by_employee_id(self, db: Session, employee_id: str) -> Optional[User]:
        """Get user by employee id using ORM"""
        return db.query(User).filter(User.employee_id == employee_id).first()

    def get_active_users(self, db: Session, skip: int = 0, limit: int = 100) -> List[User]:
        """Get active users ordered by id using ORM"""
        return db.query(User).filter(
            User.is_active.is_(True)
        ).order_by(User.id.asc()).offset(skip).limit(limit).all()

    def search_users(
        self,
        db: Session,
        search: str = "",
        department: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[User]:
        """Search active users by name, email or employee id using ORM"""
        query = db.query(User).filter(User.is_active.is_(True))

        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(User.first_name).like(pattern),
                    func.lower(User.last_name).like(pattern),
                    func.lower(User.email).like(pattern),
                    func.lower(User.employee_id).like(pattern)
                )
            )
        if department:
            query = query.filter(User.department == department)

        return query.order_by(User.id.asc()).offset(skip).limit(limit).all()

    def count_active_users(self, db: Session) -> int:
        """Count active users using native SQL"""
        query = "SELECT COUNT(*) FROM hris.users WHERE is_active = :active"
        return self.execute_raw_sql_scalar(db, query, {"active": True})

    def has_any_user(self, db: Session) -> bool:
        """Check if any user exists using native SQL"""
        result = self.execute_raw_sql_scalar(db, "SELECT 1 FROM hris.users LIMIT 1")
        return result is not None
