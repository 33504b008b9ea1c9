"""
User Service - Business logic for employee records
"""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.enums import Role
from app.models.user import User as UserModel
from app.repositories.user_repository import UserRepository
from app.repositories.attendance_repository import AttendanceRepository
from app.repositories.used_jti_repository import UsedJtiRepository
from app.schemas.user import User, UserCreate, UserUpdate
from app.services.bulk_service import BulkService
from atams.exceptions import NotFoundException, ConflictException, BadRequestException
from atams.logging import get_logger
from atams.transaction import transaction

logger = get_logger(__name__)


class UserService:
    def __init__(self) -> None:
        self.repo = UserRepository()
        self.attendance_repo = AttendanceRepository()
        self.jti_repo = UsedJtiRepository()
        self.bulk_service = BulkService()

    def list_users(self, db: Session, skip: int = 0, limit: int = 100) -> List[User]:
        users = self.repo.get_active_users(db, skip=skip, limit=limit)
        return [User.model_validate(u) for u in users]

    def search_users(
        self,
        db: Session,
        search: str = "",
        department: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[User]:
        users = self.repo.search_users(db, search=search, department=department, skip=skip, limit=limit)
        return [User.model_validate(u) for u in users]

    def get_user_model(self, db: Session, user_id: int) -> UserModel:
        user = self.repo.get(db, user_id)
        if not user:
            raise NotFoundException(f"User with ID {user_id} not found")
        return user

    def get_user(self, db: Session, user_id: int) -> User:
        return User.model_validate(self.get_user_model(db, user_id))

    def find_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        user = self.repo.get_by_email(db, email) if email else None
        return User.model_validate(user) if user else None

    def _ensure_unique(
        self,
        db: Session,
        username: Optional[str] = None,
        email: Optional[str] = None,
        employee_id: Optional[str] = None,
        exclude_id: Optional[int] = None
    ) -> None:
        """
        Raises:
            ConflictException: If username, email or employee id belongs to another user
        """
        checks = [
            ("Username", username, self.repo.get_by_username),
            ("Email", email, self.repo.get_by_email),
            ("Employee ID", employee_id, self.repo.get_by_employee_id),
        ]
        for label, value, lookup in checks:
            if not value:
                continue
            existing = lookup(db, value)
            if existing is not None and existing.id != exclude_id:
                raise ConflictException(f"{label} '{value}' already exists")

    def create_user(self, db: Session, payload: UserCreate) -> User:
        """
        Create an employee

        Role defaults to employee, join date to today, and the account starts active.

        Raises:
            ConflictException: Duplicate username, email or employee id
        """
        self._ensure_unique(db, payload.username, payload.email, payload.employee_id)

        data = payload.model_dump()
        data["role"] = data.get("role") or Role.EMPLOYEE.value
        data["join_date"] = data.get("join_date") or date.today()
        data["is_active"] = True

        user = self.repo.create(db, data)
        logger.info("User created", extra={"extra_data": {"user_id": user.id, "username": user.username}})
        return User.model_validate(user)

    def update_user(self, db: Session, user_id: int, payload: UserUpdate) -> User:
        user = self.get_user_model(db, user_id)
        update_data = payload.model_dump(exclude_unset=True)

        for field in ("username", "email", "first_name", "last_name", "role", "join_date", "is_active"):
            if field in update_data and update_data[field] is None:
                raise BadRequestException(f"{field} cannot be null")

        self._ensure_unique(
            db,
            username=update_data.get("username"),
            email=update_data.get("email"),
            employee_id=update_data.get("employee_id"),
            exclude_id=user.id
        )

        user = self.repo.update(db, user, update_data)
        return User.model_validate(user)

    def deactivate_user(self, db: Session, user_id: int) -> User:
        """Soft delete: flips the active flag, attendance and leave rows stay"""
        user = self.get_user_model(db, user_id)
        user = self.repo.update(db, user, {"is_active": False})
        logger.info("User deactivated", extra={"extra_data": {"user_id": user_id}})
        return User.model_validate(user)

    def delete_user_permanently(self, db: Session, user_id: int) -> bool:
        """
        Erase a user with the attendance rows and consumed QR tokens they own

        Owned rows go first so the user row has no referencing rows left.
        All deletes commit together; leave requests still block the delete.

        Returns:
            bool: True if a user row was removed
        """
        user = self.repo.get(db, user_id)
        if user is None:
            return False

        with transaction(db):
            removed_attendance = self.attendance_repo.delete_by_user(db, user_id)
            self.jti_repo.delete_by_user(db, user_id)
            db.delete(user)
            db.flush()

        logger.info(
            "User permanently deleted",
            extra={"extra_data": {"user_id": user_id, "attendance_rows": removed_attendance}}
        )
        return True

    def bulk_create_users(self, db: Session, items: List[Any]) -> Dict[str, Any]:
        """Import many users; each item is validated and created on its own"""
        def create_one(item: Any) -> User:
            return self.create_user(db, UserCreate.model_validate(item))

        def username_of(item: Any) -> Any:
            return item.get("username") if isinstance(item, dict) else None

        return self.bulk_service.run(
            db,
            items,
            create_one,
            key_name="username",
            key_of=username_of,
            label="User import"
        )

    def sync_identity(self, db: Session, identity: Dict[str, Any]) -> Tuple[User, bool]:
        """
        Link the signed-in identity to a local employee, creating it if missing

        The first employee ever created this way becomes admin.

        Returns:
            (user, created)
        """
        email = identity.get("email")
        if not email:
            raise BadRequestException("Identity has no email address")

        existing = self.repo.get_by_email(db, email)
        if existing is not None:
            return User.model_validate(existing), False

        full_name = (identity.get("full_name") or "").strip()
        first_name, _, last_name = full_name.partition(" ")
        username = identity.get("username") or email.split("@")[0]

        payload = UserCreate(
            username=username,
            email=email,
            first_name=first_name or username,
            last_name=last_name or "-",
            role=Role.EMPLOYEE if self.repo.has_any_user(db) else Role.ADMIN
        )
        return self.create_user(db, payload), True
