"""
API Dependencies
Atlas SSO authentication plus the local employee record behind the identity
"""
from typing import Callable
from fastapi import Depends
from sqlalchemy.orm import Session

from atams.sso import create_atlas_client, create_auth_dependencies
from atams.exceptions import ForbiddenException
from app.core.config import settings
from app.core.enums import Role
from app.db.session import get_db
from app.models.user import User
from app.repositories.user_repository import UserRepository

# Initialize Atlas SSO client using factory
atlas_client = create_atlas_client(settings)

# Create auth dependencies using factory
get_current_user, require_auth, require_min_role_level, require_role_level = create_auth_dependencies(atlas_client)

user_repo = UserRepository()


def get_current_employee(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_auth)
) -> User:
    """
    Resolve the active employee linked to the signed-in identity by email

    Raises:
        ForbiddenException: No linked employee, or the employee is inactive
    """
    email = current_user.get("email")
    employee = user_repo.get_by_email(db, email) if email else None

    if employee is None:
        raise ForbiddenException("No employee record is linked to this account")
    if not employee.is_active:
        raise ForbiddenException("Employee account is inactive")

    return employee


def require_employee_role(*roles: Role) -> Callable:
    """
    Gate a route on the employee's HR role

    Example:
        @router.post("/", dependencies=[Depends(require_employee_role(Role.ADMIN))])
    """
    allowed = {Role(r).value for r in roles}

    def _check_role(employee: User = Depends(get_current_employee)) -> User:
        if employee.role not in allowed:
            raise ForbiddenException("Insufficient role for this operation")
        return employee

    return _check_role


require_admin = require_employee_role(Role.ADMIN)
require_manager = require_employee_role(Role.ADMIN, Role.MANAGER)

# Export for use in endpoints
__all__ = [
    "atlas_client",
    "get_current_user",
    "require_auth",
    "require_min_role_level",
    "require_role_level",
    "get_current_employee",
    "require_employee_role",
    "require_admin",
    "require_manager",
]
