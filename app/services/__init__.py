from .jwt_service import JwtService
from .bulk_service import BulkService
from .user_service import UserService
from .attendance_service import AttendanceService
from .leave_service import LeaveService
from .training_service import TrainingService
from .dashboard_service import DashboardService
from .cleanup_service import CleanupService
from .identity_service import IdentityService

__all__ = [
    "JwtService",
    "BulkService",
    "UserService",
    "AttendanceService",
    "LeaveService",
    "TrainingService",
    "DashboardService",
    "CleanupService",
    "IdentityService"
]
