from .user import User, UserCreate, UserUpdate, UserSummary
from .attendance import (
    Attendance,
    AttendanceCreate,
    AttendanceUpdate,
    AttendanceWithUser,
    BulkAttendanceCreate,
    ScanRequest,
    BiometricRequest,
    QrTokenResponse,
    CheckResponse
)
from .leave_request import LeaveRequest, LeaveRequestCreate, LeaveRequestWithUser, LeaveDecision
from .training import (
    TrainingRecord,
    TrainingRecordCreate,
    TrainingAttendee,
    MarkPresentRequest,
    AssessmentParameter,
    TrainingAssessment,
    TrainingAssessmentCreate,
    TrainingFeedback,
    TrainingFeedbackCreate
)
from .dashboard import DashboardStats
from .maintenance import JtiCleanupResult
from .auth import LoginRequest, CurrentIdentity
from .common import DataResponse, PaginationResponse, BulkResponse

__all__ = [
    # User schemas
    "User",
    "UserCreate",
    "UserUpdate",
    "UserSummary",
    # Attendance schemas
    "Attendance",
    "AttendanceCreate",
    "AttendanceUpdate",
    "AttendanceWithUser",
    "BulkAttendanceCreate",
    "ScanRequest",
    "BiometricRequest",
    "QrTokenResponse",
    "CheckResponse",
    # Leave schemas
    "LeaveRequest",
    "LeaveRequestCreate",
    "LeaveRequestWithUser",
    "LeaveDecision",
    # Training schemas
    "TrainingRecord",
    "TrainingRecordCreate",
    "TrainingAttendee",
    "MarkPresentRequest",
    "AssessmentParameter",
    "TrainingAssessment",
    "TrainingAssessmentCreate",
    "TrainingFeedback",
    "TrainingFeedbackCreate",
    # Dashboard / auth
    "DashboardStats",
    "JtiCleanupResult",
    "LoginRequest",
    "CurrentIdentity",
    # Common schemas
    "DataResponse",
    "PaginationResponse",
    "BulkResponse"
]
