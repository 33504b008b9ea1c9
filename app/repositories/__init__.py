from .user_repository import UserRepository
from .attendance_repository import AttendanceRepository
from .leave_request_repository import LeaveRequestRepository
from .training_repository import (
    TrainingRecordRepository,
    TrainingAttendeeRepository,
    TrainingAssessmentRepository,
    TrainingFeedbackRepository
)
from .used_jti_repository import UsedJtiRepository

__all__ = [
    "UserRepository",
    "AttendanceRepository",
    "LeaveRequestRepository",
    "TrainingRecordRepository",
    "TrainingAttendeeRepository",
    "TrainingAssessmentRepository",
    "TrainingFeedbackRepository",
    "UsedJtiRepository"
]
