from .user import User
from .attendance import Attendance
from .leave_request import LeaveRequest
from .training_record import TrainingRecord
from .training_attendee import TrainingAttendee
from .training_assessment import TrainingAssessment, TrainingAssessmentScore
from .training_feedback import TrainingFeedback
from .used_jti import UsedJti

__all__ = [
    "User",
    "Attendance",
    "LeaveRequest",
    "TrainingRecord",
    "TrainingAttendee",
    "TrainingAssessment",
    "TrainingAssessmentScore",
    "TrainingFeedback",
    "UsedJti"
]
