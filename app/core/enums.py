"""
Closed value sets shared by models, schemas and services
"""
from enum import Enum
from typing import Dict, List


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class Department(str, Enum):
    ENGINEERING = "engineering"
    MARKETING = "marketing"
    SALES = "sales"
    HR = "hr"
    FINANCE = "finance"
    OPERATIONS = "operations"
    DESIGN = "design"
    PRODUCT = "product"
    CUSTOMER_SUPPORT = "customer_support"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"
    ON_LEAVE = "on_leave"


class CheckMethod(str, Enum):
    QR_CODE = "qr_code"
    BIOMETRIC = "biometric"
    MANUAL = "manual"
    GEO_LOCATION = "geo_location"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    PERSONAL = "personal"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    BEREAVEMENT = "bereavement"
    UNPAID = "unpaid"


class TrainingStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AttendeeStatus(str, Enum):
    REGISTERED = "registered"
    PRESENT = "present"


class AssessmentStatus(str, Enum):
    SATISFACTORY = "satisfactory"
    UNSATISFACTORY = "unsatisfactory"


# Authorization levels, same scale as Atlas role levels
ROLE_LEVELS: Dict[Role, int] = {
    Role.EMPLOYEE: 10,
    Role.MANAGER: 50,
    Role.ADMIN: 100,
}


def role_level(role: str) -> int:
    return ROLE_LEVELS.get(Role(role), 0)


def enum_values() -> Dict[str, List[str]]:
    """Values of every closed set, keyed the way clients look them up"""
    return {
        "roles": [r.value for r in Role],
        "departments": [d.value for d in Department],
        "attendanceStatus": [s.value for s in AttendanceStatus],
        "checkMethods": [m.value for m in CheckMethod],
        "leaveStatus": [s.value for s in LeaveStatus],
        "leaveTypes": [t.value for t in LeaveType],
        "trainingStatus": [s.value for s in TrainingStatus],
        "attendeeStatus": [s.value for s in AttendeeStatus],
        "assessmentStatus": [s.value for s in AssessmentStatus],
    }
