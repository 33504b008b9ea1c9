"""
Leave Service - Leave request submission and one-shot approval
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.enums import LeaveStatus, Role, role_level
from app.models.user import User as UserModel
from app.repositories.leave_request_repository import LeaveRequestRepository
from app.repositories.user_repository import UserRepository
from app.schemas.leave_request import (
    LeaveRequest,
    LeaveRequestCreate,
    LeaveRequestWithUser,
    LeaveDecision
)
from atams.exceptions import (
    NotFoundException,
    BadRequestException,
    ConflictException,
    ForbiddenException
)
from atams.logging import get_logger

logger = get_logger(__name__)

MANAGER_LEVEL = role_level(Role.MANAGER)


class LeaveService:
    def __init__(self) -> None:
        self.repo = LeaveRequestRepository()
        self.user_repo = UserRepository()

    def submit_leave_request(
        self,
        db: Session,
        payload: LeaveRequestCreate,
        current_employee: UserModel
    ) -> LeaveRequest:
        """
        Submit a leave request in status pending

        Employees submit for themselves; managers and admins for anyone.

        Raises:
            BadRequestException: End date before start date
            ForbiddenException: Submitting for another employee without permission
            NotFoundException: Requester does not exist
        """
        if payload.end_date < payload.start_date:
            raise BadRequestException("endDate cannot be earlier than startDate")

        if payload.user_id != current_employee.id and role_level(current_employee.role) < MANAGER_LEVEL:
            raise ForbiddenException("You can only request leave for yourself")

        if not self.user_repo.exists(db, payload.user_id):
            raise NotFoundException(f"User with ID {payload.user_id} not found")

        data = payload.model_dump()
        data["status"] = LeaveStatus.PENDING.value
        data["request_date"] = datetime.now()

        leave = self.repo.create(db, data)
        logger.info(
            "Leave request submitted",
            extra={"extra_data": {"leave_request_id": leave.id, "user_id": leave.user_id}}
        )
        return LeaveRequest.model_validate(leave)

    def respond_to_leave_request(
        self,
        db: Session,
        leave_id: int,
        decision: LeaveDecision,
        approver_id: int
    ) -> LeaveRequest:
        """
        Approve or reject a pending leave request

        Raises:
            NotFoundException: Leave request not found
            ConflictException: Request was already approved or rejected
        """
        leave = self.repo.get(db, leave_id)
        if not leave:
            raise NotFoundException(f"Leave request with ID {leave_id} not found")

        resolved = self.repo.resolve_if_pending(db, leave_id, {
            "status": decision.status,
            "approved_by_id": approver_id,
            "response_date": datetime.now(),
            "response_notes": decision.notes
        })
        db.refresh(leave)
        if not resolved:
            raise ConflictException(f"Leave request has already been {leave.status}")

        logger.info(
            "Leave request responded",
            extra={"extra_data": {
                "leave_request_id": leave_id,
                "status": decision.status,
                "approved_by_id": approver_id
            }}
        )
        return LeaveRequest.model_validate(leave)

    def get_pending_requests(self, db: Session) -> List[LeaveRequestWithUser]:
        requests = self.repo.get_pending_with_users(db)
        return [LeaveRequestWithUser.model_validate(r) for r in requests]

    def get_user_requests(self, db: Session, user_id: int, current_employee: UserModel) -> List[LeaveRequest]:
        """
        Raises:
            ForbiddenException: Viewing another employee's requests without permission
        """
        if user_id != current_employee.id and role_level(current_employee.role) < MANAGER_LEVEL:
            raise ForbiddenException("You can only view your own leave requests")

        requests = self.repo.get_user_requests(db, user_id)
        return [LeaveRequest.model_validate(r) for r in requests]

    def list_requests(
        self,
        db: Session,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[LeaveRequestWithUser]:
        requests = self.repo.get_requests_with_filters(db, status, user_id, skip, limit)
        return [LeaveRequestWithUser.model_validate(r) for r in requests]
