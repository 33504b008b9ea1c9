"""
Leave Request Repository - Data access layer for leave requests
"""
from typing import Any, Dict, Optional, List
from sqlalchemy.orm import Session, joinedload

from app.core.enums import LeaveStatus
from app.models.leave_request import LeaveRequest
from app.repositories.base import HrisRepository


class LeaveRequestRepository(HrisRepository[LeaveRequest]):
    def __init__(self):
        super().__init__(LeaveRequest)

    def get_pending_with_users(self, db: Session) -> List[LeaveRequest]:
        """Get pending requests with requester, newest first, using ORM"""
        return db.query(LeaveRequest).options(
            joinedload(LeaveRequest.user)
        ).filter(
            LeaveRequest.status == LeaveStatus.PENDING.value
        ).order_by(LeaveRequest.request_date.desc(), LeaveRequest.id.desc()).all()

    def get_user_requests(self, db: Session, user_id: int) -> List[LeaveRequest]:
        """Get a user's requests, newest first, using ORM"""
        return db.query(LeaveRequest).filter(
            LeaveRequest.user_id == user_id
        ).order_by(LeaveRequest.request_date.desc(), LeaveRequest.id.desc()).all()

    def get_requests_with_filters(
        self,
        db: Session,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[LeaveRequest]:
        """Get requests with optional status/user filters using ORM"""
        query = db.query(LeaveRequest).options(joinedload(LeaveRequest.user))

        if status:
            query = query.filter(LeaveRequest.status == status)
        if user_id:
            query = query.filter(LeaveRequest.user_id == user_id)

        return query.order_by(
            LeaveRequest.request_date.desc(), LeaveRequest.id.desc()
        ).offset(skip).limit(limit).all()

    def count_by_status(self, db: Session, status: str) -> int:
        """Count requests in a status using native SQL"""
        query = "SELECT COUNT(*) FROM hris.leave_requests WHERE status = :status"
        return self.execute_raw_sql_scalar(db, query, {"status": status})

    def resolve_if_pending(self, db: Session, leave_id: int, values: Dict[str, Any]) -> bool:
        """
        Apply a decision only while the request is still pending

        The status check and the write are one UPDATE, so concurrent
        responses cannot both succeed. Returns False if nothing was updated.
        """
        updated = db.query(LeaveRequest).filter(
            LeaveRequest.id == leave_id,
            LeaveRequest.status == LeaveStatus.PENDING.value
        ).update(values, synchronize_session=False)
        db.commit()
        return updated == 1
