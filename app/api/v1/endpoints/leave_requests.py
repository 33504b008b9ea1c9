"""
Leave Request Endpoints - Submission, approval workflow and listings
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.leave_service import LeaveService
from app.schemas import LeaveRequest, LeaveRequestCreate, LeaveDecision, DataResponse
from app.models.user import User as UserModel
from app.core.enums import LeaveStatus
from app.api.deps import get_current_employee, require_manager
from app.core.config import settings
from atams.encryption import encrypt_response_data

router = APIRouter()
leave_service = LeaveService()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_manager)]
)
async def list_leave_requests(
    status_filter: Optional[LeaveStatus] = Query(None, alias="status", description="Filter by status"),
    user_id: Optional[int] = Query(None, alias="userId", description="Filter by employee"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """
    List leave requests, newest first

    **Authorization:**
    - Manager or admin
    """
    requests = leave_service.list_requests(
        db,
        status=status_filter.value if status_filter else None,
        user_id=user_id,
        skip=skip,
        limit=limit
    )

    response = DataResponse(
        success=True,
        message="Leave requests retrieved successfully",
        data=requests
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/pending",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_manager)]
)
async def list_pending_requests(
    db: Session = Depends(get_db)
):
    """Pending requests awaiting a decision, with the requester attached"""
    requests = leave_service.get_pending_requests(db)

    response = DataResponse(
        success=True,
        message="Pending leave requests retrieved successfully",
        data=requests
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/user/{user_id}",
    status_code=status.HTTP_200_OK
)
async def list_user_requests(
    user_id: int,
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Leave requests of one employee

    **Authorization:**
    - Own requests, or manager/admin for anyone
    """
    requests = leave_service.get_user_requests(db, user_id, current_employee)

    response = DataResponse(
        success=True,
        message="Leave requests retrieved successfully",
        data=requests
    )
    return encrypt_response_data(response, settings)


@router.post(
    "",
    response_model=DataResponse[LeaveRequest],
    status_code=status.HTTP_201_CREATED
)
async def submit_leave_request(
    leave_request: LeaveRequestCreate,
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Submit a leave request (status pending)

    **Errors:**
    - 400: endDate before startDate
    - 403: Requesting for someone else without manager/admin role
    - 404: Employee not found
    """
    leave = leave_service.submit_leave_request(db, leave_request, current_employee)

    return DataResponse(
        success=True,
        message="Leave request submitted successfully",
        data=leave
    )


@router.put(
    "/{leave_id}/respond",
    response_model=DataResponse[LeaveRequest],
    status_code=status.HTTP_200_OK
)
async def respond_to_leave_request(
    leave_id: int,
    decision: LeaveDecision,
    db: Session = Depends(get_db),
    approver: UserModel = Depends(require_manager)
):
    """
    Approve or reject a pending leave request

    **Authorization:**
    - Manager or admin; the caller is recorded as approver

    **Errors:**
    - 404: Leave request not found
    - 409: Request already approved or rejected
    """
    leave = leave_service.respond_to_leave_request(db, leave_id, decision, approver.id)

    return DataResponse(
        success=True,
        message=f"Leave request {decision.status}",
        data=leave
    )
