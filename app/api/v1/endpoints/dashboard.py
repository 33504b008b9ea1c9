"""
Dashboard Endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.dashboard_service import DashboardService
from app.schemas import DataResponse
from app.api.deps import get_current_employee
from app.core.config import settings
from atams.encryption import encrypt_response_data

router = APIRouter()
dashboard_service = DashboardService()


@router.get(
    "/stats",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(get_current_employee)]
)
async def get_dashboard_stats(
    db: Session = Depends(get_db)
):
    """
    Headline numbers for today

    **Response:**
    - totalEmployees: active employees
    - presentToday: attendance rows with status present
    - onLeave: attendance rows with status on_leave
    - pendingRequests: leave requests awaiting a decision
    """
    stats = dashboard_service.get_stats(db)

    response = DataResponse(
        success=True,
        message="Dashboard stats retrieved successfully",
        data=stats
    )
    return encrypt_response_data(response, settings)
