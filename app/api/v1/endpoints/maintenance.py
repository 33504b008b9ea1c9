"""
Maintenance Endpoints - Pruning of the QR anti-replay table
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.cleanup_service import CleanupService
from app.schemas import DataResponse, JtiCleanupResult
from app.api.deps import require_admin

router = APIRouter()
cleanup_service = CleanupService()


@router.post(
    "/cleanup-jti",
    response_model=DataResponse[JtiCleanupResult],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)]
)
async def cleanup_jti(
    days_old: int = Query(7, ge=1, le=30, alias="daysOld"),
    db: Session = Depends(get_db)
):
    """
    Delete consumed QR token ids older than `daysOld` days (1-30, default 7)

    Meant for a daily scheduled call. Admin only.
    """
    deleted = cleanup_service.cleanup_old_jti(db, days_old=days_old)

    return DataResponse(
        success=True,
        message="JTI cleanup completed",
        data=JtiCleanupResult(
            deleted_count=deleted,
            days_old=days_old,
            message=f"Deleted {deleted} token ids older than {days_old} days"
        )
    )
