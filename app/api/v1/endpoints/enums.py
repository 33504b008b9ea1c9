"""
Reference Data Endpoints
"""
from fastapi import APIRouter, status

from app.core.enums import enum_values
from app.schemas import DataResponse

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
async def list_enums():
    """Allowed values of every closed set (roles, departments, statuses, ...)"""
    return DataResponse(
        success=True,
        message="Enums retrieved successfully",
        data=enum_values()
    )
