from fastapi import APIRouter
from app.api.v1.endpoints import (
    auth,
    users,
    attendance,
    leave_requests,
    training,
    dashboard,
    enums,
    maintenance
)

api_router = APIRouter()

# Register routes
api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])
api_router.include_router(leave_requests.router, prefix="/leave-requests", tags=["Leave Requests"])
api_router.include_router(training.router)
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(enums.router, prefix="/enums", tags=["Reference"])
api_router.include_router(maintenance.router, prefix="/maintenance", tags=["Maintenance"])
