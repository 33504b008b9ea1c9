"""
Dashboard Schemas
"""
from app.schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_employees: int
    present_today: int
    on_leave: int
    pending_requests: int
