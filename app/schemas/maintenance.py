"""
Maintenance Schemas
"""
from app.schemas.common import CamelModel


class JtiCleanupResult(CamelModel):
    deleted_count: int
    days_old: int
    message: str
