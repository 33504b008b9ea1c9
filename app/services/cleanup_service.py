"""
Cleanup Service - Maintenance operations for database hygiene
"""
from sqlalchemy.orm import Session

from app.repositories.used_jti_repository import UsedJtiRepository
from atams.logging import get_logger

logger = get_logger(__name__)


class CleanupService:
    def __init__(self) -> None:
        self.jti_repo = UsedJtiRepository()

    def cleanup_old_jti(self, db: Session, days_old: int = 7) -> int:
        """
        Delete consumed QR token ids older than `days_old` days

        Returns:
            int: Number of records deleted
        """
        deleted = self.jti_repo.cleanup_old_jtis(db, older_than_days=days_old)
        logger.info("Used JTI cleanup", extra={"extra_data": {"deleted": deleted, "days_old": days_old}})
        return deleted
