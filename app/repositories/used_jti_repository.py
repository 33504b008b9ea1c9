"""
Used JTI Repository - Data access layer for QR token anti-replay tracking
"""
from datetime import datetime, timedelta
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from atams.db import BaseRepository
from app.models.used_jti import UsedJti


class UsedJtiRepository(BaseRepository[UsedJti]):
    def __init__(self):
        super().__init__(UsedJti)

    def mark_jti_as_used(self, db: Session, user_id: int, jti: str) -> bool:
        """
        Mark JTI as used for anti-replay protection (per user).
        Returns True if successfully marked, False if already exists (replay detected).
        """
        try:
            db.add(UsedJti(user_id=user_id, jti=jti, used_at=datetime.now()))
            db.commit()
            return True
        except IntegrityError:
            db.rollback()
            return False

    def cleanup_old_jtis(self, db: Session, older_than_days: int = 7) -> int:
        """
        Clean up JTIs older than specified days using ORM.
        Returns count of deleted records.
        """
        cutoff_time = datetime.now() - timedelta(days=older_than_days)

        deleted = db.query(UsedJti).filter(
            UsedJti.used_at < cutoff_time
        ).delete(synchronize_session=False)
        db.commit()

        return deleted

    def delete_by_user(self, db: Session, user_id: int) -> int:
        """Delete a user's consumed token ids without committing"""
        deleted = db.query(UsedJti).filter(
            UsedJti.user_id == user_id
        ).delete(synchronize_session=False)
        db.flush()
        return deleted
