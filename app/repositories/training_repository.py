"""
Training Repositories - Data access layer for training records and their children
"""
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload

from app.models.training_record import TrainingRecord
from app.models.training_attendee import TrainingAttendee
from app.models.training_assessment import TrainingAssessment
from app.models.training_feedback import TrainingFeedback
from app.repositories.base import HrisRepository


class TrainingRecordRepository(HrisRepository[TrainingRecord]):
    def __init__(self):
        super().__init__(TrainingRecord)

    def get_records(self, db: Session, skip: int = 0, limit: int = 100) -> List[TrainingRecord]:
        """Get training records, latest date first, using ORM"""
        return db.query(TrainingRecord).order_by(
            TrainingRecord.date.desc(), TrainingRecord.id.desc()
        ).offset(skip).limit(limit).all()


class TrainingAttendeeRepository(HrisRepository[TrainingAttendee]):
    def __init__(self):
        super().__init__(TrainingAttendee)

    def get_by_training_and_user(self, db: Session, training_id: int, user_id: int) -> Optional[TrainingAttendee]:
        """Get attendee row for (training, user) using ORM"""
        return db.query(TrainingAttendee).filter(
            TrainingAttendee.training_id == training_id,
            TrainingAttendee.user_id == user_id
        ).first()

    def get_training_attendees(self, db: Session, training_id: int) -> List[TrainingAttendee]:
        """Get all attendees of a training with their users using ORM"""
        return db.query(TrainingAttendee).options(
            joinedload(TrainingAttendee.user)
        ).filter(
            TrainingAttendee.training_id == training_id
        ).order_by(TrainingAttendee.id.asc()).all()


class TrainingAssessmentRepository(HrisRepository[TrainingAssessment]):
    def __init__(self):
        super().__init__(TrainingAssessment)

    def get_training_assessments(self, db: Session, training_id: int) -> List[TrainingAssessment]:
        """Get assessments of a training, newest first, using ORM"""
        return db.query(TrainingAssessment).filter(
            TrainingAssessment.training_id == training_id
        ).order_by(TrainingAssessment.id.desc()).all()


class TrainingFeedbackRepository(HrisRepository[TrainingFeedback]):
    def __init__(self):
        super().__init__(TrainingFeedback)

    def get_training_feedback(self, db: Session, training_id: int) -> List[TrainingFeedback]:
        """Get feedback of a training, newest first, using ORM"""
        return db.query(TrainingFeedback).filter(
            TrainingFeedback.training_id == training_id
        ).order_by(TrainingFeedback.id.desc()).all()
