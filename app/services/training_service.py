"""
Training Service - Training records, attendees, assessments and feedback
"""
from datetime import date
from typing import List
from sqlalchemy.orm import Session

from app.core.assessment import ASSESSMENT_PARAMETERS, PARAMETERS_BY_ID, assessment_status
from app.core.enums import AttendeeStatus
from app.models.training_assessment import TrainingAssessmentScore
from app.models.training_attendee import TrainingAttendee as TrainingAttendeeModel
from app.models.training_record import TrainingRecord as TrainingRecordModel
from app.repositories.training_repository import (
    TrainingRecordRepository,
    TrainingAttendeeRepository,
    TrainingAssessmentRepository,
    TrainingFeedbackRepository
)
from app.repositories.user_repository import UserRepository
from app.schemas.training import (
    AssessmentParameter,
    TrainingAssessment,
    TrainingAssessmentCreate,
    TrainingAttendee,
    TrainingFeedback,
    TrainingFeedbackCreate,
    TrainingRecord,
    TrainingRecordCreate
)
from atams.exceptions import NotFoundException, BadRequestException
from atams.logging import get_logger
from atams.transaction import transaction

logger = get_logger(__name__)


class TrainingService:
    def __init__(self) -> None:
        self.record_repo = TrainingRecordRepository()
        self.attendee_repo = TrainingAttendeeRepository()
        self.assessment_repo = TrainingAssessmentRepository()
        self.feedback_repo = TrainingFeedbackRepository()
        self.user_repo = UserRepository()

    def _get_record_model(self, db: Session, training_id: int) -> TrainingRecordModel:
        record = self.record_repo.get(db, training_id)
        if not record:
            raise NotFoundException(f"Training with ID {training_id} not found")
        return record

    def _ensure_user(self, db: Session, user_id: int) -> None:
        if not self.user_repo.exists(db, user_id):
            raise NotFoundException(f"User with ID {user_id} not found")

    def list_records(self, db: Session, skip: int = 0, limit: int = 100) -> List[TrainingRecord]:
        records = self.record_repo.get_records(db, skip=skip, limit=limit)
        return [TrainingRecord.model_validate(r) for r in records]

    def get_record(self, db: Session, training_id: int) -> TrainingRecord:
        return TrainingRecord.model_validate(self._get_record_model(db, training_id))

    def create_record(self, db: Session, payload: TrainingRecordCreate) -> TrainingRecord:
        """
        Create a training and register its attendees in one transaction

        Raises:
            NotFoundException: Trainer or an attendee does not exist
        """
        if payload.trainer_id is not None:
            self._ensure_user(db, payload.trainer_id)

        attendee_ids = list(dict.fromkeys(payload.attendee_ids))
        for user_id in attendee_ids:
            self._ensure_user(db, user_id)

        with transaction(db):
            record = self.record_repo.add(db, payload.model_dump(exclude={"attendee_ids"}))
            for user_id in attendee_ids:
                self.attendee_repo.add(db, {
                    "training_id": record.id,
                    "user_id": user_id,
                    "attendance_status": AttendeeStatus.REGISTERED.value
                })

        logger.info(
            "Training created",
            extra={"extra_data": {"training_id": record.id, "attendees": len(attendee_ids)}}
        )
        return TrainingRecord.model_validate(record)

    def get_attendees(self, db: Session, training_id: int) -> List[TrainingAttendee]:
        self._get_record_model(db, training_id)
        attendees = self.attendee_repo.get_training_attendees(db, training_id)
        return [TrainingAttendee.model_validate(a) for a in attendees]

    def _mark_present(self, db: Session, training_id: int, user_id: int) -> TrainingAttendeeModel:
        """Upsert the (training, user) attendee row to present without committing"""
        attendee = self.attendee_repo.get_by_training_and_user(db, training_id, user_id)
        if attendee is None:
            return self.attendee_repo.add(db, {
                "training_id": training_id,
                "user_id": user_id,
                "attendance_status": AttendeeStatus.PRESENT.value
            })
        return self.attendee_repo.apply(db, attendee, {"attendance_status": AttendeeStatus.PRESENT.value})

    def mark_present(self, db: Session, training_id: int, user_id: int) -> TrainingAttendee:
        self._get_record_model(db, training_id)
        self._ensure_user(db, user_id)

        with transaction(db):
            attendee = self._mark_present(db, training_id, user_id)

        return TrainingAttendee.model_validate(attendee)

    def get_parameters(self) -> List[AssessmentParameter]:
        return [
            AssessmentParameter(id=p.id, name=p.name, max_score=p.max_score)
            for p in ASSESSMENT_PARAMETERS
        ]

    def create_assessment(
        self,
        db: Session,
        payload: TrainingAssessmentCreate,
        assessor_id: int
    ) -> TrainingAssessment:
        """
        Record an assessment with one score per parameter

        Total and status are derived from the scores.

        Raises:
            BadRequestException: Unknown, repeated or missing parameters
            NotFoundException: Training or assessed user not found
        """
        scores = {}
        for entry in payload.scores:
            parameter = PARAMETERS_BY_ID.get(entry.parameter_id)
            if parameter is None:
                raise BadRequestException(f"Unknown assessment parameter {entry.parameter_id}")
            if entry.parameter_id in scores:
                raise BadRequestException(f"Parameter {entry.parameter_id} scored more than once")
            if entry.score > parameter.max_score:
                raise BadRequestException(f"Score for parameter {entry.parameter_id} exceeds {parameter.max_score}")
            scores[entry.parameter_id] = entry.score

        missing = sorted(set(PARAMETERS_BY_ID) - set(scores))
        if missing:
            raise BadRequestException(f"Missing scores for parameters: {missing}")

        self._get_record_model(db, payload.training_id)
        self._ensure_user(db, payload.user_id)

        total_score = sum(scores.values())

        with transaction(db):
            assessment = self.assessment_repo.add(db, {
                "training_id": payload.training_id,
                "user_id": payload.user_id,
                "assessor_id": assessor_id,
                "assessment_date": payload.assessment_date or date.today(),
                "frequency": payload.frequency,
                "total_score": total_score,
                "status": assessment_status(total_score).value,
                "comments": payload.comments,
                "scores": [
                    TrainingAssessmentScore(parameter_id=parameter_id, score=score)
                    for parameter_id, score in sorted(scores.items())
                ]
            })

        logger.info(
            "Training assessment recorded",
            extra={"extra_data": {
                "assessment_id": assessment.id,
                "training_id": payload.training_id,
                "total_score": total_score
            }}
        )
        return TrainingAssessment.model_validate(assessment)

    def get_assessments(self, db: Session, training_id: int) -> List[TrainingAssessment]:
        assessments = self.assessment_repo.get_training_assessments(db, training_id)
        return [TrainingAssessment.model_validate(a) for a in assessments]

    def submit_feedback(self, db: Session, payload: TrainingFeedbackCreate, user_id: int) -> TrainingFeedback:
        """
        Store feedback and mark the submitter present at the training

        Both writes commit together or not at all.

        Raises:
            NotFoundException: Training or user not found
        """
        self._get_record_model(db, payload.training_id)
        self._ensure_user(db, user_id)

        data = payload.model_dump(exclude={"user_id"})
        data["user_id"] = user_id

        with transaction(db):
            feedback = self.feedback_repo.add(db, data)
            self._mark_present(db, payload.training_id, user_id)

        logger.info(
            "Training feedback submitted",
            extra={"extra_data": {"training_id": payload.training_id, "user_id": user_id}}
        )
        return TrainingFeedback.model_validate(feedback)

    def get_feedback(self, db: Session, training_id: int) -> List[TrainingFeedback]:
        feedback = self.feedback_repo.get_training_feedback(db, training_id)
        return [TrainingFeedback.model_validate(f) for f in feedback]
