"""
Training Schemas for records, attendees, assessments and feedback
"""
import datetime as dt
from typing import List, Optional
from pydantic import Field, field_validator

from app.core.enums import AssessmentStatus, AttendeeStatus, Department, TrainingStatus
from app.schemas.common import CamelModel, normalize_pg_datetime
from app.schemas.user import UserSummary


class TrainingRecordCreate(CamelModel):
    training_title: str = Field(min_length=1, max_length=255)
    training_type: str = Field(min_length=1, max_length=100)
    date: dt.date
    department: Optional[Department] = None
    status: TrainingStatus = Field(default=TrainingStatus.SCHEDULED, validate_default=True)
    trainer_id: Optional[int] = None
    venue: Optional[str] = None
    objectives: Optional[str] = None
    materials: Optional[str] = None
    notes: Optional[str] = None
    attendee_ids: List[int] = Field(default_factory=list)


class TrainingRecord(CamelModel):
    id: int
    training_title: str
    training_type: str
    date: dt.date
    department: Optional[Department] = None
    status: TrainingStatus
    trainer_id: Optional[int] = None
    venue: Optional[str] = None
    objectives: Optional[str] = None
    materials: Optional[str] = None
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    @field_validator('created_at', 'updated_at', mode='before')
    @classmethod
    def fix_datetime_timezone(cls, v):
        return normalize_pg_datetime(v)


class TrainingAttendee(CamelModel):
    id: int
    training_id: int
    user_id: int
    attendance_status: AttendeeStatus
    user: Optional[UserSummary] = None


class MarkPresentRequest(CamelModel):
    training_id: int
    user_id: int


class AssessmentParameter(CamelModel):
    id: int
    name: str
    max_score: int


class AssessmentScoreIn(CamelModel):
    parameter_id: int
    score: int = Field(ge=0, le=2)


class AssessmentScore(CamelModel):
    parameter_id: int
    score: int


class TrainingAssessmentCreate(CamelModel):
    """Total score and status are computed server-side from the scores"""
    training_id: int
    user_id: int
    assessment_date: Optional[dt.date] = None
    frequency: str = "monthly"
    comments: Optional[str] = None
    scores: List[AssessmentScoreIn] = Field(min_length=1)


class TrainingAssessment(CamelModel):
    id: int
    training_id: int
    user_id: int
    assessor_id: Optional[int] = None
    assessment_date: dt.date
    frequency: str
    total_score: int
    status: AssessmentStatus
    comments: Optional[str] = None
    scores: List[AssessmentScore] = Field(default_factory=list)


class TrainingFeedbackCreate(CamelModel):
    training_id: int
    user_id: Optional[int] = None  # defaults to the caller
    is_effective: bool
    training_aids_good: bool
    duration_sufficient: bool
    content_explained: bool
    conducted_properly: bool
    learning_environment: bool
    helpful_for_work: bool
    additional_topics: Optional[str] = None
    key_learnings: Optional[str] = None
    special_observations: Optional[str] = None


class TrainingFeedback(CamelModel):
    id: int
    training_id: int
    user_id: int
    is_effective: bool
    training_aids_good: bool
    duration_sufficient: bool
    content_explained: bool
    conducted_properly: bool
    learning_environment: bool
    helpful_for_work: bool
    additional_topics: Optional[str] = None
    key_learnings: Optional[str] = None
    special_observations: Optional[str] = None
    submitted_at: dt.datetime

    @field_validator('submitted_at', mode='before')
    @classmethod
    def fix_datetime_timezone(cls, v):
        return normalize_pg_datetime(v)
