"""
Training Feedback Model - Attendee questionnaire answers
"""
from sqlalchemy import Column, BigInteger, Boolean, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from atams.db import Base

from app.db.types import BigIntId


class TrainingFeedback(Base):
    """Training feedback model for hris schema - Table: hris.training_feedback"""
    __tablename__ = "training_feedback"
    __table_args__ = {"schema": "hris"}

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    training_id = Column(BigInteger, ForeignKey("hris.training_records.id"), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=False, index=True)

    is_effective = Column(Boolean, nullable=False)
    training_aids_good = Column(Boolean, nullable=False)
    duration_sufficient = Column(Boolean, nullable=False)
    content_explained = Column(Boolean, nullable=False)
    conducted_properly = Column(Boolean, nullable=False)
    learning_environment = Column(Boolean, nullable=False)
    helpful_for_work = Column(Boolean, nullable=False)

    additional_topics = Column(Text, nullable=True)
    key_learnings = Column(Text, nullable=True)
    special_observations = Column(Text, nullable=True)
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
