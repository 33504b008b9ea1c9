"""
Training Assessment Models - Scored evaluation of an attendee
"""
from sqlalchemy import Column, BigInteger, Integer, String, Date, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from atams.db import Base

from app.db.types import BigIntId


class TrainingAssessment(Base):
    """Training assessment model for hris schema - Table: hris.training_assessments"""
    __tablename__ = "training_assessments"
    __table_args__ = {"schema": "hris"}

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    training_id = Column(BigInteger, ForeignKey("hris.training_records.id"), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=False, index=True)
    assessor_id = Column(BigInteger, ForeignKey("hris.users.id"), nullable=True)
    assessment_date = Column(Date, nullable=False)
    frequency = Column(String(20), nullable=False, default="monthly")
    total_score = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False)  # satisfactory / unsatisfactory
    comments = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    scores = relationship(
        "TrainingAssessmentScore",
        order_by="TrainingAssessmentScore.parameter_id",
        cascade="all, delete-orphan",
    )


class TrainingAssessmentScore(Base):
    """Per-parameter score - Table: hris.training_assessment_scores"""
    __tablename__ = "training_assessment_scores"
    __table_args__ = (
        UniqueConstraint("assessment_id", "parameter_id", name="uq_assessment_parameter"),
        {"schema": "hris"},
    )

    id = Column(BigIntId, primary_key=True, index=True, autoincrement=True)
    assessment_id = Column(BigInteger, ForeignKey("hris.training_assessments.id"), nullable=False, index=True)
    parameter_id = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
