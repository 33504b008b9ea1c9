"""
Training assessment parameters and scoring rules
"""
from typing import Dict, List, NamedTuple

from app.core.enums import AssessmentStatus


class AssessmentParameter(NamedTuple):
    id: int
    name: str
    max_score: int


MAX_PARAMETER_SCORE = 2
SATISFACTORY_THRESHOLD = 11

ASSESSMENT_PARAMETERS: List[AssessmentParameter] = [
    AssessmentParameter(1, "Operating process for different products", MAX_PARAMETER_SCORE),
    AssessmentParameter(2, "Knowledge regarding his Tools & Equipments", MAX_PARAMETER_SCORE),
    AssessmentParameter(3, "Awareness regarding products defects", MAX_PARAMETER_SCORE),
    AssessmentParameter(4, "Knowledge regarding Procedure for Broken Needle", MAX_PARAMETER_SCORE),
    AssessmentParameter(5, "Awareness regarding waste control", MAX_PARAMETER_SCORE),
    AssessmentParameter(6, "Use of reference/approved samples", MAX_PARAMETER_SCORE),
    AssessmentParameter(7, "Knowledge regarding Buyers product protocol (SPI, Tolerance, GSM & etc.)", MAX_PARAMETER_SCORE),
    AssessmentParameter(8, "Effective communication skills", MAX_PARAMETER_SCORE),
    AssessmentParameter(9, "Knowledge of safe working methods", MAX_PARAMETER_SCORE),
    AssessmentParameter(10, "Knowledge regarding machine setting", MAX_PARAMETER_SCORE),
]

PARAMETERS_BY_ID: Dict[int, AssessmentParameter] = {p.id: p for p in ASSESSMENT_PARAMETERS}


def assessment_status(total_score: int) -> AssessmentStatus:
    if total_score >= SATISFACTORY_THRESHOLD:
        return AssessmentStatus.SATISFACTORY
    return AssessmentStatus.UNSATISFACTORY
