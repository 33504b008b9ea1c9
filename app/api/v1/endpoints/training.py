"""
Training Endpoints - Records, attendees, assessments and feedback
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.training_service import TrainingService
from app.schemas import (
    TrainingRecord,
    TrainingRecordCreate,
    TrainingAttendee,
    MarkPresentRequest,
    TrainingAssessment,
    TrainingAssessmentCreate,
    TrainingFeedback,
    TrainingFeedbackCreate,
    DataResponse
)
from app.models.user import User as UserModel
from app.core.enums import Role, role_level
from app.api.deps import get_current_employee, require_manager
from app.core.config import settings
from atams.encryption import encrypt_response_data
from atams.exceptions import ForbiddenException

router = APIRouter()
training_service = TrainingService()


@router.get(
    "/training-records",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(get_current_employee)]
)
async def list_training_records(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """List training records, most recent first"""
    records = training_service.list_records(db, skip=skip, limit=limit)

    response = DataResponse(
        success=True,
        message="Training records retrieved successfully",
        data=records
    )
    return encrypt_response_data(response, settings)


@router.post(
    "/training-records",
    response_model=DataResponse[TrainingRecord],
    status_code=status.HTTP_201_CREATED,
    tags=["Training"],
    dependencies=[Depends(require_manager)]
)
async def create_training_record(
    record: TrainingRecordCreate,
    db: Session = Depends(get_db)
):
    """
    Schedule a training

    **Authorization:**
    - Manager or admin

    **Body:**
    - attendeeIds: employees registered for the training
    """
    new_record = training_service.create_record(db, record)

    return DataResponse(
        success=True,
        message="Training record created successfully",
        data=new_record
    )


@router.get(
    "/training-records/{training_id}",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(get_current_employee)]
)
async def get_training_record(
    training_id: int,
    db: Session = Depends(get_db)
):
    record = training_service.get_record(db, training_id)

    response = DataResponse(
        success=True,
        message="Training record retrieved successfully",
        data=record
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/training-records/{training_id}/attendees",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(get_current_employee)]
)
async def list_training_attendees(
    training_id: int,
    db: Session = Depends(get_db)
):
    attendees = training_service.get_attendees(db, training_id)

    response = DataResponse(
        success=True,
        message="Training attendees retrieved successfully",
        data=attendees
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/training-assessment-parameters",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(get_current_employee)]
)
async def list_assessment_parameters():
    """The fixed parameter list every assessment scores (0-2 each)"""
    response = DataResponse(
        success=True,
        message="Assessment parameters retrieved successfully",
        data=training_service.get_parameters()
    )
    return encrypt_response_data(response, settings)


@router.get(
    "/training-assessments/{training_id}",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(require_manager)]
)
async def list_training_assessments(
    training_id: int,
    db: Session = Depends(get_db)
):
    assessments = training_service.get_assessments(db, training_id)

    response = DataResponse(
        success=True,
        message="Training assessments retrieved successfully",
        data=assessments
    )
    return encrypt_response_data(response, settings)


@router.post(
    "/training-assessments",
    response_model=DataResponse[TrainingAssessment],
    status_code=status.HTTP_201_CREATED,
    tags=["Training"]
)
async def create_training_assessment(
    assessment: TrainingAssessmentCreate,
    db: Session = Depends(get_db),
    assessor: UserModel = Depends(require_manager)
):
    """
    Assess an attendee against every parameter

    **Authorization:**
    - Manager or admin; the caller is recorded as assessor

    **Response:**
    - totalScore: sum of the parameter scores
    - status: satisfactory when totalScore reaches the threshold

    **Errors:**
    - 400: Unknown, repeated or missing parameter scores
    """
    new_assessment = training_service.create_assessment(db, assessment, assessor.id)

    return DataResponse(
        success=True,
        message="Training assessment recorded successfully",
        data=new_assessment
    )


@router.get(
    "/training-feedback/{training_id}",
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(require_manager)]
)
async def list_training_feedback(
    training_id: int,
    db: Session = Depends(get_db)
):
    feedback = training_service.get_feedback(db, training_id)

    response = DataResponse(
        success=True,
        message="Training feedback retrieved successfully",
        data=feedback
    )
    return encrypt_response_data(response, settings)


@router.post(
    "/training-feedback",
    response_model=DataResponse[TrainingFeedback],
    status_code=status.HTTP_201_CREATED,
    tags=["Training"]
)
async def submit_training_feedback(
    feedback: TrainingFeedbackCreate,
    db: Session = Depends(get_db),
    current_employee: UserModel = Depends(get_current_employee)
):
    """
    Submit feedback for a training and mark the submitter present

    Feedback and attendance are stored together or not at all.

    **Authorization:**
    - Own feedback, or manager/admin on behalf of an employee
    """
    user_id = feedback.user_id if feedback.user_id is not None else current_employee.id
    if user_id != current_employee.id and role_level(current_employee.role) < role_level(Role.MANAGER):
        raise ForbiddenException("You can only submit your own feedback")

    new_feedback = training_service.submit_feedback(db, feedback, user_id)

    return DataResponse(
        success=True,
        message="Training feedback submitted successfully",
        data=new_feedback
    )


@router.post(
    "/training-attendance/mark-present",
    response_model=DataResponse[TrainingAttendee],
    status_code=status.HTTP_200_OK,
    tags=["Training"],
    dependencies=[Depends(require_manager)]
)
async def mark_training_attendee_present(
    request: MarkPresentRequest,
    db: Session = Depends(get_db)
):
    """
    Mark an employee present at a training (registers them if needed)

    **Authorization:**
    - Manager or admin
    """
    attendee = training_service.mark_present(db, request.training_id, request.user_id)

    return DataResponse(
        success=True,
        message="Attendee marked present",
        data=attendee
    )
