from datetime import date

import pytest

from app.core.assessment import ASSESSMENT_PARAMETERS, SATISFACTORY_THRESHOLD
from app.core.enums import AssessmentStatus, AttendeeStatus, TrainingStatus
from app.models.training_attendee import TrainingAttendee as TrainingAttendeeModel
from app.models.training_feedback import TrainingFeedback as TrainingFeedbackModel
from app.schemas import TrainingAssessmentCreate, TrainingFeedbackCreate, TrainingRecordCreate
from app.services.training_service import TrainingService
from atams.exceptions import BadRequestException, NotFoundException


@pytest.fixture
def service():
    return TrainingService()


@pytest.fixture
def training(db, service, make_user):
    trainer = make_user()
    return service.create_record(db, TrainingRecordCreate(
        training_title="Machine safety",
        training_type="Safety",
        date=date(2024, 6, 3),
        trainer_id=trainer.id
    ))


def feedback_for(training_id, user_id=None):
    return TrainingFeedbackCreate(
        training_id=training_id,
        user_id=user_id,
        is_effective=True,
        training_aids_good=True,
        duration_sufficient=False,
        content_explained=True,
        conducted_properly=True,
        learning_environment=True,
        helpful_for_work=True,
        key_learnings="Lockout procedure"
    )


def full_scores(score=1):
    return [{"parameterId": p.id, "score": score} for p in ASSESSMENT_PARAMETERS]


def test_create_record_registers_attendees(db, service, make_user):
    first = make_user()
    second = make_user()

    record = service.create_record(db, TrainingRecordCreate(
        training_title="Onboarding",
        training_type="Induction",
        date=date(2024, 6, 1),
        attendee_ids=[first.id, second.id, first.id]
    ))

    assert record.status == TrainingStatus.SCHEDULED.value
    attendees = service.get_attendees(db, record.id)
    assert [a.user_id for a in attendees] == [first.id, second.id]
    assert all(a.attendance_status == AttendeeStatus.REGISTERED.value for a in attendees)


def test_create_record_with_unknown_attendee_writes_nothing(db, service):
    with pytest.raises(NotFoundException):
        service.create_record(db, TrainingRecordCreate(
            training_title="Onboarding",
            training_type="Induction",
            date=date(2024, 6, 1),
            attendee_ids=[404]
        ))

    assert service.list_records(db) == []


def test_feedback_twice_leaves_one_present_attendee(db, service, training, make_user):
    employee = make_user()

    service.submit_feedback(db, feedback_for(training.id), employee.id)
    service.submit_feedback(db, feedback_for(training.id), employee.id)

    attendees = db.query(TrainingAttendeeModel).filter_by(training_id=training.id, user_id=employee.id).all()
    assert len(attendees) == 1
    assert attendees[0].attendance_status == AttendeeStatus.PRESENT.value
    assert len(service.get_feedback(db, training.id)) == 2


def test_feedback_rolls_back_when_marking_present_fails(db, service, training, make_user, monkeypatch):
    employee = make_user()

    def fail(*args, **kwargs):
        raise RuntimeError("attendee write failed")

    monkeypatch.setattr(service, "_mark_present", fail)

    with pytest.raises(RuntimeError):
        service.submit_feedback(db, feedback_for(training.id), employee.id)

    assert db.query(TrainingFeedbackModel).count() == 0


def test_feedback_for_unknown_training(db, service, make_user):
    employee = make_user()

    with pytest.raises(NotFoundException):
        service.submit_feedback(db, feedback_for(999), employee.id)


def test_mark_present_upgrades_registered_attendee(db, service, make_user):
    employee = make_user()
    record = service.create_record(db, TrainingRecordCreate(
        training_title="Forklift",
        training_type="Safety",
        date=date(2024, 6, 5),
        attendee_ids=[employee.id]
    ))

    attendee = service.mark_present(db, record.id, employee.id)

    assert attendee.attendance_status == AttendeeStatus.PRESENT.value
    assert len(service.get_attendees(db, record.id)) == 1


def test_assessment_totals_and_status(db, service, training, make_user):
    employee = make_user()
    assessor = make_user()

    satisfactory = service.create_assessment(
        db,
        TrainingAssessmentCreate.model_validate({
            "trainingId": training.id,
            "userId": employee.id,
            "scores": full_scores(score=2)
        }),
        assessor.id
    )
    unsatisfactory = service.create_assessment(
        db,
        TrainingAssessmentCreate.model_validate({
            "trainingId": training.id,
            "userId": employee.id,
            "scores": full_scores(score=1)
        }),
        assessor.id
    )

    assert satisfactory.total_score == 20
    assert satisfactory.status == AssessmentStatus.SATISFACTORY.value
    assert [s.parameter_id for s in satisfactory.scores] == [p.id for p in ASSESSMENT_PARAMETERS]
    assert unsatisfactory.total_score == 10 < SATISFACTORY_THRESHOLD
    assert unsatisfactory.status == AssessmentStatus.UNSATISFACTORY.value
    assert unsatisfactory.assessor_id == assessor.id
    assert [a.id for a in service.get_assessments(db, training.id)] == [unsatisfactory.id, satisfactory.id]


@pytest.mark.parametrize("scores", [
    full_scores()[:-1],
    full_scores() + [{"parameterId": 1, "score": 0}],
    full_scores()[:-1] + [{"parameterId": 99, "score": 1}],
])
def test_assessment_rejects_incomplete_or_unknown_parameters(db, service, training, make_user, scores):
    employee = make_user()

    with pytest.raises(BadRequestException):
        service.create_assessment(
            db,
            TrainingAssessmentCreate.model_validate({
                "trainingId": training.id,
                "userId": employee.id,
                "scores": scores
            }),
            None
        )
