from datetime import date

import pytest

from app.core.enums import LeaveStatus, Role
from app.models.leave_request import LeaveRequest as LeaveRequestModel
from app.schemas import LeaveDecision, LeaveRequestCreate
from app.services.leave_service import LeaveService
from atams.exceptions import BadRequestException, ConflictException, ForbiddenException, NotFoundException


@pytest.fixture
def service():
    return LeaveService()


def leave_for(user_id, start=date(2024, 5, 6), end=date(2024, 5, 8), type="annual"):
    return LeaveRequestCreate(user_id=user_id, start_date=start, end_date=end, type=type, reason="Family trip")


def test_submit_creates_pending_request(db, service, make_user):
    employee = make_user()

    leave = service.submit_leave_request(db, leave_for(employee.id), employee)

    assert leave.status == LeaveStatus.PENDING.value
    assert leave.request_date is not None
    assert leave.approved_by_id is None


def test_submit_rejects_end_before_start_without_writing(db, service, make_user):
    employee = make_user()

    with pytest.raises(BadRequestException):
        service.submit_leave_request(db, leave_for(employee.id, start=date(2024, 5, 8), end=date(2024, 5, 6)), employee)

    assert db.query(LeaveRequestModel).count() == 0


def test_single_day_leave_is_allowed(db, service, make_user):
    employee = make_user()

    leave = service.submit_leave_request(db, leave_for(employee.id, end=date(2024, 5, 6)), employee)

    assert leave.start_date == leave.end_date


def test_employee_cannot_submit_for_someone_else(db, service, make_user):
    employee = make_user()
    colleague = make_user()
    manager = make_user(Role.MANAGER)

    with pytest.raises(ForbiddenException):
        service.submit_leave_request(db, leave_for(colleague.id), employee)

    leave = service.submit_leave_request(db, leave_for(colleague.id), manager)
    assert leave.user_id == colleague.id


def test_submit_for_unknown_user(db, service, make_user):
    manager = make_user(Role.MANAGER)

    with pytest.raises(NotFoundException):
        service.submit_leave_request(db, leave_for(999), manager)


def test_respond_approves_once(db, service, make_user):
    employee = make_user()
    manager = make_user(Role.MANAGER)
    leave = service.submit_leave_request(db, leave_for(employee.id), employee)

    approved = service.respond_to_leave_request(db, leave.id, LeaveDecision(status="approved", notes="Enjoy"), manager.id)

    assert approved.status == LeaveStatus.APPROVED.value
    assert approved.approved_by_id == manager.id
    assert approved.response_date is not None
    assert approved.response_notes == "Enjoy"

    with pytest.raises(ConflictException):
        service.respond_to_leave_request(db, leave.id, LeaveDecision(status="rejected"), manager.id)

    db.expire_all()
    assert db.get(LeaveRequestModel, leave.id).status == LeaveStatus.APPROVED.value


def test_respond_loses_to_concurrent_decision(db, service, make_user, monkeypatch):
    employee = make_user()
    first_manager = make_user(Role.MANAGER)
    second_manager = make_user(Role.MANAGER)
    leave = service.submit_leave_request(db, leave_for(employee.id), employee)

    fetch = service.repo.get

    def fetch_then_resolved_elsewhere(session, leave_id):
        row = fetch(session, leave_id)
        service.repo.resolve_if_pending(session, leave_id, {
            "status": LeaveStatus.APPROVED.value,
            "approved_by_id": first_manager.id
        })
        return row

    monkeypatch.setattr(service.repo, "get", fetch_then_resolved_elsewhere)

    with pytest.raises(ConflictException):
        service.respond_to_leave_request(db, leave.id, LeaveDecision(status="rejected"), second_manager.id)

    db.expire_all()
    stored = db.get(LeaveRequestModel, leave.id)
    assert stored.status == LeaveStatus.APPROVED.value
    assert stored.approved_by_id == first_manager.id


def test_respond_unknown_request(db, service, make_user):
    manager = make_user(Role.MANAGER)

    with pytest.raises(NotFoundException):
        service.respond_to_leave_request(db, 999, LeaveDecision(status="approved"), manager.id)


def test_listings(db, service, make_user):
    employee = make_user()
    other = make_user()
    manager = make_user(Role.MANAGER)
    first = service.submit_leave_request(db, leave_for(employee.id), employee)
    service.submit_leave_request(db, leave_for(other.id, type="sick"), other)
    service.respond_to_leave_request(db, first.id, LeaveDecision(status="rejected"), manager.id)

    pending = service.get_pending_requests(db)
    assert [r.user_id for r in pending] == [other.id]
    assert pending[0].user.username == other.username

    assert [r.id for r in service.get_user_requests(db, employee.id, employee)] == [first.id]
    with pytest.raises(ForbiddenException):
        service.get_user_requests(db, other.id, employee)

    rejected = service.list_requests(db, status=LeaveStatus.REJECTED.value)
    assert [r.id for r in rejected] == [first.id]
