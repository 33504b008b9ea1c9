from datetime import date, datetime

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.enums import AttendanceStatus, CheckMethod
from app.models.attendance import Attendance as AttendanceModel
from app.models.used_jti import UsedJti
from app.schemas import AttendanceCreate, AttendanceUpdate, BulkAttendanceCreate
from app.services.attendance_service import AttendanceService
from atams.exceptions import BadRequestException, ConflictException, NotFoundException

DAY = date(2024, 3, 4)


@pytest.fixture
def service():
    return AttendanceService()


def test_record_attendance_upserts_by_user_and_date(db, service, make_user):
    user = make_user()

    first, created = service.record(db, AttendanceCreate(
        user_id=user.id,
        date=DAY,
        check_in_time=datetime(2024, 3, 4, 8, 55),
        status=AttendanceStatus.PRESENT
    ))
    second, created_again = service.record(db, AttendanceCreate(
        user_id=user.id,
        date=DAY,
        check_out_time=datetime(2024, 3, 4, 17, 5),
        notes="left on time"
    ))

    assert created is True
    assert created_again is False
    assert second.id == first.id
    assert second.check_in_time == datetime(2024, 3, 4, 8, 55)
    assert second.check_out_time == datetime(2024, 3, 4, 17, 5)
    assert second.notes == "left on time"
    assert db.query(AttendanceModel).count() == 1


def test_record_attendance_unknown_user(db, service):
    with pytest.raises(NotFoundException):
        service.record(db, AttendanceCreate(user_id=42, date=DAY))


def test_record_attendance_rejects_checkout_before_checkin(db, service, make_user):
    user = make_user()

    with pytest.raises(BadRequestException):
        service.record(db, AttendanceCreate(
            user_id=user.id,
            date=DAY,
            check_in_time=datetime(2024, 3, 4, 9, 0),
            check_out_time=datetime(2024, 3, 4, 8, 0)
        ))

    assert db.query(AttendanceModel).count() == 0


def test_record_attendance_checks_merged_times(db, service, make_user):
    user = make_user()
    service.record(db, AttendanceCreate(user_id=user.id, date=DAY, check_in_time=datetime(2024, 3, 4, 9, 0)))

    with pytest.raises(BadRequestException):
        service.record(db, AttendanceCreate(user_id=user.id, date=DAY, check_out_time=datetime(2024, 3, 4, 7, 0)))


def test_update_attendance(db, service, make_user):
    user = make_user()
    row, _ = service.record(db, AttendanceCreate(user_id=user.id, date=DAY))

    updated = service.update_attendance(db, row.id, AttendanceUpdate(status=AttendanceStatus.HALF_DAY))

    assert updated.status == AttendanceStatus.HALF_DAY.value
    with pytest.raises(NotFoundException):
        service.update_attendance(db, 999, AttendanceUpdate(notes="x"))


def test_user_attendance_by_date_and_range(db, service, make_user):
    user = make_user()
    for day in (1, 2, 3):
        service.record(db, AttendanceCreate(user_id=user.id, date=date(2024, 3, day)))

    assert [r.date.day for r in service.get_user_attendance(db, user.id)] == [3, 2, 1]
    assert [r.date.day for r in service.get_user_attendance(db, user.id, target_date=date(2024, 3, 2))] == [2]
    in_range = service.get_user_attendance(db, user.id, date_from=date(2024, 3, 2), date_to=date(2024, 3, 3))
    assert [r.date.day for r in in_range] == [3, 2]

    with pytest.raises(BadRequestException):
        service.get_user_attendance(db, user.id, date_from=date(2024, 3, 3), date_to=date(2024, 3, 1))


def test_bulk_mark_skips_unknown_employees(db, service, make_user):
    first = make_user()
    second = make_user()

    summary = service.bulk_mark(db, BulkAttendanceCreate(
        date=DAY,
        employee_ids=[first.id, 999, second.id],
        status=AttendanceStatus.ABSENT
    ))

    assert summary["processed"] == 3
    assert summary["successful"] == 2
    assert [r.user_id for r in summary["results"]] == [first.id, second.id]
    assert all(r.status == AttendanceStatus.ABSENT.value for r in summary["results"])
    assert summary["errors"] == [{"userId": 999, "error": "User with ID 999 not found"}]


def test_bulk_mark_empty_input(db, service):
    summary = service.bulk_mark(db, BulkAttendanceCreate(date=DAY, employee_ids=[]))

    assert summary == {"processed": 0, "successful": 0, "failed": 0, "results": [], "errors": []}


def test_check_in_then_out_then_conflict(db, service, make_user):
    user = make_user()

    check_in = service.check_in_or_out(db, user, CheckMethod.BIOMETRIC, now=datetime(2024, 3, 4, 8, 30))
    check_out = service.check_in_or_out(db, user, CheckMethod.BIOMETRIC, now=datetime(2024, 3, 4, 17, 30))

    assert check_in.action == "checked-in"
    assert check_in.attendance.status == AttendanceStatus.PRESENT.value
    assert check_in.attendance.check_in_method == CheckMethod.BIOMETRIC.value
    assert check_out.action == "checked-out"
    assert check_out.attendance.id == check_in.attendance.id

    with pytest.raises(ConflictException):
        service.check_in_or_out(db, user, CheckMethod.BIOMETRIC, now=datetime(2024, 3, 4, 18, 0))


def test_late_check_in(db, service, make_user):
    user = make_user()

    result = service.check_in_or_out(db, user, CheckMethod.QR_CODE, now=datetime(2024, 3, 4, 10, 0))

    assert result.attendance.status == AttendanceStatus.LATE.value


def test_scan_qr_rejects_replayed_token(db, service, make_user):
    user = make_user()
    token = service.issue_qr_token(db, user.id).token

    result = service.scan_qr(db, token)
    assert result.action == "checked-in"
    assert result.attendance.check_in_method == CheckMethod.QR_CODE.value

    with pytest.raises(ConflictException, match="Replay"):
        service.scan_qr(db, token)

    assert db.query(UsedJti).filter(UsedJti.user_id == user.id).count() == 1


def test_scan_qr_rejects_garbage_and_inactive_users(db, service, make_user):
    with pytest.raises(BadRequestException):
        service.scan_qr(db, "not-a-jwt")

    inactive = make_user(is_active=False)
    token = service.issue_qr_token(db, inactive.id).token
    with pytest.raises(NotFoundException):
        service.scan_qr(db, token)


def test_record_attendance_retries_lost_insert_as_update(db, service, make_user, monkeypatch):
    user = make_user()
    service.record(db, AttendanceCreate(user_id=user.id, date=DAY, notes="first"))

    lookup = service.repo.get_by_user_and_date
    calls = []

    def miss_first_lookup(session, user_id, attendance_date):
        calls.append(user_id)
        if len(calls) == 1:
            return None
        return lookup(session, user_id, attendance_date)

    monkeypatch.setattr(service.repo, "get_by_user_and_date", miss_first_lookup)

    row, created = service.record_attendance(db, user.id, DAY, {"notes": "second"})

    assert created is False
    assert len(calls) == 2
    assert row.notes == "second"
    assert db.query(AttendanceModel).filter_by(user_id=user.id, date=DAY).count() == 1


def test_record_attendance_reraises_when_conflicting_row_is_missing(db, service, make_user, monkeypatch):
    user = make_user()
    service.record(db, AttendanceCreate(user_id=user.id, date=DAY))
    monkeypatch.setattr(service.repo, "get_by_user_and_date", lambda session, user_id, attendance_date: None)

    with pytest.raises(IntegrityError):
        service.record_attendance(db, user.id, DAY, {"notes": "second"})

    assert db.query(AttendanceModel).filter_by(user_id=user.id).count() == 1
