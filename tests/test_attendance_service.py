from datetime import date, time

import pytest

from attendance_api.exceptions import NotFound, ValidationError
from attendance_api.models import AttendanceRecord
from attendance_api.services import attendance as attendance_service


def test_entry_creates_present_record(db, alice):
    attendance_service.record_entry(db, "E1", "2024-01-01", "08:00", "Office")

    record = attendance_service.get_record(db, "E1", "2024-01-01")
    assert record.status == "present"
    assert record.date == date(2024, 1, 1)
    assert record.entry_time == time(8, 0)
    assert record.entry_location == "Office"
    assert record.exit_time is None


def test_entry_then_exit(db, alice):
    attendance_service.record_entry(db, "E1", "2024-01-01", "08:00", "Office")
    attendance_service.record_exit(db, "E1", "2024-01-01", "17:00", "Office")

    record = attendance_service.get_record(db, "E1", "2024-01-01")
    assert record.exit_time == time(17, 0)
    assert record.exit_location == "Office"
    assert record.entry_time == time(8, 0)


def test_repeated_entry_overwrites_single_record(db, alice):
    attendance_service.record_entry(db, "E1", date(2024, 1, 1), time(8, 0), "Office")
    attendance_service.record_entry(db, "E1", date(2024, 1, 1), time(9, 30), "Home")

    records = (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.employee_id == "E1")
        .all()
    )
    assert len(records) == 1
    assert records[0].entry_time == time(9, 30)
    assert records[0].entry_location == "Home"
    assert records[0].status == "present"


def test_reentry_after_exit_keeps_exit(db, alice):
    attendance_service.record_entry(db, "E1", "2024-01-01", "08:00", "Office")
    attendance_service.record_exit(db, "E1", "2024-01-01", "12:00", "Office")
    attendance_service.record_entry(db, "E1", "2024-01-01", "13:00", "Office")

    record = attendance_service.get_record(db, "E1", "2024-01-01")
    assert record.entry_time == time(13, 0)
    assert record.exit_time == time(12, 0)


def test_exit_without_entry(db, alice):
    with pytest.raises(NotFound):
        attendance_service.record_exit(db, "E1", "2024-01-01", "17:00", "Office")


def test_exit_needs_entry_on_the_same_day(db, alice):
    attendance_service.record_entry(db, "E1", "2024-01-01", "08:00", "Office")
    with pytest.raises(NotFound):
        attendance_service.record_exit(db, "E1", "2024-01-02", "17:00", "Office")


def test_records_are_kept_per_day(db, alice):
    attendance_service.record_entry(db, "E1", "2024-01-01", "08:00", "Office")
    attendance_service.record_entry(db, "E1", "2024-01-02", "08:15", "Office")

    assert db.query(AttendanceRecord).count() == 2
    assert attendance_service.get_record(db, "E1", "2024-01-02").entry_time == time(8, 15)


def test_get_record_missing(db, alice):
    with pytest.raises(NotFound):
        attendance_service.get_record(db, "E1", "2024-01-01")


@pytest.mark.parametrize("day, at", [("01/01/2024", "08:00"), ("2024-01-01", "8am")])
def test_entry_rejects_malformed_date_or_time(db, alice, day, at):
    with pytest.raises(ValidationError):
        attendance_service.record_entry(db, "E1", day, at, "Office")


def test_entry_for_unregistered_employee(db, alice):
    with pytest.raises(ValidationError):
        attendance_service.record_entry(db, "NOPE", "2024-01-01", "08:00", "Office")

    assert db.query(AttendanceRecord).count() == 0
