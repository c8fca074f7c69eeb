import logging
from datetime import date, time

from sqlalchemy import update
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_api.exceptions import (
    NotFound,
    StoreError,
    ValidationError,
    database_error,
)
from attendance_api.models import AttendanceRecord, STATUS_PRESENT


def _as_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def _as_time(value) -> time:
    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid time: {value!r}")


def _entry_upsert(dialect_name: str, values: dict, entry_fields: dict):
    """Builds a single insert-or-update statement keyed on (employee_id, date)."""
    if dialect_name == "mysql":
        statement = mysql_insert(AttendanceRecord).values(**values)
        return statement.on_duplicate_key_update(**entry_fields)

    if dialect_name == "postgresql":
        statement = postgresql_insert(AttendanceRecord).values(**values)
    elif dialect_name == "sqlite":
        statement = sqlite_insert(AttendanceRecord).values(**values)
    else:
        raise StoreError(f"Unsupported database dialect: {dialect_name}")

    return statement.on_conflict_do_update(
        index_elements=["employee_id", "date"], set_=entry_fields
    )


def record_entry(db: Session, employee_id: str, day, entry_time, location: str):
    entry_fields = {
        "entry_time": _as_time(entry_time),
        "entry_location": location,
        "status": STATUS_PRESENT,
    }
    values = {"employee_id": employee_id, "date": _as_date(day), **entry_fields}

    statement = _entry_upsert(db.get_bind().dialect.name, values, entry_fields)
    try:
        db.execute(statement)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.warning(f"Entry rejected for {employee_id}: {e.orig}")
        raise ValidationError(f"Unknown employee id: {employee_id}")
    except SQLAlchemyError as e:
        raise database_error(db, e)

    logging.info(f"Entry recorded for {employee_id} on {values['date']}")


def record_exit(db: Session, employee_id: str, day, exit_time, location: str):
    day = _as_date(day)
    statement = (
        update(AttendanceRecord)
        .where(
            AttendanceRecord.employee_id == employee_id,
            AttendanceRecord.date == day,
        )
        .values(exit_time=_as_time(exit_time), exit_location=location)
    )
    try:
        result = db.execute(statement)
        db.commit()
    except SQLAlchemyError as e:
        raise database_error(db, e)

    # Exit cannot precede entry
    if result.rowcount == 0:
        raise NotFound("No entry record found for the given date and employee ID")

    logging.info(f"Exit recorded for {employee_id} on {day}")


def get_record(db: Session, employee_id: str, day) -> AttendanceRecord:
    day = _as_date(day)
    try:
        record = (
            db.query(AttendanceRecord)
            .filter(
                AttendanceRecord.employee_id == employee_id,
                AttendanceRecord.date == day,
            )
            .first()
        )
    except SQLAlchemyError as e:
        raise database_error(db, e)

    if record is None:
        raise NotFound("No presence record found for the given date and employee ID")
    return record
