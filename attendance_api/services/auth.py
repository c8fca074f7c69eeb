import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_api.exceptions import (
    ConflictError,
    InvalidCredentials,
    NotFound,
    Unauthorized,
    database_error,
)
from attendance_api.models import Employee
from attendance_api.utils import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from attendance_api.utils.photoStorage import photo_url


def _conflict_message(db: Session, username: str, employee_id: str) -> str | None:
    existing_employee = (
        db.query(Employee)
        .filter(
            or_(
                Employee.username == username,
                Employee.employee_id == employee_id,
            )
        )
        .first()
    )
    if existing_employee is None:
        return None
    if existing_employee.username == username:
        return "Username already exists"
    return "Employee ID already registered"


def register(
    db: Session,
    username: str,
    password: str,
    employee_id: str,
    full_name: str,
    department: str,
    photo_reference: str | None = None,
) -> Employee:
    """Creates the employee profile with a bcrypt hash of the password."""
    try:
        conflict = _conflict_message(db, username, employee_id)
        if conflict:
            raise ConflictError(conflict)

        new_employee = Employee(
            employee_id=employee_id,
            full_name=full_name,
            department=department,
            username=username,
            hashed_password=hash_password(password),
            photo_reference=photo_reference,
        )

        db.add(new_employee)
        db.commit()
        db.refresh(new_employee)
    except IntegrityError as e:
        # Lost a race against a concurrent registration
        db.rollback()
        logging.warning(f"Duplicate registration for {username}: {e.orig}")
        raise ConflictError(
            _conflict_message(db, username, employee_id)
            or "Employee already registered"
        )
    except SQLAlchemyError as e:
        raise database_error(db, e)

    logging.info(f"Registered employee {employee_id} as {username}")
    return new_employee


def login(db: Session, username: str, password: str) -> dict:
    try:
        employee = db.query(Employee).filter(Employee.username == username).first()
    except SQLAlchemyError as e:
        raise database_error(db, e)

    if employee is None or not verify_password(password, employee.hashed_password):
        logging.warning(f"Failed login attempt for {username}")
        raise InvalidCredentials("Invalid username or password")

    logging.info(f"{username} logged in")
    return {
        "token": create_access_token(employee.username),
        "full_name": employee.full_name,
        "department": employee.department,
        "photo_url": photo_url(employee.photo_reference),
    }


def authenticate(token: str | None) -> dict:
    """Returns the identity bound to a valid token.
    Raises Unauthorized for missing, malformed, expired or forged tokens.
    """
    try:
        return decode_token(token)
    except Unauthorized as e:
        logging.warning(f"Rejected token: {e}")
        raise


def update_photo(db: Session, username: str, photo_reference: str) -> str | None:
    """Swaps the employee's photo and returns the previous reference."""
    try:
        employee = db.query(Employee).filter(Employee.username == username).first()
        if employee is None:
            raise NotFound("Employee not found")

        previous_reference = employee.photo_reference
        employee.photo_reference = photo_reference
        db.commit()
    except SQLAlchemyError as e:
        raise database_error(db, e)

    logging.info(f"Updated photo for {username}")
    return previous_reference
