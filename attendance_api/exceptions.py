import logging


class AttendanceAPIError(Exception):
    """Base exception for attendance API failures."""


class ValidationError(AttendanceAPIError):
    """Raised when input data is missing or malformed."""


class ConflictError(AttendanceAPIError):
    """Raised when a unique key (username, employee id) is already taken."""


class InvalidCredentials(AttendanceAPIError):
    """Raised when the username is unknown or the password does not match."""


class Unauthorized(AttendanceAPIError):
    """Raised when a session token is missing, malformed, expired or forged."""


class NotFound(AttendanceAPIError):
    """Raised when no matching employee or attendance record exists."""


class StoreError(AttendanceAPIError):
    """Raised when the underlying database operation fails."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


def database_error(db, e) -> StoreError:
    """Rolls back the session and wraps a SQLAlchemy failure."""
    db.rollback()
    logging.error(f"Database error: {e}")
    return StoreError("Database error", str(e))
