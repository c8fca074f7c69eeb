from datetime import date as Date
from typing import Annotated

from fastapi import APIRouter, Depends
from starlette import status

from sqlalchemy.orm import Session
from attendance_api.api.auth import user_dependency
from attendance_api.api.errors import to_http_exception
from attendance_api.database.session import get_db
from attendance_api.exceptions import NotFound, StoreError, ValidationError
from attendance_api.schemas.attendance import (
    AttendanceRecordResponse,
    AttendanceRequest,
)
from attendance_api.services import attendance as attendance_service


router = APIRouter(tags=["attendance"])

db_dependency = Annotated[Session, Depends(get_db)]


# ---------------------------- Endpoint to record entry presence
@router.post("/entry", status_code=status.HTTP_201_CREATED)
def record_entry(entry: AttendanceRequest, db: db_dependency, _: user_dependency):
    """Records the entry of the day. A repeated entry overwrites the previous one."""
    try:
        attendance_service.record_entry(
            db, entry.employee_id, entry.date, entry.time, entry.location
        )
    except (ValidationError, StoreError) as e:
        raise to_http_exception(e, status.HTTP_400_BAD_REQUEST)

    return {"message": "Entry presence recorded successfully"}


# ---------------------------- Endpoint to record exit presence
@router.post("/exit")
def record_exit(exit_: AttendanceRequest, db: db_dependency, _: user_dependency):
    """Records the exit of the day. Requires an entry for the same day."""
    try:
        attendance_service.record_exit(
            db, exit_.employee_id, exit_.date, exit_.time, exit_.location
        )
    except (NotFound, StoreError) as e:
        raise to_http_exception(e, status.HTTP_400_BAD_REQUEST)

    return {"message": "Exit presence recorded successfully"}


# ---------------------------- Endpoint to get presence state
@router.get("/presence", response_model=AttendanceRecordResponse)
def get_presence(
    employee_id: str, date: Date, db: db_dependency, _: user_dependency
):
    try:
        return attendance_service.get_record(db, employee_id, date)
    except (NotFound, StoreError) as e:
        raise to_http_exception(e, status.HTTP_404_NOT_FOUND)
