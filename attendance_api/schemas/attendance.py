from datetime import date as Date, time as Time

from pydantic import BaseModel, Field


class AttendanceRequest(BaseModel):
    employee_id: str = Field(min_length=1, max_length=50)
    date: Date
    time: Time
    location: str = Field(min_length=1, max_length=255)


class AttendanceRecordResponse(BaseModel):
    employee_id: str
    date: Date
    entry_time: Time | None = None
    entry_location: str | None = None
    exit_time: Time | None = None
    exit_location: str | None = None
    status: str

    class Config:
        from_attributes = True
