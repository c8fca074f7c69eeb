from sqlalchemy import Column, Date, ForeignKey, Integer, String, Time, UniqueConstraint
from sqlalchemy.orm import relationship

from attendance_api.database.session import Base

STATUS_PRESENT = "present"


class AttendanceRecord(Base):
    __tablename__ = "AttendanceRecords"
    __table_args__ = (
        UniqueConstraint("employee_id", "date", name="uq_employee_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(String(50), ForeignKey("Employees.employee_id"), nullable=False)
    date = Column(Date, nullable=False)
    entry_time = Column(Time)
    entry_location = Column(String(255))
    exit_time = Column(Time)
    exit_location = Column(String(255))
    status = Column(String(15), nullable=False, default=STATUS_PRESENT)

    employee = relationship("Employee", back_populates="attendance_records")
