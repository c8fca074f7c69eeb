from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from attendance_api.database.session import Base


class Employee(Base):
    __tablename__ = "Employees"

    id = Column(Integer, autoincrement=True, primary_key=True)
    employee_id = Column(String(50), unique=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False)
    username = Column(String(60), unique=True, nullable=False)
    hashed_password = Column(String(128), nullable=False)
    photo_reference = Column(String(255), nullable=True)

    attendance_records = relationship("AttendanceRecord", back_populates="employee")
