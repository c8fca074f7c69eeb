# initialize.py
import logging

from attendance_api.database.session import engine, Base
from attendance_api.models import Employee, AttendanceRecord  # noqa: F401  register tables


# Create the database tables
def create_tables():
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    logging.info("Tables created successfully")
