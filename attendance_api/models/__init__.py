from attendance_api.models.employee import Employee
from attendance_api.models.attendanceRecord import AttendanceRecord, STATUS_PRESENT
