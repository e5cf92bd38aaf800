# payroll_app/schemas/attendance_schema.py
import datetime as dt
from pydantic import BaseModel
from typing import Optional


class AttendanceSchema(BaseModel):
    employee_id: Optional[int] = None
    date: Optional[dt.date] = None
    check_in: Optional[dt.time] = None
    check_out: Optional[dt.time] = None
    status: Optional[str] = None   # present / absent / late
