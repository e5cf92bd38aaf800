# payroll_app/attendance/models.py

from sqlalchemy import Column, Integer, Date, Time, String, ForeignKey
from payroll_app.database import Base


class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    date = Column(Date, nullable=True)
    check_in = Column(Time, nullable=True)
    check_out = Column(Time, nullable=True)
    status = Column(String(20), nullable=True)   # values: 'present', 'absent', 'late'

    def __repr__(self):
        return f"<Attendance id={self.id} employee_id={self.employee_id} date={self.date}>"
