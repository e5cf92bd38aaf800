# payroll_app/employee_types/models.py

from sqlalchemy import Column, Integer, String, Text, DECIMAL, DateTime, func
from payroll_app.database import Base


class EmployeeType(Base):
    __tablename__ = "employee_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    base_salary = Column(DECIMAL(10, 2), nullable=True)
    working_hours = Column(Integer, nullable=True)
    benefits = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<EmployeeType id={self.id} name={self.name}>"
