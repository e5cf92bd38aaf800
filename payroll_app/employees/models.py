# payroll_app/employees/models.py

from sqlalchemy import Column, Integer, String, Date, DECIMAL, Text, ForeignKey
from payroll_app.database import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    position = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True)
    hire_date = Column(Date, nullable=True)
    salary = Column(DECIMAL(10, 2), nullable=True)
    employee_type_id = Column(Integer, ForeignKey("employee_types.id"), nullable=True)

    def __repr__(self):
        return f"<Employee id={self.id} name={self.first_name} {self.last_name}>"
