# payroll_app/schemas/employee_type_schema.py
from pydantic import BaseModel
from decimal import Decimal
from typing import Optional


class EmployeeTypeSchema(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    base_salary: Optional[Decimal] = None
    working_hours: Optional[int] = None
    benefits: Optional[str] = None
