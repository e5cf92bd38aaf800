# payroll_app/schemas/employee_schema.py
from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from typing import Optional


class EmployeeSchema(BaseModel):
    # every column is bound as-is; omitted fields are written as NULL
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[date] = None
    salary: Optional[Decimal] = None
    employee_type_id: Optional[int] = None
