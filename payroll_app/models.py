# payroll_app/models.py
# Imports every model so Base.metadata knows all tables (create_tables, tests).

from payroll_app.auth.models import User
from payroll_app.employee_types.models import EmployeeType
from payroll_app.employees.models import Employee
from payroll_app.payroll.models import Payroll
from payroll_app.adjustments.models import Allowance, Deduction
from payroll_app.attendance.models import Attendance
from payroll_app.tax_slabs.models import TaxSlab

__all__ = [
    "User",
    "EmployeeType",
    "Employee",
    "Payroll",
    "Allowance",
    "Deduction",
    "Attendance",
    "TaxSlab",
]
