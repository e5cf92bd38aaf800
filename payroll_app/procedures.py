# payroll_app/procedures.py
"""
Store-side routines.

Employee creation and monthly payroll generation live in MySQL as stored
procedures (``add_employee`` and ``generate_monthly_payroll``); total salary
is the SQL function ``calculate_total_salary`` used directly in the payroll
SELECTs. The application only knows their call signatures, so the calls go
through this collaborator, which the application factory injects into
``app.state.procedures``.
"""
import logging
from typing import Any, Mapping

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ADD_EMPLOYEE_PARAMS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "address",
    "position",
    "department",
    "hire_date",
    "salary",
    "employee_type_id",
)

TOTAL_SALARY_SQL = "calculate_total_salary(p.basic_salary, p.allowances, p.deductions, p.tax_amount)"


class StoreProcedures:
    """CALLs the stored procedures on the request's session."""

    def add_employee(self, db: Session, employee: Mapping[str, Any]) -> None:
        params = {name: employee.get(name) for name in ADD_EMPLOYEE_PARAMS}
        placeholders = ", ".join(f":{name}" for name in ADD_EMPLOYEE_PARAMS)
        logger.debug("CALL add_employee for email=%s", params["email"])
        db.execute(text(f"CALL add_employee({placeholders})"), params)

    def generate_monthly_payroll(self, db: Session, month: int, year: int) -> None:
        logger.debug("CALL generate_monthly_payroll(%s, %s)", month, year)
        db.execute(text("CALL generate_monthly_payroll(:month, :year)"), {"month": month, "year": year})


def get_procedures(request: Request) -> StoreProcedures:
    return request.app.state.procedures
