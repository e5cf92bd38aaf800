# payroll_app/payroll/router.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.errors import NotFound
from payroll_app.procedures import TOTAL_SALARY_SQL, StoreProcedures, get_procedures
from payroll_app.schemas.payroll_schema import (
    GeneratePayrollSchema,
    PayrollCreateSchema,
    PayrollUpdateSchema,
)
from payroll_app.utils.sql import execute, fetch_all, fetch_one_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payroll", tags=["payroll"])

NOT_FOUND = "Payroll record not found"

# employee names for display plus the store-computed total
PAYROLL_SELECT = f"""
    SELECT p.*, e.first_name, e.last_name,
           {TOTAL_SALARY_SQL} AS total_salary
    FROM payroll p
    JOIN employees e ON p.employee_id = e.id
"""


def _get_payroll(db: Session, payroll_id: int):
    return fetch_one_or_404(db, PAYROLL_SELECT + " WHERE p.id = :id", {"id": payroll_id}, NOT_FOUND)


@router.get("")
def list_payroll(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_all(db, PAYROLL_SELECT + " ORDER BY p.id")


# ---------------------------------------
# POST: run the monthly generation routine (admin only)
# ---------------------------------------
@router.post("/generate")
def generate_payroll(
    body: GeneratePayrollSchema,
    db: Session = Depends(get_db),
    procedures: StoreProcedures = Depends(get_procedures),
    _=Depends(require_admin),
):
    procedures.generate_monthly_payroll(db, body.month, body.year)
    db.commit()
    logger.info("Generated monthly payroll for %s-%02d", body.year, body.month)
    return {"message": "Monthly payroll generated successfully"}


@router.get("/{payroll_id}")
def get_payroll(payroll_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return _get_payroll(db, payroll_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_payroll(body: PayrollCreateSchema, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(
        db,
        """
        INSERT INTO payroll (
            employee_id, basic_salary, allowances, deductions,
            tax_amount, payment_date, status
        ) VALUES (
            :employee_id, :basic_salary, :allowances, :deductions,
            :tax_amount, :payment_date, :status
        )
        """,
        body.model_dump(mode="json"),
    )
    new_id = result.lastrowid
    created = _get_payroll(db, new_id)
    db.commit()
    logger.info("Created payroll id=%s for employee_id=%s", new_id, body.employee_id)
    return created


@router.put("/{payroll_id}")
def update_payroll(
    payroll_id: int,
    body: PayrollUpdateSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    # status is written as given; pending/paid/cancelled transitions are not checked
    params = body.model_dump(mode="json")
    params["id"] = payroll_id
    result = execute(
        db,
        """
        UPDATE payroll
        SET basic_salary = :basic_salary, allowances = :allowances, deductions = :deductions,
            tax_amount = :tax_amount, payment_date = :payment_date, status = :status
        WHERE id = :id
        """,
        params,
    )
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)

    updated = _get_payroll(db, payroll_id)
    db.commit()
    logger.info("Updated payroll id=%s status=%s", payroll_id, body.status)
    return updated


@router.delete("/{payroll_id}")
def delete_payroll(payroll_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(db, "DELETE FROM payroll WHERE id = :id", {"id": payroll_id})
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)
    db.commit()
    logger.info("Deleted payroll id=%s", payroll_id)
    return {"message": "Payroll record deleted successfully"}
