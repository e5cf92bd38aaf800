# payroll_app/employees/router.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.errors import NotFound, ServerError
from payroll_app.procedures import StoreProcedures, get_procedures
from payroll_app.schemas.employee_schema import EmployeeSchema
from payroll_app.utils.sql import execute, fetch_all, fetch_one, fetch_one_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees", tags=["employees"])

NOT_FOUND = "Employee not found"


# ----------------- Employee API -----------------

@router.get("")
def list_employees(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_all(db, "SELECT * FROM employees")


@router.get("/{employee_id}")
def get_employee(employee_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_one_or_404(db, "SELECT * FROM employees WHERE id = :id", {"id": employee_id}, NOT_FOUND)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeSchema,
    db: Session = Depends(get_db),
    procedures: StoreProcedures = Depends(get_procedures),
    _=Depends(require_admin),
):
    """
    Employees are created by the add_employee store routine, never by a plain
    INSERT. The routine returns no id, so the new row is found again by email.
    """
    values = body.model_dump(mode="json")
    procedures.add_employee(db, values)

    if values["email"] is not None:
        created = fetch_one(
            db,
            "SELECT * FROM employees WHERE email = :email ORDER BY id DESC LIMIT 1",
            {"email": values["email"]},
        )
    else:
        created = fetch_one(db, "SELECT * FROM employees ORDER BY id DESC LIMIT 1")
    db.commit()

    if created is None:
        logger.error("add_employee succeeded but no row found for email=%s", values["email"])
        raise ServerError("Server error")
    logger.info("Created employee id=%s", created["id"])
    return created


@router.put("/{employee_id}")
def update_employee(
    employee_id: int,
    body: EmployeeSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    params = body.model_dump(mode="json")
    params["id"] = employee_id
    result = execute(
        db,
        """
        UPDATE employees
        SET first_name = :first_name, last_name = :last_name, email = :email, phone = :phone,
            address = :address, position = :position, department = :department,
            hire_date = :hire_date, salary = :salary, employee_type_id = :employee_type_id
        WHERE id = :id
        """,
        params,
    )
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)

    updated = fetch_one_or_404(db, "SELECT * FROM employees WHERE id = :id", {"id": employee_id}, NOT_FOUND)
    db.commit()
    logger.info("Updated employee id=%s", employee_id)
    return updated


@router.delete("/{employee_id}")
def delete_employee(employee_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(db, "DELETE FROM employees WHERE id = :id", {"id": employee_id})
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)
    db.commit()
    logger.info("Deleted employee id=%s", employee_id)
    return {"message": "Employee deleted successfully"}
