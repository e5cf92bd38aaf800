# payroll_app/employee_types/router.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.employee_types.models import EmployeeType
from payroll_app.employees.models import Employee
from payroll_app.errors import Conflict, NotFound
from payroll_app.schemas.employee_type_schema import EmployeeTypeSchema
from payroll_app.utils.sql import execute, fetch_all, fetch_one_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employee-types", tags=["employee-types"])

NOT_FOUND = "Employee type not found"
SELECT_ONE = "SELECT * FROM employee_types WHERE id = :id"


@router.get("")
def list_employee_types(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_all(db, "SELECT * FROM employee_types ORDER BY name")


@router.get("/{type_id}")
def get_employee_type(type_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_one_or_404(db, SELECT_ONE, {"id": type_id}, NOT_FOUND)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee_type(body: EmployeeTypeSchema, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(
        db,
        """
        INSERT INTO employee_types (name, description, base_salary, working_hours, benefits)
        VALUES (:name, :description, :base_salary, :working_hours, :benefits)
        """,
        body.model_dump(mode="json"),
    )
    new_id = result.lastrowid
    created = fetch_one_or_404(db, SELECT_ONE, {"id": new_id}, NOT_FOUND)
    db.commit()
    logger.info("Created employee type id=%s", new_id)
    return created


@router.put("/{type_id}")
def update_employee_type(
    type_id: int,
    body: EmployeeTypeSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    params = body.model_dump(mode="json")
    params["id"] = type_id
    result = execute(
        db,
        """
        UPDATE employee_types
        SET name = :name, description = :description, base_salary = :base_salary,
            working_hours = :working_hours, benefits = :benefits, updated_at = CURRENT_TIMESTAMP
        WHERE id = :id
        """,
        params,
    )
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)

    updated = fetch_one_or_404(db, SELECT_ONE, {"id": type_id}, NOT_FOUND)
    db.commit()
    logger.info("Updated employee type id=%s", type_id)
    return updated


@router.delete("/{type_id}")
def delete_employee_type(type_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    # check and delete share one transaction. Holding the type row FOR UPDATE
    # blocks FK-checked employee inserts/updates pointing at it until commit.
    locked = db.execute(
        select(EmployeeType.id).where(EmployeeType.id == type_id).with_for_update()
    ).first()
    if locked is None:
        raise NotFound(NOT_FOUND)

    in_use = db.execute(
        select(Employee.id).where(Employee.employee_type_id == type_id).limit(1)
    ).first()
    if in_use is not None:
        raise Conflict("Cannot delete employee type that is assigned to employees")

    result = execute(db, "DELETE FROM employee_types WHERE id = :id", {"id": type_id})
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)
    db.commit()
    logger.info("Deleted employee type id=%s", type_id)
    return {"message": "Employee type deleted successfully"}
