# payroll_app/attendance/router.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.errors import NotFound
from payroll_app.schemas.attendance_schema import AttendanceSchema
from payroll_app.utils.sql import execute, fetch_all, fetch_one_or_404

logger = logging.getLogger(__name__)

# Router must be defined before decorated endpoints
router = APIRouter(prefix="/api/attendance", tags=["attendance"])

NOT_FOUND = "Attendance record not found"

ATTENDANCE_SELECT = """
    SELECT a.*, e.first_name, e.last_name
    FROM attendance a
    JOIN employees e ON a.employee_id = e.id
"""


def _get_attendance(db: Session, attendance_id: int):
    return fetch_one_or_404(db, ATTENDANCE_SELECT + " WHERE a.id = :id", {"id": attendance_id}, NOT_FOUND)


@router.get("")
def list_attendance(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_all(db, ATTENDANCE_SELECT + " ORDER BY a.date DESC, a.id DESC")


# declared before /{attendance_id} so the literal segment wins
@router.get("/employee/{employee_id}")
def list_attendance_for_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    _=Depends(get_current_user_payload),
):
    return fetch_all(
        db,
        ATTENDANCE_SELECT + " WHERE a.employee_id = :employee_id ORDER BY a.date DESC, a.id DESC",
        {"employee_id": employee_id},
    )


@router.get("/{attendance_id}")
def get_attendance(attendance_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return _get_attendance(db, attendance_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_attendance(body: AttendanceSchema, db: Session = Depends(get_db), _=Depends(require_admin)):
    # no uniqueness on (employee_id, date): a second row for the same day is accepted
    result = execute(
        db,
        """
        INSERT INTO attendance (employee_id, date, check_in, check_out, status)
        VALUES (:employee_id, :date, :check_in, :check_out, :status)
        """,
        body.model_dump(mode="json"),
    )
    new_id = result.lastrowid
    created = _get_attendance(db, new_id)
    db.commit()
    logger.info("Created attendance id=%s employee_id=%s", new_id, body.employee_id)
    return created


@router.put("/{attendance_id}")
def update_attendance(
    attendance_id: int,
    body: AttendanceSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    params = body.model_dump(mode="json")
    params["id"] = attendance_id
    result = execute(
        db,
        """
        UPDATE attendance
        SET employee_id = :employee_id, date = :date, check_in = :check_in,
            check_out = :check_out, status = :status
        WHERE id = :id
        """,
        params,
    )
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)

    updated = _get_attendance(db, attendance_id)
    db.commit()
    logger.info("Updated attendance id=%s", attendance_id)
    return updated


@router.delete("/{attendance_id}")
def delete_attendance(attendance_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(db, "DELETE FROM attendance WHERE id = :id", {"id": attendance_id})
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)
    db.commit()
    logger.info("Deleted attendance id=%s", attendance_id)
    return {"message": "Attendance record deleted successfully"}
