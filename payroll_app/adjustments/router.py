# payroll_app/adjustments/router.py
# Allowances and deductions are the same CRUD surface over two tables, so one
# factory builds both routers.
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.errors import NotFound
from payroll_app.schemas.adjustment_schema import AdjustmentSchema
from payroll_app.utils.sql import execute, fetch_all, fetch_one_or_404

logger = logging.getLogger(__name__)


def build_adjustment_router(table: str, label: str, prefix: str) -> APIRouter:
    """
    table: SQL table name ('allowances' / 'deductions')
    label: singular name used in messages ('Allowance' / 'Deduction')
    """
    router = APIRouter(prefix=prefix, tags=[table])
    not_found = f"{label} not found"
    select_one = f"SELECT * FROM {table} WHERE id = :id"

    @router.get("", name=f"list_{table}")
    def list_adjustments(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
        return fetch_all(db, f"SELECT * FROM {table} ORDER BY id")

    @router.get("/{item_id}", name=f"get_{table}")
    def get_adjustment(item_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
        return fetch_one_or_404(db, select_one, {"id": item_id}, not_found)

    @router.post("", status_code=status.HTTP_201_CREATED, name=f"create_{table}")
    def create_adjustment(body: AdjustmentSchema, db: Session = Depends(get_db), _=Depends(require_admin)):
        result = execute(
            db,
            f"""
            INSERT INTO {table} (type, amount, description, payroll_id)
            VALUES (:type, :amount, :description, :payroll_id)
            """,
            body.model_dump(mode="json"),
        )
        new_id = result.lastrowid
        created = fetch_one_or_404(db, select_one, {"id": new_id}, not_found)
        db.commit()
        logger.info("Created %s id=%s payroll_id=%s", label.lower(), new_id, body.payroll_id)
        return created

    @router.put("/{item_id}", name=f"update_{table}")
    def update_adjustment(
        item_id: int,
        body: AdjustmentSchema,
        db: Session = Depends(get_db),
        _=Depends(require_admin),
    ):
        params = body.model_dump(mode="json")
        params["id"] = item_id
        result = execute(
            db,
            f"""
            UPDATE {table}
            SET type = :type, amount = :amount, description = :description, payroll_id = :payroll_id
            WHERE id = :id
            """,
            params,
        )
        if result.rowcount == 0:
            raise NotFound(not_found)

        updated = fetch_one_or_404(db, select_one, {"id": item_id}, not_found)
        db.commit()
        logger.info("Updated %s id=%s", label.lower(), item_id)
        return updated

    @router.delete("/{item_id}", name=f"delete_{table}")
    def delete_adjustment(item_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
        result = execute(db, f"DELETE FROM {table} WHERE id = :id", {"id": item_id})
        if result.rowcount == 0:
            raise NotFound(not_found)
        db.commit()
        logger.info("Deleted %s id=%s", label.lower(), item_id)
        return {"message": f"{label} deleted successfully"}

    return router


allowances_router = build_adjustment_router("allowances", "Allowance", "/api/allowances")
deductions_router = build_adjustment_router("deductions", "Deduction", "/api/deductions")
