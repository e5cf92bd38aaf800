# payroll_app/tax_slabs/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.database import get_db
from payroll_app.errors import Conflict, NotFound
from payroll_app.schemas.tax_slab_schema import TaxSlabSchema
from payroll_app.tax_slabs.models import TaxSlab
from payroll_app.utils.sql import execute, fetch_all, fetch_one_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tax-slabs", tags=["tax-slabs"])

NOT_FOUND = "Tax slab not found"
SELECT_ONE = "SELECT * FROM tax_slabs WHERE id = :id"


def _ensure_no_overlap(db: Session, body: TaxSlabSchema, exclude_id: Optional[int] = None) -> None:
    """
    Ranges are inclusive, so [100, 200] and [200, 300] overlap while
    [100, 200] and [201, 300] do not. Every slab is read FOR UPDATE so the
    check and the following write run against a stable set of rows.
    """
    slabs = select(TaxSlab.id, TaxSlab.min_amount, TaxSlab.max_amount).with_for_update()
    db.execute(slabs).all()

    overlap = and_(TaxSlab.min_amount <= body.max_amount, TaxSlab.max_amount >= body.min_amount)
    query = select(TaxSlab.id).where(overlap)
    if exclude_id is not None:
        query = query.where(TaxSlab.id != exclude_id)

    clash = db.execute(query.limit(1)).first()
    if clash is not None:
        logger.info("Tax slab [%s, %s] overlaps slab id=%s", body.min_amount, body.max_amount, clash.id)
        raise Conflict("Tax slab range overlaps with existing slabs")


@router.get("")
def list_tax_slabs(db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_all(db, "SELECT * FROM tax_slabs ORDER BY min_amount")


@router.get("/{slab_id}")
def get_tax_slab(slab_id: int, db: Session = Depends(get_db), _=Depends(get_current_user_payload)):
    return fetch_one_or_404(db, SELECT_ONE, {"id": slab_id}, NOT_FOUND)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_tax_slab(body: TaxSlabSchema, db: Session = Depends(get_db), _=Depends(require_admin)):
    _ensure_no_overlap(db, body)

    result = execute(
        db,
        """
        INSERT INTO tax_slabs (min_amount, max_amount, tax_percentage)
        VALUES (:min_amount, :max_amount, :tax_percentage)
        """,
        body.model_dump(mode="json"),
    )
    new_id = result.lastrowid
    created = fetch_one_or_404(db, SELECT_ONE, {"id": new_id}, NOT_FOUND)
    db.commit()
    logger.info("Created tax slab id=%s [%s, %s]", new_id, body.min_amount, body.max_amount)
    return created


@router.put("/{slab_id}")
def update_tax_slab(
    slab_id: int,
    body: TaxSlabSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    _ensure_no_overlap(db, body, exclude_id=slab_id)

    params = body.model_dump(mode="json")
    params["id"] = slab_id
    result = execute(
        db,
        """
        UPDATE tax_slabs
        SET min_amount = :min_amount, max_amount = :max_amount, tax_percentage = :tax_percentage
        WHERE id = :id
        """,
        params,
    )
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)

    updated = fetch_one_or_404(db, SELECT_ONE, {"id": slab_id}, NOT_FOUND)
    db.commit()
    logger.info("Updated tax slab id=%s", slab_id)
    return updated


@router.delete("/{slab_id}")
def delete_tax_slab(slab_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    result = execute(db, "DELETE FROM tax_slabs WHERE id = :id", {"id": slab_id})
    if result.rowcount == 0:
        raise NotFound(NOT_FOUND)
    db.commit()
    logger.info("Deleted tax slab id=%s", slab_id)
    return {"message": "Tax slab deleted successfully"}
