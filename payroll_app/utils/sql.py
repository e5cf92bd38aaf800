# payroll_app/utils/sql.py
# Thin helpers over parameter-bound text() statements used by every router.
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from payroll_app.errors import NotFound
from payroll_app.utils.serialize import row_to_dict


def fetch_all(db: Session, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    rows = db.execute(text(sql), dict(params or {})).mappings().all()
    return [row_to_dict(r) for r in rows]


def fetch_one(db: Session, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
    row = db.execute(text(sql), dict(params or {})).mappings().first()
    return row_to_dict(row) if row is not None else None


def fetch_one_or_404(db: Session, sql: str, params: Mapping[str, Any], message: str) -> Dict[str, Any]:
    row = fetch_one(db, sql, params)
    if row is None:
        raise NotFound(message)
    return row


def execute(db: Session, sql: str, params: Optional[Mapping[str, Any]] = None):
    """Run a write statement; returns the CursorResult (rowcount / lastrowid)."""
    return db.execute(text(sql), dict(params or {}))
