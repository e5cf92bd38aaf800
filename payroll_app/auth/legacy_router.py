# payroll_app/auth/legacy_router.py
# Top-level /api/login and /api/profile, kept for older frontend builds.
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from payroll_app.auth.dependencies import get_current_user_payload
from payroll_app.auth.router import authenticate
from payroll_app.database import get_db
from payroll_app.schemas.auth_schema import LoginResponse, LoginSchema
from payroll_app.utils.sql import fetch_one_or_404

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def legacy_login(body: LoginSchema, request: Request, db: Session = Depends(get_db)):
    return authenticate(db, request, body)


@router.get("/profile")
def read_profile(
    payload: Dict[str, Any] = Depends(get_current_user_payload),
    db: Session = Depends(get_db),
):
    """The caller's employee record joined with their login name and role."""
    return fetch_one_or_404(
        db,
        """
        SELECT e.*, u.username, u.role
        FROM employees e
        JOIN users u ON e.user_id = u.id
        WHERE u.id = :user_id
        """,
        {"user_id": payload.get("id")},
        "Profile not found",
    )
