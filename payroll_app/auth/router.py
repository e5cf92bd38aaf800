# payroll_app/auth/router.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from payroll_app.auth.dependencies import get_current_user_payload, require_admin
from payroll_app.auth.jwt_handler import create_access_token, user_claims
from payroll_app.auth.roles import Role
from payroll_app.database import get_db
from payroll_app.errors import NotFound, Unauthenticated, ValidationError
from payroll_app.schemas.auth_schema import LoginResponse, LoginSchema, RegisterSchema, UserOut
from payroll_app.utils.sql import execute, fetch_one

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

# werkzeug hash prefixes; anything else is a legacy plaintext row
_HASH_METHODS = ("pbkdf2:", "scrypt:")


def _password_matches(stored: str, candidate: str) -> bool:
    if stored is None:
        return False
    stored = str(stored)
    if stored.startswith(_HASH_METHODS):
        return check_password_hash(stored, candidate)
    return stored == candidate


def authenticate(db: Session, request: Request, body: LoginSchema) -> Dict[str, Any]:
    """Shared by /api/auth/login and the legacy /api/login."""
    username = (body.username or "").strip()
    password = body.password or ""
    if not username or not password:
        raise ValidationError("Username and password are required")

    user = fetch_one(
        db,
        "SELECT id, username, password, role FROM users WHERE username = :username",
        {"username": username},
    )
    if not user or not _password_matches(user["password"], password):
        logger.warning("Failed login for username=%s", username)
        raise Unauthenticated("Invalid username or password")

    settings = request.app.state.settings
    claims = user_claims(user)
    token = create_access_token(claims, settings.jwt_secret, settings.jwt_expires_seconds)
    logger.info("User logged in: id=%s role=%s", claims["id"], claims["role"])
    return {"token": token, "user": claims}


# ---------------------- LOGIN -----------------------
@router.post("/login", response_model=LoginResponse)
def login(body: LoginSchema, request: Request, db: Session = Depends(get_db)):
    return authenticate(db, request, body)


# ---------------------- REGISTER (admin only) -----------------------
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterSchema,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    username = (body.username or "").strip()
    if not username or not body.password or not body.role:
        raise ValidationError("Username, password, and role are required")

    role = Role.parse(body.role)
    if role is None:
        raise ValidationError("Invalid role. Must be either admin or employee")

    existing = fetch_one(db, "SELECT id FROM users WHERE username = :username", {"username": username})
    if existing:
        raise ValidationError("Username already exists")

    result = execute(
        db,
        "INSERT INTO users (username, password, role) VALUES (:username, :password, :role)",
        {"username": username, "password": generate_password_hash(body.password), "role": role.value},
    )
    db.commit()
    user_id = result.lastrowid
    logger.info("Registered user id=%s username=%s role=%s", user_id, username, role.value)
    return {"message": "User registered successfully", "userId": user_id}


# ---------------------- ME -----------------------
@router.get("/me", response_model=UserOut)
def read_me(
    payload: Dict[str, Any] = Depends(get_current_user_payload),
    db: Session = Depends(get_db),
):
    user = fetch_one(db, "SELECT id, username, role FROM users WHERE id = :id", {"id": payload.get("id")})
    if not user:
        raise NotFound("User not found")
    return user
