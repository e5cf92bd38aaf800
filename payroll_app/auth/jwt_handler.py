# payroll_app/auth/jwt_handler.py
# Uses python-jose to create/verify the bearer tokens handed out by /login.
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping

from jose import jwt, JWTError

from payroll_app.errors import InvalidToken

ALGORITHM = "HS256"
DEFAULT_EXPIRES_SECONDS = 24 * 60 * 60


def user_claims(user: Mapping[str, Any]) -> Dict[str, Any]:
    """The claims carried by every token: {id, username, role}."""
    return {
        "id": int(user["id"]),
        "username": user["username"],
        "role": str(user["role"]),
    }


def create_access_token(
    claims: Mapping[str, Any],
    secret: str,
    expires_seconds: int = DEFAULT_EXPIRES_SECONDS,
) -> str:
    """
    Sign the claims with the shared secret and add an 'exp' claim.
    No refresh and no revocation: a token stays valid until it expires.
    """
    to_encode = dict(claims)
    expire = datetime.now(timezone.utc) + timedelta(seconds=expires_seconds)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify signature and expiry. Raises InvalidToken on any failure.
    """
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidToken() from exc
