# payroll_app/auth/dependencies.py
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from payroll_app.auth.jwt_handler import decode_token
from payroll_app.auth.roles import ADMIN_ONLY, Role
from payroll_app.errors import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must answer 401 with our own body
bearer_scheme = HTTPBearer(auto_error=False)


# -------------------------------------------
# requireAuth: strict Bearer JWT
# -------------------------------------------
def get_current_user_payload(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")

    settings = request.app.state.settings
    payload = decode_token(credentials.credentials, settings.jwt_secret)
    request.state.user = payload
    logger.debug("Authenticated via JWT header: user_id=%s role=%s", payload.get("id"), payload.get("role"))
    return payload


# -------------------------------------------
# requireRole: closed Role set checked at the boundary
# Usage: Depends(require_role({Role.ADMIN}))
# -------------------------------------------
def require_role(allowed_roles: Iterable[Role]) -> Callable:
    allowed = frozenset(Role.parse(r) for r in allowed_roles) - {None}

    def dependency(payload: Optional[Dict[str, Any]] = Depends(get_current_user_payload)):
        if not payload:
            raise Unauthenticated("Authentication required")
        role = Role.parse(payload.get("role"))
        if role not in allowed:
            logger.warning("Role %r not in %s for user_id=%s", payload.get("role"),
                           sorted(r.value for r in allowed), payload.get("id"))
            raise Forbidden("Access denied. Insufficient permissions.")
        return payload

    return dependency


require_admin = require_role(ADMIN_ONLY)
