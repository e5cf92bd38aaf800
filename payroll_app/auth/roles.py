# payroll_app/auth/roles.py
from enum import Enum
from typing import FrozenSet, Optional


class Role(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        """Exact match only: "Admin" or " admin" is not a role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


ADMIN_ONLY: FrozenSet[Role] = frozenset({Role.ADMIN})
ANY_ROLE: FrozenSet[Role] = frozenset(Role)
