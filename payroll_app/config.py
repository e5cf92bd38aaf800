# payroll_app/config.py
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv, find_dotenv

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z]*)\s*$", re.IGNORECASE)

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_YEAR = 365.25 * _DAY

_DURATION_UNITS = {
    "": 1, "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
    "m": _MINUTE, "min": _MINUTE, "mins": _MINUTE, "minute": _MINUTE, "minutes": _MINUTE,
    "h": _HOUR, "hr": _HOUR, "hrs": _HOUR, "hour": _HOUR, "hours": _HOUR,
    "d": _DAY, "day": _DAY, "days": _DAY,
    "w": 7 * _DAY, "week": 7 * _DAY, "weeks": 7 * _DAY,
    "y": _YEAR, "yr": _YEAR, "yrs": _YEAR, "year": _YEAR, "years": _YEAR,
}


def parse_duration(value: str) -> int:
    """
    Convert a token lifetime into seconds.

    Accepts the jsonwebtoken-style forms: '24h', '30m', '7 days', '1w', '1y',
    '1.5h'. A bare number ('3600') is read as seconds, not milliseconds.
    """
    match = _DURATION_RE.match(str(value or ""))
    if not match or match.group(2).lower() not in _DURATION_UNITS:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    seconds = int(float(amount) * _DURATION_UNITS[unit.lower()])
    if seconds <= 0:
        raise ValueError(f"Invalid duration: {value!r}")
    return seconds


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = "admin"
    db_name: str = "payroll_management"
    db_port: int = 3306
    db_driver: str = "mysql+mysqlconnector"
    database_url: Optional[str] = None
    db_pool_size: int = 10
    db_echo: bool = False
    db_create_tables: bool = False

    jwt_secret: str = "your-secret-key"
    jwt_expires_in: str = "24h"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    def __post_init__(self):
        # fail at startup, not on the first login
        try:
            parse_duration(self.jwt_expires_in)
        except ValueError as exc:
            raise ValueError(f"JWT_EXPIRES_IN: {exc}") from exc

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"{self.db_driver}://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def safe_database_target(self) -> str:
        # never log the password
        if self.database_url:
            return re.sub(r"//([^:/@]+):[^@]*@", r"//\1:***@", self.database_url)
        return f"{self.db_driver}://{self.db_user}:***@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def jwt_expires_seconds(self) -> int:
        return parse_duration(self.jwt_expires_in)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """
        Load .env (if any) and build settings from the process environment.
        Process env wins over .env values.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            db_host=os.getenv("DB_HOST", "localhost"),
            db_user=os.getenv("DB_USER", "root"),
            db_password=os.getenv("DB_PASSWORD", "admin"),
            db_name=os.getenv("DB_NAME", "payroll_management"),
            db_port=int(os.getenv("DB_PORT", "3306")),
            db_driver=os.getenv("DB_DRIVER", "mysql+mysqlconnector"),
            database_url=os.getenv("DATABASE_URL") or None,
            db_pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
            db_echo=_env_bool("DB_ECHO"),
            db_create_tables=_env_bool("DB_CREATE_TABLES"),
            jwt_secret=os.getenv("JWT_SECRET", "your-secret-key"),
            jwt_expires_in=os.getenv("JWT_EXPIRES_IN", "24h"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
