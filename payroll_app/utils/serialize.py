# payroll_app/utils/serialize.py
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Mapping


def _format_timedelta(value: timedelta) -> str:
    # MySQL TIME columns come back from mysql-connector as timedelta
    total = int(value.total_seconds())
    sign = "-" if total < 0 else ""
    total = abs(total)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def json_safe(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return _format_timedelta(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def row_to_dict(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: json_safe(value) for key, value in row.items()}
