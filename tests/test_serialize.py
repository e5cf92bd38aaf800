# tests/test_serialize.py
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from payroll_app.utils.serialize import json_safe, row_to_dict


def test_store_types_become_json_values():
    row = {
        "id": 3,
        "salary": Decimal("4200.50"),
        "hire_date": date(2024, 1, 15),
        "created_at": datetime(2024, 1, 15, 8, 30),
        "check_in": timedelta(hours=9, minutes=5),
        "check_out": time(17, 30),
        "note": None,
    }
    assert row_to_dict(row) == {
        "id": 3,
        "salary": 4200.5,
        "hire_date": "2024-01-15",
        "created_at": "2024-01-15T08:30:00",
        "check_in": "09:05:00",
        "check_out": "17:30:00",
        "note": None,
    }


def test_long_and_negative_durations():
    assert json_safe(timedelta(hours=30, seconds=7)) == "30:00:07"
    assert json_safe(-timedelta(minutes=90)) == "-01:30:00"


def test_bytes_are_decoded():
    assert json_safe(b"abc") == "abc"
