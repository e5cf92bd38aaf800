# tests/conftest.py
from __future__ import annotations

import logging
import sys
from calendar import monthrange
from datetime import date
from decimal import Decimal
from typing import Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event, text
from sqlalchemy.pool import StaticPool
from werkzeug.security import generate_password_hash

from payroll_app.config import Settings
from payroll_app.database import Database
from payroll_app.main import create_app
from payroll_app.procedures import ADD_EMPLOYEE_PARAMS, StoreProcedures

TEST_SECRET = "test-secret"

ADMIN = {"username": "admin", "password": "adminpass"}
EMPLOYEE = {"username": "emp", "password": "emppass"}


# =========================
# Logging -> stdout
# =========================
@pytest.fixture(scope="session", autouse=True)
def _tests_log_to_stdout():
    root = logging.getLogger()
    if not any(getattr(h, "stream", None) is sys.stdout for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)


# ==============================================================
# Store doubles: SQLite stands in for MySQL
# ==============================================================

def calculate_total_salary(basic_salary, allowances, deductions, tax_amount):
    """Python mirror of the store function, registered on the SQLite connection."""
    def num(v):
        return Decimal(str(v)) if v is not None else Decimal("0")
    total = num(basic_salary) + num(allowances) - num(deductions) - num(tax_amount)
    return float(total)


class InProcessProcedures(StoreProcedures):
    """Does what the MySQL routines are expected to do, with plain SQL."""

    def __init__(self):
        self.generated: List[Tuple[int, int]] = []

    def add_employee(self, db, employee):
        params = {name: employee.get(name) for name in ADD_EMPLOYEE_PARAMS}
        columns = ", ".join(ADD_EMPLOYEE_PARAMS)
        placeholders = ", ".join(f":{name}" for name in ADD_EMPLOYEE_PARAMS)
        db.execute(text(f"INSERT INTO employees ({columns}) VALUES ({placeholders})"), params)

    def generate_monthly_payroll(self, db, month, year):
        self.generated.append((month, year))
        payment_date = date(year, month, monthrange(year, month)[1]).isoformat()
        employees = db.execute(text("SELECT id, salary FROM employees ORDER BY id")).mappings().all()
        for emp in employees:
            db.execute(
                text(
                    "INSERT INTO payroll (employee_id, basic_salary, allowances, deductions, "
                    "tax_amount, payment_date, status) "
                    "VALUES (:employee_id, :basic, 0, 0, 0, :payment_date, 'pending')"
                ),
                {"employee_id": emp["id"], "basic": emp["salary"], "payment_date": payment_date},
            )


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def _register_functions(dbapi_connection, connection_record):
        dbapi_connection.create_function("calculate_total_salary", 4, calculate_total_salary)

    yield eng
    eng.dispose()


@pytest.fixture
def database(engine) -> Database:
    db = Database(engine=engine)
    db.init()
    db.create_tables()
    return db


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        jwt_expires_in="1h",
        log_level="WARNING",
    )


@pytest.fixture
def procedures() -> InProcessProcedures:
    return InProcessProcedures()


@pytest.fixture
def seeded_users(engine, database) -> Dict[str, int]:
    """admin (hashed password) and emp (legacy plaintext row)."""
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO users (username, password, role) VALUES (:u, :p, 'admin')"),
            {"u": ADMIN["username"], "p": generate_password_hash(ADMIN["password"])},
        )
        conn.execute(
            text("INSERT INTO users (username, password, role) VALUES (:u, :p, 'employee')"),
            {"u": EMPLOYEE["username"], "p": EMPLOYEE["password"]},
        )
        rows = conn.execute(text("SELECT id, username FROM users")).mappings().all()
    return {r["username"]: r["id"] for r in rows}


@pytest.fixture
def app(settings, database, procedures, seeded_users):
    return create_app(settings, database=database, procedures=procedures)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def login(client: TestClient, username: str, password: str) -> str:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
def admin_headers(client) -> Dict[str, str]:
    return {"Authorization": f"Bearer {login(client, **ADMIN)}"}


@pytest.fixture
def employee_headers(client) -> Dict[str, str]:
    return {"Authorization": f"Bearer {login(client, **EMPLOYEE)}"}


# ==============================================================
# Small builders shared by the router tests
# ==============================================================

@pytest.fixture
def make_employee_type(client, admin_headers):
    def _make(**overrides):
        payload = {
            "name": "Manager",
            "description": "Runs a team",
            "base_salary": 5000,
            "working_hours": 40,
            "benefits": "Health",
        }
        payload.update(overrides)
        resp = client.post("/api/employee-types", json=payload, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_employee(client, admin_headers):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "first_name": "Jane",
            "last_name": f"Doe{counter['n']}",
            "email": f"jane{counter['n']}@example.com",
            "phone": "555-0100",
            "address": "1 Main St",
            "position": "Engineer",
            "department": "R&D",
            "hire_date": "2024-01-15",
            "salary": 4200,
            "employee_type_id": None,
        }
        payload.update(overrides)
        resp = client.post("/api/employees", json=payload, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_payroll(client, admin_headers, make_employee):
    def _make(**overrides):
        employee_id = overrides.pop("employee_id", None) or make_employee()["id"]
        payload = {
            "employee_id": employee_id,
            "basic_salary": 5000,
            "allowances": 500,
            "deductions": 200,
            "tax_amount": 300,
            "payment_date": "2024-03-31",
            "status": "pending",
        }
        payload.update(overrides)
        resp = client.post("/api/payroll", json=payload, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
