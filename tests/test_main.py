# tests/test_main.py
from payroll_app.config import Settings
from payroll_app.database import Database
from payroll_app.main import create_app


def test_root_lists_endpoints(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Welcome to Payroll Management System API"
    assert body["endpoints"]["tax_slabs"] == "/api/tax-slabs"


def test_unknown_route_uses_message_body(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_cors_preflight(client):
    resp = client.options(
        "/api/employees",
        headers={"Origin": "http://frontend.test", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in ("*", "http://frontend.test")


def test_factory_builds_database_from_settings():
    settings = Settings(database_url="sqlite://", log_level="WARNING")
    app = create_app(settings)
    assert isinstance(app.state.db, Database)
    assert app.state.db.url == "sqlite://"
    assert app.state.settings is settings


def test_malformed_json_body_is_400(client, admin_headers):
    resp = client.post(
        "/api/tax-slabs",
        content='{"min_amount": 1, "max_amount": ',
        headers={**admin_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid JSON body"}


def test_wrong_type_names_the_field(client, admin_headers):
    resp = client.post(
        "/api/tax-slabs",
        json={"min_amount": "lots", "max_amount": 2, "tax_percentage": 1},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid value for 'min_amount':")
