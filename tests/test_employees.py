# tests/test_employees.py

def test_create_returns_stored_row(client, admin_headers, make_employee):
    created = make_employee(first_name="Ada", email="ada@example.com")
    assert isinstance(created["id"], int)
    assert created["first_name"] == "Ada"
    assert created["email"] == "ada@example.com"

    resp = client.get(f"/api/employees/{created['id']}", headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["hire_date"] == "2024-01-15"
    assert float(body["salary"]) == 4200
    assert body["department"] == "R&D"


def test_create_goes_through_store_routine(client, admin_headers, procedures, monkeypatch):
    calls = []
    original = procedures.add_employee

    def recording(db, employee):
        calls.append(dict(employee))
        original(db, employee)

    monkeypatch.setattr(procedures, "add_employee", recording)
    resp = client.post("/api/employees", json={"first_name": "Bo", "last_name": "Ng", "email": "bo@example.com"},
                       headers=admin_headers)
    assert resp.status_code == 201
    assert len(calls) == 1
    assert calls[0]["email"] == "bo@example.com"
    assert calls[0]["phone"] is None


def test_list_returns_all(client, admin_headers, make_employee):
    make_employee()
    make_employee()
    resp = client.get("/api/employees", headers=admin_headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_get_missing_is_404(client, admin_headers):
    resp = client.get("/api/employees/999", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Employee not found"}


def test_update_missing_is_404(client, admin_headers):
    resp = client.put("/api/employees/999", json={"first_name": "X"}, headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Employee not found"}


def test_update_overwrites_every_column(client, admin_headers, make_employee):
    emp = make_employee()
    resp = client.put(
        f"/api/employees/{emp['id']}",
        json={"first_name": "Renamed", "last_name": "Doe", "email": emp["email"], "salary": 5100},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["first_name"] == "Renamed"
    assert float(body["salary"]) == 5100
    # omitted fields are cleared, not kept
    assert body["hire_date"] is None
    assert body["department"] is None


def test_delete_then_get_is_404(client, admin_headers, make_employee):
    emp = make_employee()
    resp = client.delete(f"/api/employees/{emp['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Employee deleted successfully"}

    assert client.get(f"/api/employees/{emp['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/employees/{emp['id']}", headers=admin_headers).status_code == 404


def test_invalid_hire_date_is_400(client, admin_headers):
    resp = client.post("/api/employees", json={"hire_date": "not-a-date"}, headers=admin_headers)
    assert resp.status_code == 400
    assert "hire_date" in resp.json()["message"]


def test_store_rejection_is_500(client, admin_headers):
    # first_name / last_name are NOT NULL in the store
    resp = client.post("/api/employees", json={"email": "nameless@example.com"}, headers=admin_headers)
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error"}
