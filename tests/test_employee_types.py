# tests/test_employee_types.py


def test_create_and_list_sorted_by_name(client, admin_headers, make_employee_type):
    make_employee_type(name="Manager")
    make_employee_type(name="Contractor", base_salary=3000)

    resp = client.get("/api/employee-types", headers=admin_headers)
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["Contractor", "Manager"]


def test_created_row_has_timestamps(make_employee_type):
    created = make_employee_type()
    assert created["name"] == "Manager"
    assert float(created["base_salary"]) == 5000
    assert created["working_hours"] == 40
    assert created["created_at"] is not None
    assert created["updated_at"] is not None


def test_update_and_missing(client, admin_headers, make_employee_type):
    et = make_employee_type()
    resp = client.put(
        f"/api/employee-types/{et['id']}",
        json={"name": "Senior Manager", "base_salary": 6500, "working_hours": 38},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Senior Manager"
    assert body["benefits"] is None

    resp = client.put("/api/employee-types/999", json={"name": "x"}, headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Employee type not found"}


def test_delete_refused_while_assigned(client, admin_headers, make_employee_type, make_employee):
    et = make_employee_type()
    emp = make_employee(first_name="Alice", employee_type_id=et["id"])
    assert emp["employee_type_id"] == et["id"]

    resp = client.delete(f"/api/employee-types/{et['id']}", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Cannot delete employee type that is assigned to employees"}

    # still there
    assert client.get(f"/api/employee-types/{et['id']}", headers=admin_headers).status_code == 200


def test_delete_allowed_once_unassigned(client, admin_headers, make_employee_type, make_employee):
    et = make_employee_type()
    emp = make_employee(employee_type_id=et["id"])
    client.delete(f"/api/employees/{emp['id']}", headers=admin_headers)

    resp = client.delete(f"/api/employee-types/{et['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Employee type deleted successfully"}
    assert client.get(f"/api/employee-types/{et['id']}", headers=admin_headers).status_code == 404


def test_delete_missing_is_404(client, admin_headers):
    resp = client.delete("/api/employee-types/999", headers=admin_headers)
    assert resp.status_code == 404
