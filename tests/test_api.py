import json

import pytest

from src.printpress.printpress.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def _create_employee(client, **overrides):
    payload = {
        "name": "Ada",
        "department": "Printing",
        "position": "Operator",
        "joining_date": "2024-01-02",
        "employment_type": "Full-time",
        "salary_type": "Monthly",
        "salary_rate": "3000.00",
    }
    payload.update(overrides)
    resp = client.post("/api/employees", json=payload)
    assert resp.status_code == 201
    return resp.get_json()["data"]["employee_id"]


def test_balance_endpoint_returns_breakdown(client):
    employee_id = _create_employee(client)
    resp = client.post("/api/advances", json={"employee_id": employee_id, "amount": "500", "date": "2024-03-05"})
    assert resp.status_code == 201
    client.post("/api/deductions", json={"employee_id": employee_id, "amount": "200", "date": "2024-03-20"})

    resp = client.get(f"/api/payroll/{employee_id}/balance?month=2&year=2024")

    data = resp.get_json()["data"]
    assert data["base_pay"] == "3000.00"
    assert data["net"] == "2300.00"


def test_unknown_employee_balance_is_zero(client):
    resp = client.get("/api/payroll/nobody/balance?month=0&year=2024")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["net"] == "0"


def test_invalid_month_is_rejected(client):
    resp = client.get("/api/payroll/report?month=12&year=2024")

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Month must be a number between 0 and 11"}


def test_deduction_settles_advance_over_http(client):
    employee_id = _create_employee(client)
    advance_id = client.post(
        "/api/advances", json={"employee_id": employee_id, "amount": "100", "date": "2024-03-05"}
    ).get_json()["data"]["advance_id"]

    resp = client.post(
        "/api/deductions",
        json={"employee_id": employee_id, "amount": "100", "date": "2024-03-06", "advance_id": advance_id},
    )
    assert resp.status_code == 201

    advances = client.get(f"/api/advances?employee_id={employee_id}").get_json()["data"]
    assert advances[0]["is_paid"] is True


def test_patch_with_unknown_field_is_400_and_missing_record_is_404(client):
    employee_id = _create_employee(client)

    resp = client.patch(f"/api/employees/{employee_id}", json={"employee_id": "other"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.patch("/api/employees/missing", json={"name": "X"})
    assert resp.status_code == 404


def test_delete_employee_deactivates(client):
    employee_id = _create_employee(client)

    resp = client.delete(f"/api/employees/{employee_id}")

    assert resp.get_json()["data"]["status"] == "INACTIVE"
    active = client.get("/api/employees?status=ACTIVE").get_json()["data"]
    assert active == []


def test_salary_report_csv(client):
    _create_employee(client, name="Ada")

    resp = client.get("/api/payroll/report.csv?month=2&year=2024")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    body = resp.data.decode("utf-8-sig").splitlines()
    assert body[0] == "employee_id,name,position,salary_type,base_rate,net_salary"
    assert body[1].endswith(",Ada,Operator,Monthly,3000.00,3000.00")
    assert "salary_report_march_2024.csv" in resp.headers["Content-Disposition"]


def test_data_export_import_reset(client):
    _create_employee(client)

    exported = client.get("/api/data/export").get_data(as_text=True)
    assert len(json.loads(exported)["employees"]) == 1

    client.post("/api/data/reset")
    assert client.get("/api/employees").get_json()["data"] == []

    resp = client.post("/api/data/import", data=exported, content_type="application/json")
    assert resp.status_code == 200
    assert len(client.get("/api/employees").get_json()["data"]) == 1

    resp = client.post("/api/data/import", data="garbage", content_type="application/json")
    assert resp.status_code == 400


def test_dashboard_and_company(client):
    _create_employee(client)

    dashboard = client.get("/api/dashboard").get_json()["data"]
    assert dashboard["total_employees"] == 1

    resp = client.put("/api/company", json={"name": "Ink & Co"})
    assert resp.get_json()["data"]["name"] == "Ink & Co"
    assert client.get("/api/company").get_json()["data"]["name"] == "Ink & Co"


def test_mixed_offset_and_local_times_do_not_crash(client):
    employee_id = _create_employee(client)

    resp = client.post(
        "/api/worklogs",
        json={
            "employee_id": employee_id,
            "start_time": "2024-03-01T08:00:00+00:00",
            "end_time": "2099-03-01T16:00:00",
        },
    )
    assert resp.status_code == 201
    assert "+" not in resp.get_json()["data"]["start_time"]

    resp = client.post(
        "/api/worklogs",
        json={
            "employee_id": employee_id,
            "start_time": "2099-03-01T08:00:00",
            "end_time": "2024-03-01T16:00:00+00:00",
        },
    )
    assert resp.status_code == 400

    assert client.get("/api/dashboard").status_code == 200
