from fastapi.testclient import TestClient

from agenda.main import app

client = TestClient(app)


def test_health() -> None:
    assert client.get("/health").json() == {"ok": True}


def test_list_appointments_uses_wire_names() -> None:
    response = client.get("/tools/appointments")

    assert response.status_code == 200
    items = response.json()
    assert [item["_id"] for item in items] == ["APT-00001", "APT-00002", "APT-00003"]
    assert items[0]["startDate"] == "2024-03-05T10:00:00"
    assert items[2]["employeeRequestedByClient"] is True
    assert items[2]["totalPrice"] == 80.0


def test_list_by_organization_with_range() -> None:
    response = client.get(
        "/tools/appointments/organization/ORG-00001", params={"startDate": "2024-03-18"}
    )

    assert response.status_code == 200
    assert [item["_id"] for item in response.json()] == ["APT-00003"]


def test_list_by_employee_and_client() -> None:
    by_employee = client.get("/tools/appointments/employee/EMP-00002").json()
    by_client = client.get("/tools/appointments/client/CLI-00001").json()

    assert [item["_id"] for item in by_employee] == ["APT-00002"]
    assert [item["_id"] for item in by_client] == ["APT-00001", "APT-00003"]


def test_get_missing_appointment_is_404() -> None:
    response = client.get("/tools/appointments/APT-99999")

    assert response.status_code == 404


def test_create_update_delete_round_trip() -> None:
    created = client.post(
        "/tools/appointments",
        json={
            "client": "CLI-00002",
            "service": "SRV-00001",
            "employee": "EMP-00001",
            "startDate": "2024-03-20T10:00:00",
            "endDate": "2024-03-20T10:45:00",
            "organizationId": "ORG-00001",
            "customPrice": 22.5,
            "additionalItems": [{"name": "Lavado", "price": 5}],
        },
    )
    assert created.status_code == 201
    body = created.json()
    assert body["_id"] == "APT-00004"
    assert body["totalPrice"] == 27.5
    assert body["status"] == "pending"

    updated = client.put("/tools/appointments/APT-00004", json={"status": "confirmed"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "confirmed"

    deleted = client.delete("/tools/appointments/APT-00004")
    assert deleted.status_code == 204
    assert client.get("/tools/appointments/APT-00004").status_code == 404


def test_create_with_unknown_reference_is_502() -> None:
    response = client.post(
        "/tools/appointments",
        json={
            "client": "CLI-404",
            "service": "SRV-00001",
            "employee": "EMP-00001",
            "startDate": "2024-03-20T10:00:00",
            "endDate": "2024-03-20T10:45:00",
            "organizationId": "ORG-00001",
        },
    )

    assert response.status_code == 502


def test_update_missing_is_502() -> None:
    response = client.put("/tools/appointments/APT-99999", json={"status": "cancelled"})

    assert response.status_code == 502


def test_create_with_mixed_timezone_awareness_is_422() -> None:
    response = client.post(
        "/tools/appointments",
        json={
            "client": "CLI-00002",
            "service": "SRV-00001",
            "employee": "EMP-00001",
            "startDate": "2024-03-05T10:00:00Z",
            "endDate": "2024-03-05T11:00:00",
            "organizationId": "ORG-00001",
        },
    )

    assert response.status_code == 422
    assert "timezone awareness" in response.text


def test_month_view_json() -> None:
    response = client.get(
        "/calendar/ORG-00001/month", params={"date": "2024-03-10", "density": "compact"}
    )

    assert response.status_code == 200
    view = response.json()
    days = {day["day"]: day for week in view["weeks"] for day in week}

    assert view["title"] == "MARZO 2024"
    assert view["start"] == "2024-02-25"
    assert view["end"] == "2024-04-06"
    assert view["sizes"]["badge"] == 10
    assert days["2024-03-05"]["appointment_count"] == 2
    assert days["2024-03-05"]["badge"] == "2 citas"
    assert days["2024-03-18"]["appointment_count"] == 1
    assert days["2024-03-10"]["is_selected"] is True
    assert days["2024-02-25"]["in_month"] is False


def test_month_view_with_selected_day() -> None:
    response = client.get(
        "/calendar/ORG-00001/month", params={"date": "2024-03-10", "selected": "2024-03-18"}
    )

    selected = [
        day["day"] for week in response.json()["weeks"] for day in week if day["is_selected"]
    ]
    assert selected == ["2024-03-18"]


def test_month_view_for_the_last_representable_month() -> None:
    response = client.get("/calendar/ORG-00001/month", params={"date": "9999-12-15"})

    assert response.status_code == 200
    view = response.json()
    assert view["title"] == "DICIEMBRE 9999"
    assert view["end"] == "9999-12-31"


def test_month_view_for_the_first_representable_month() -> None:
    response = client.get("/calendar/ORG-00001/month.html", params={"date": "0001-01-15"})

    assert response.status_code == 200
    assert 'href="/calendar/ORG-00001/day/0001-01-01"' in response.text


def test_month_view_with_unrepresentable_date_is_422() -> None:
    response = client.get("/calendar/ORG-00001/month", params={"date": "9999-12-32"})

    assert response.status_code == 422


def test_month_view_html_links_days() -> None:
    response = client.get("/calendar/ORG-00001/month.html", params={"date": "2024-03-01"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "MARZO 2024" in response.text
    assert "2 citas" in response.text
    assert 'href="/calendar/ORG-00001/day/2024-03-05"' in response.text


def test_day_view_lists_selected_day() -> None:
    response = client.get("/calendar/ORG-00001/day/2024-03-05")

    assert response.status_code == 200
    body = response.json()
    assert body["label"] == "Martes 5 de marzo de 2024"
    assert body["total"] == 2
    assert [item["_id"] for item in body["appointments"]] == ["APT-00001", "APT-00002"]


def test_session_context_for_employee_and_admin() -> None:
    organization = {
        "_id": "ORG-00001",
        "name": "Estudio Aurora",
        "role": {"permissions": ["appointments:read"]},
    }

    employee = client.post(
        "/tools/session/context",
        json={"user_id": "EMP-00001", "role": "employee", "organization": organization},
    )
    admin = client.post(
        "/tools/session/context",
        json={"user_id": "U-1", "role": "admin", "organization": organization},
    )

    assert employee.status_code == 200
    assert employee.json()["organization_id"] == "ORG-00001"
    assert employee.json()["permissions"] == ["appointments:read"]
    assert admin.json() == {
        "user_id": "U-1",
        "role": "admin",
        "organization_id": "ORG-00001",
        "permissions": ["appointments:read"],
    }


def test_session_context_while_loading_is_404() -> None:
    response = client.post(
        "/tools/session/context",
        json={"user_id": "U-1", "role": "admin", "organization_loading": True},
    )

    assert response.status_code == 404
