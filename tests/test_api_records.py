import datetime as dt

from fastapi.testclient import TestClient


def _create_property(client: TestClient, address: str = "12 Elm Street", market_value: str = "500000") -> int:
    response = client.post(
        "/api/properties",
        json={"address": address, "city": "Springfield", "state": "IL", "type": "RESIDENTIAL", "marketValue": market_value},
    )
    assert response.status_code == 201
    return response.json()["id"]


def _create_issue(client: TestClient, property_id: int, title: str, priority: str, **extra) -> dict:
    response = client.post(
        "/api/issues",
        json={"title": title, "priority": priority, "type": "REPAIR", "propertyId": property_id, **extra},
    )
    assert response.status_code == 201
    return response.json()


def test_property_crud(db_client: TestClient) -> None:
    property_id = _create_property(db_client)

    fetched = db_client.get(f"/api/properties/{property_id}").json()
    assert fetched["address"] == "12 Elm Street"
    assert fetched["marketValue"] == 500000.0

    updated = db_client.patch(f"/api/properties/{property_id}", json={"marketValue": "525000.50"})
    assert updated.status_code == 200
    assert updated.json()["marketValue"] == 525000.5

    assert db_client.delete(f"/api/properties/{property_id}").status_code == 204
    assert db_client.get(f"/api/properties/{property_id}").status_code == 404


def test_tenant_crud(db_client: TestClient) -> None:
    property_id = _create_property(db_client)

    created = db_client.post(
        "/api/tenants",
        json={
            "name": "Jane Roe",
            "email": "jane@roe-properties.com",
            "leaseStart": "2025-01-01",
            "leaseEnd": "2025-12-31",
            "rentAmount": "1500",
            "propertyId": property_id,
        },
    )
    assert created.status_code == 201
    tenant_id = created.json()["id"]
    assert created.json()["property"]["address"] == "12 Elm Street"

    patched = db_client.patch(f"/api/tenants/{tenant_id}", json={"leaseEnd": "2024-06-01"})
    assert patched.status_code == 422

    patched = db_client.patch(f"/api/tenants/{tenant_id}", json={"phone": "555-0100"})
    assert patched.json()["phone"] == "555-0100"

    assert [tenant["id"] for tenant in db_client.get("/api/tenants").json()] == [tenant_id]
    assert db_client.delete(f"/api/tenants/{tenant_id}").status_code == 204


def test_transaction_crud_and_filters(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    for day, amount, tx_type in (("2025-01-05", "1000", "INCOME"), ("2025-02-05", "1200", "income"), ("2025-02-09", "300", "Expense")):
        response = db_client.post(
            "/api/transactions",
            json={
                "description": "Entry",
                "amount": amount,
                "type": tx_type,
                "category": "RENT",
                "date": day,
                "propertyId": property_id,
            },
        )
        assert response.status_code == 201

    february = db_client.get("/api/transactions", params={"month": "2025-02"}).json()
    assert [item["date"] for item in february] == ["2025-02-09", "2025-02-05"]
    assert february[0]["type"] == "expense"

    assert db_client.get("/api/transactions", params={"from": "2025-03-01", "to": "2025-01-01"}).status_code == 422

    metrics = db_client.get("/api/metrics", params={"year": "2025"}).json()
    assert metrics["monthlyData"][1]["momIncomeChange"] == 20.0
    assert metrics["ytdNetIncome"] == 1900.0

    assert db_client.delete(f"/api/transactions/{february[0]['id']}").json() == {"status": "ok"}
    assert len(db_client.get("/api/transactions").json()) == 2


def test_creating_records_for_missing_property_returns_404(db_client: TestClient) -> None:
    transaction = db_client.post(
        "/api/transactions",
        json={"description": "Rent", "amount": "10", "type": "income", "category": "RENT", "date": "2025-01-01", "propertyId": 999},
    )
    repair = db_client.post(
        "/api/repairs",
        json={"date": "2025-01-01", "cost": "10", "description": "Leak", "item": "Sink", "propertyId": 999},
    )
    todo = db_client.post("/api/todos", json={"title": "Call plumber", "type": "REPAIR", "propertyId": 999})

    assert transaction.status_code == 404
    assert repair.status_code == 404
    assert todo.status_code == 404
    assert transaction.json() == {"detail": "Property not found"}


def test_repair_create_and_update(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    created = db_client.post(
        "/api/repairs",
        json={"date": "2025-03-01", "cost": "250", "description": "Leaking pipe", "item": "Pipe", "propertyId": property_id},
    )
    assert created.status_code == 201
    assert created.json()["status"] == "PENDING"

    repair_id = created.json()["id"]
    updated = db_client.patch(f"/api/repairs/{repair_id}", json={"status": "COMPLETED"})
    assert updated.json()["status"] == "COMPLETED"
    assert db_client.patch(f"/api/repairs/{repair_id}", json={}).status_code == 422
    assert [item["id"] for item in db_client.get("/api/repairs", params={"status": "COMPLETED"}).json()] == [repair_id]


def test_issues_sort_by_priority_rank(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    for title, priority in (("a", "LOW"), ("b", "URGENT"), ("c", "MEDIUM"), ("d", "HIGH")):
        _create_issue(db_client, property_id, title, priority)

    descending = db_client.get("/api/issues", params={"sortBy": "priority", "sortOrder": "desc"}).json()
    ascending = db_client.get("/api/issues", params={"sortBy": "priority", "sortOrder": "asc"}).json()

    assert [item["priority"] for item in descending] == ["URGENT", "HIGH", "MEDIUM", "LOW"]
    assert [item["priority"] for item in ascending] == ["LOW", "MEDIUM", "HIGH", "URGENT"]


def test_unknown_sort_field_is_rejected(db_client: TestClient) -> None:
    response = db_client.get("/api/issues", params={"sortBy": "secret"})

    assert response.status_code == 422
    assert "sortBy must be one of" in response.json()["detail"]


def test_work_item_update_and_delete(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    issue = _create_issue(db_client, property_id, "Broken window", "HIGH")

    updated = db_client.patch(f"/api/issues/{issue['id']}", json={"status": "RESOLVED"})
    assert updated.json()["status"] == "RESOLVED"
    assert db_client.patch(f"/api/issues/{issue['id']}", json={"title": None}).status_code == 422

    assert db_client.delete(f"/api/issues/{issue['id']}").json() == {"success": True}
    assert db_client.get(f"/api/issues/{issue['id']}").status_code == 404


def test_dashboard_top_issues(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    _create_issue(db_client, property_id, "done", "URGENT", status="RESOLVED")
    _create_issue(db_client, property_id, "late", "HIGH", dueDate="2025-05-01")
    _create_issue(db_client, property_id, "soon", "HIGH", dueDate="2025-04-01")
    for index in range(4):
        _create_issue(db_client, property_id, f"minor {index}", "LOW")

    payload = db_client.get("/api/dashboard/issues").json()

    assert payload["totalOpenIssues"] == 6
    assert [item["title"] for item in payload["topIssues"][:2]] == ["soon", "late"]
    assert len(payload["topIssues"]) == 5
    assert payload["topIssues"][0]["propertyAddress"] == "12 Elm Street"


def test_dashboard_todos_skip_resolved(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    for day in range(1, 7):
        response = db_client.post(
            "/api/todos",
            json={"title": f"todo {day}", "type": "MAINTENANCE", "dueDate": f"2025-06-0{day}", "propertyId": property_id},
        )
        assert response.status_code == 201
    db_client.post(
        "/api/todos",
        json={"title": "finished", "type": "OTHER", "status": "RESOLVED", "dueDate": "2025-01-01", "propertyId": property_id},
    )

    todos = db_client.get("/api/dashboard/todos").json()

    assert [todo["title"] for todo in todos] == [f"todo {day}" for day in range(1, 6)]


def test_dashboard_repairs_and_metrics(db_client: TestClient) -> None:
    property_id = _create_property(db_client, market_value="400000")
    _create_property(db_client, address="9 Oak Avenue", market_value="100000")
    for status, cost, day in (("IN_PROGRESS", "300", "2025-02-01"), ("PENDING", "200", "2025-01-01"), ("COMPLETED", "999", "2025-01-15")):
        db_client.post(
            "/api/repairs",
            json={"date": day, "cost": cost, "description": "Work", "item": "Roof", "status": status, "propertyId": property_id},
        )
    db_client.post(
        "/api/transactions",
        json={
            "description": "Rent",
            "amount": "2100",
            "type": "income",
            "category": "RENT",
            "date": dt.date.today().isoformat(),
            "propertyId": property_id,
        },
    )

    repairs = db_client.get("/api/dashboard/repairs").json()
    metrics = db_client.get("/api/dashboard/metrics").json()

    assert [item["status"] for item in repairs["activeRepairs"]] == ["PENDING", "IN_PROGRESS"]
    assert repairs["totalRepairCost"] == 500.0
    assert repairs["activeRepairs"][0]["location"] == "12 Elm Street"
    assert metrics == {"totalProperties": 2, "totalValue": 500000.0, "monthlyIncome": 2100.0, "activeRepairs": 2}


def test_calendar_event_creates_linked_todo(db_client: TestClient) -> None:
    property_id = _create_property(db_client)

    response = db_client.post(
        "/api/calendar",
        json={
            "title": "Property tax due",
            "start": "2025-04-10T09:00:00Z",
            "end": "2025-04-15T09:00:00Z",
            "type": "TAX",
            "propertyId": property_id,
            "createTodo": True,
            "todoStatus": "COMPLETED",
        },
    )

    assert response.status_code == 201
    created = response.json()
    assert created["todo"]["type"] == "OTHER"
    assert created["todo"]["status"] == "RESOLVED"
    assert created["todo"]["dueDate"] == "2025-04-15"
    assert created["todo"]["calendarEventId"] == created["event"]["id"]

    todos = db_client.get("/api/todos").json()
    assert [todo["calendarEventId"] for todo in todos] == [created["event"]["id"]]


def test_calendar_event_without_todo(db_client: TestClient) -> None:
    property_id = _create_property(db_client)

    created = db_client.post(
        "/api/calendar",
        json={"title": "Inspection", "start": "2025-04-10T09:00:00Z", "type": "INSPECTION", "propertyId": property_id},
    ).json()

    assert created["todo"] is None
    assert db_client.get("/api/todos").json() == []
    assert db_client.delete(f"/api/calendar/{created['event']['id']}").json() == {"success": True}


def test_calendar_mixed_offsets_on_create(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    base = {"title": "Tax", "type": "TAX", "propertyId": property_id, "start": "2025-03-01T10:00:00Z"}

    backwards = db_client.post("/api/calendar", json={**base, "end": "2025-03-01T09:00:00"})
    forwards = db_client.post("/api/calendar", json={**base, "end": "2025-03-01T12:00:00"})

    assert backwards.status_code == 422
    assert forwards.status_code == 201


def test_calendar_mixed_offsets_on_update(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    event_id = db_client.post(
        "/api/calendar",
        json={"title": "Boiler", "type": "MAINTENANCE", "propertyId": property_id, "start": "2025-03-01T10:00:00Z"},
    ).json()["event"]["id"]

    backwards = db_client.patch(f"/api/calendar/{event_id}", json={"end": "2025-03-01T09:00:00"})
    forwards = db_client.patch(f"/api/calendar/{event_id}", json={"end": "2025-03-01T12:00:00"})

    assert backwards.status_code == 422
    assert backwards.json() == {"detail": "End must not be before start"}
    assert forwards.status_code == 200


def test_calendar_list_with_mixed_offsets(db_client: TestClient) -> None:
    property_id = _create_property(db_client)
    db_client.post(
        "/api/calendar",
        json={"title": "Walkthrough", "type": "INSPECTION", "propertyId": property_id, "start": "2025-03-05T10:00:00Z"},
    )

    listed = db_client.get("/api/calendar", params={"start": "2025-03-01T00:00:00Z", "end": "2025-03-31T00:00:00"})
    inverted = db_client.get("/api/calendar", params={"start": "2025-03-31T00:00:00+02:00", "end": "2025-03-01T00:00:00"})

    assert listed.status_code == 200
    assert [event["title"] for event in listed.json()] == ["Walkthrough"]
    assert inverted.status_code == 422
