from decimal import Decimal

from tests.helpers import create_expense


async def test_month_and_year_come_from_due_date(client, alice):
    expense = await create_expense(client, alice, due_date="2025-03-15")
    assert expense["month"] == 3
    assert expense["year"] == 2025
    assert expense["due_date"] == "2025-03-15"
    assert Decimal(expense["value"]) == Decimal("400.00")


async def test_status_defaults_to_pending(client, alice):
    response = await client.post(
        "/api/expenses",
        json={"description": "Condomínio", "value": "650.00", "due_date": "2025-05-05"},
        headers=alice["headers"]
    )
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["bank"] == ""
    assert data["payment_method"] == ""


async def test_update_without_due_date_keeps_period(client, alice):
    expense = await create_expense(client, alice, due_date="2025-03-15")

    response = await client.put(
        f"/api/expenses/{expense['id']}", json={"value": "420.00"}, headers=alice["headers"]
    )
    data = response.json()
    assert Decimal(data["value"]) == Decimal("420.00")
    assert (data["month"], data["year"]) == (3, 2025)


async def test_update_with_due_date_moves_period(client, alice):
    expense = await create_expense(client, alice, due_date="2025-03-15")

    response = await client.put(
        f"/api/expenses/{expense['id']}", json={"due_date": "2026-01-10"}, headers=alice["headers"]
    )
    data = response.json()
    assert data["due_date"] == "2026-01-10"
    assert (data["month"], data["year"]) == (1, 2026)


async def test_toggle_status(client, alice):
    expense = await create_expense(client, alice, status="paid")

    response = await client.patch(f"/api/expenses/{expense['id']}/toggle-status", headers=alice["headers"])
    assert response.json()["status"] == "pending"

    response = await client.patch(f"/api/expenses/{expense['id']}/toggle-status", headers=alice["headers"])
    assert response.json()["status"] == "paid"


async def test_filters(client, alice):
    paid = await create_expense(client, alice, status="paid", due_date="2025-03-01")
    pending = await create_expense(client, alice, status="pending", due_date="2025-03-20")
    await create_expense(client, alice, status="pending", due_date="2025-04-01")

    response = await client.get(
        "/api/expenses", params={"month": 3, "year": 2025, "status": "pending"}, headers=alice["headers"]
    )
    assert [e["id"] for e in response.json()] == [pending["id"]]

    response = await client.get("/api/expenses", params={"month": 3, "year": 2025}, headers=alice["headers"])
    assert {e["id"] for e in response.json()} == {paid["id"], pending["id"]}

    response = await client.get("/api/expenses", params={"status": "late"}, headers=alice["headers"])
    assert response.status_code == 422


async def test_expenses_are_scoped(client, admin, alice, bob):
    mine = await create_expense(client, alice)
    theirs = await create_expense(client, bob)

    response = await client.get("/api/expenses", headers=alice["headers"])
    assert [e["id"] for e in response.json()] == [mine["id"]]

    for method in ("put", "delete"):
        kwargs = {"json": {"value": "1.00"}} if method == "put" else {}
        response = await getattr(client, method)(
            f"/api/expenses/{theirs['id']}", headers=alice["headers"], **kwargs
        )
        assert response.status_code == 404

    response = await client.patch(f"/api/expenses/{theirs['id']}/toggle-status", headers=alice["headers"])
    assert response.status_code == 404

    response = await client.get("/api/expenses", headers=admin["headers"])
    assert len(response.json()) == 2


async def test_delete_expense(client, alice):
    expense = await create_expense(client, alice)

    response = await client.delete(f"/api/expenses/{expense['id']}", headers=alice["headers"])
    assert response.status_code == 200

    response = await client.get(f"/api/expenses/{expense['id']}", headers=alice["headers"])
    assert response.status_code == 404
