from decimal import Decimal

from tests.helpers import create_contract, create_revenue


async def test_create_revenue_with_contract_name(client, alice):
    contract = await create_contract(client, alice, name="Loja Centro")
    revenue = await create_revenue(client, alice, contract["id"], value="250.50", type="admin")

    assert revenue["contract_name"] == "Loja Centro"
    assert revenue["type"] == "admin"
    assert Decimal(revenue["value"]) == Decimal("250.50")

    response = await client.get(f"/api/revenues/{revenue['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["contract_name"] == "Loja Centro"


async def test_revenue_requires_existing_contract(client, alice):
    response = await client.post(
        "/api/revenues",
        json={"contract_id": "nao-existe", "type": "location", "value": "100.00", "month": 3, "year": 2025},
        headers=alice["headers"]
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Contrato não encontrado"


async def test_revenue_cannot_reference_another_users_contract(client, alice, bob):
    theirs = await create_contract(client, bob)

    response = await client.post(
        "/api/revenues",
        json={"contract_id": theirs["id"], "type": "location", "value": "100.00", "month": 3, "year": 2025},
        headers=alice["headers"]
    )
    assert response.status_code == 422


async def test_revenue_validation(client, alice):
    contract = await create_contract(client, alice)
    base = {"contract_id": contract["id"], "type": "location", "value": "100.00", "month": 3, "year": 2025}

    for override in ({"type": "rent"}, {"month": 13}, {"month": 0}, {"value": "-5"}):
        response = await client.post("/api/revenues", json={**base, **override}, headers=alice["headers"])
        assert response.status_code == 422, override


async def test_filter_by_period(client, alice):
    contract = await create_contract(client, alice)
    march = await create_revenue(client, alice, contract["id"], month=3, year=2025)
    await create_revenue(client, alice, contract["id"], month=4, year=2025)
    await create_revenue(client, alice, contract["id"], month=3, year=2024)

    response = await client.get("/api/revenues", params={"month": 3, "year": 2025}, headers=alice["headers"])
    assert [r["id"] for r in response.json()] == [march["id"]]

    response = await client.get("/api/revenues", params={"year": 2025}, headers=alice["headers"])
    assert len(response.json()) == 2


async def test_revenues_are_scoped(client, admin, alice, bob):
    mine = await create_revenue(client, alice, (await create_contract(client, alice))["id"])
    theirs = await create_revenue(client, bob, (await create_contract(client, bob))["id"])

    response = await client.get("/api/revenues", headers=alice["headers"])
    assert [r["id"] for r in response.json()] == [mine["id"]]

    response = await client.delete(f"/api/revenues/{theirs['id']}", headers=alice["headers"])
    assert response.status_code == 404

    response = await client.get("/api/revenues", headers=admin["headers"])
    assert {r["id"] for r in response.json()} == {mine["id"], theirs["id"]}


async def test_delete_revenue(client, alice):
    contract = await create_contract(client, alice)
    revenue = await create_revenue(client, alice, contract["id"])

    response = await client.delete(f"/api/revenues/{revenue['id']}", headers=alice["headers"])
    assert response.status_code == 200

    response = await client.get("/api/revenues", headers=alice["headers"])
    assert response.json() == []


async def test_revenues_cannot_be_edited(client, alice):
    contract = await create_contract(client, alice)
    revenue = await create_revenue(client, alice, contract["id"])

    response = await client.put(
        f"/api/revenues/{revenue['id']}", json={"value": "1.00"}, headers=alice["headers"]
    )
    assert response.status_code == 405
