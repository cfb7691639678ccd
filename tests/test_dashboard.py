from decimal import Decimal
from types import SimpleNamespace

from imobras.services.dashboard import money_sum, summarize_month, summarize_year
from tests.helpers import create_contract, create_expense, create_revenue


def revenue(value, month=3, year=2025, type="location"):
    return SimpleNamespace(value=Decimal(value), month=month, year=year, type=type)


def expense(value, month=3, year=2025, status="paid"):
    return SimpleNamespace(value=Decimal(value), month=month, year=year, status=status)


def test_money_sum_is_exact():
    assert money_sum(["0.10", "0.20"]) == Decimal("0.30")
    assert money_sum([]) == Decimal("0.00")


def test_summarize_month_totals():
    summary = summarize_month(
        [revenue("1000.00"), revenue("250.50", type="admin"), revenue("99.00", month=4)],
        [expense("400.00"), expense("80.25", status="pending"), expense("10.00", year=2024)],
        month=3,
        year=2025,
        active_contracts=2
    )

    assert summary["total_revenue"] == Decimal("1250.50")
    assert summary["total_expense"] == Decimal("480.25")
    assert summary["paid_expense"] == Decimal("400.00")
    assert summary["pending_expense"] == Decimal("80.25")
    assert summary["net_profit"] == Decimal("770.25")
    assert summary["active_contracts"] == 2
    assert summary["revenue_count"] == 2
    assert summary["expense_count"] == 2


def test_summarize_month_without_data():
    summary = summarize_month([], [], month=1, year=2025)
    assert summary["total_revenue"] == Decimal("0.00")
    assert summary["net_profit"] == Decimal("0.00")


def test_summarize_year_breakdown():
    summary = summarize_year(
        [revenue("1000.00", month=1), revenue("200.00", month=1, type="insurance"), revenue("500.00", month=12)],
        [expense("300.00", month=1), expense("50.00", month=6, status="pending"), expense("1.00", year=2024)],
        year=2025
    )

    months = summary["months"]
    assert len(months) == 12
    assert [m["label"] for m in months][:3] == ["Jan", "Fev", "Mar"]
    assert months[0]["revenue"] == Decimal("1200.00")
    assert months[0]["profit"] == Decimal("900.00")
    assert months[5]["profit"] == Decimal("-50.00")
    assert months[11]["revenue"] == Decimal("500.00")
    assert months[2]["revenue"] == Decimal("0.00")

    assert summary["total_revenue"] == Decimal("1700.00")
    assert summary["total_expense"] == Decimal("350.00")
    assert summary["total_profit"] == Decimal("1350.00")
    assert summary["revenue_by_type"] == {
        "admin": Decimal("0.00"),
        "location": Decimal("1500.00"),
        "insurance": Decimal("200.00"),
    }
    assert summary["expense_by_status"] == {"pending": Decimal("50.00"), "paid": Decimal("300.00")}


async def test_monthly_summary_endpoint(client, alice):
    contract = await create_contract(client, alice)
    await create_revenue(client, alice, contract["id"], value="1000.00", month=3, year=2025)
    await create_revenue(client, alice, contract["id"], value="250.50", type="admin", month=3, year=2025)
    await create_expense(client, alice, value="400.00", status="paid", due_date="2025-03-15")

    response = await client.get(
        "/api/dashboard/summary", params={"month": 3, "year": 2025}, headers=alice["headers"]
    )
    assert response.status_code == 200
    data = response.json()

    assert Decimal(data["total_revenue"]) == Decimal("1250.50")
    assert Decimal(data["total_expense"]) == Decimal("400.00")
    assert Decimal(data["paid_expense"]) == Decimal("400.00")
    assert Decimal(data["pending_expense"]) == Decimal("0.00")
    assert Decimal(data["net_profit"]) == Decimal("850.50")
    assert data["active_contracts"] == 1

    # recalculado a cada chamada, sem efeitos colaterais
    again = await client.get(
        "/api/dashboard/summary", params={"month": 3, "year": 2025}, headers=alice["headers"]
    )
    assert again.json() == data


async def test_summary_reflects_only_visible_rows(client, admin, alice, bob):
    await create_revenue(client, alice, (await create_contract(client, alice))["id"], value="100.00")
    await create_revenue(client, bob, (await create_contract(client, bob))["id"], value="900.00")
    await create_expense(client, bob, value="50.00")

    response = await client.get(
        "/api/dashboard/summary", params={"month": 3, "year": 2025}, headers=alice["headers"]
    )
    data = response.json()
    assert Decimal(data["total_revenue"]) == Decimal("100.00")
    assert Decimal(data["total_expense"]) == Decimal("0.00")
    assert data["active_contracts"] == 1

    response = await client.get(
        "/api/dashboard/summary", params={"month": 3, "year": 2025}, headers=admin["headers"]
    )
    data = response.json()
    assert Decimal(data["total_revenue"]) == Decimal("1000.00")
    assert Decimal(data["net_profit"]) == Decimal("950.00")
    assert data["active_contracts"] == 2


async def test_yearly_summary_endpoint(client, alice):
    contract = await create_contract(client, alice)
    await create_revenue(client, alice, contract["id"], value="1000.00", month=1, year=2025)
    await create_revenue(client, alice, contract["id"], value="80.00", type="insurance", month=2, year=2025)
    await create_expense(client, alice, value="300.00", status="pending", due_date="2025-02-10")

    response = await client.get("/api/dashboard/yearly", params={"year": 2025}, headers=alice["headers"])
    assert response.status_code == 200
    data = response.json()

    assert len(data["months"]) == 12
    assert data["months"][1]["label"] == "Fev"
    assert Decimal(data["months"][1]["profit"]) == Decimal("-220.00")
    assert Decimal(data["total_profit"]) == Decimal("780.00")
    assert Decimal(data["revenue_by_type"]["insurance"]) == Decimal("80.00")
    assert Decimal(data["revenue_by_type"]["admin"]) == Decimal("0.00")
    assert Decimal(data["expense_by_status"]["pending"]) == Decimal("300.00")


async def test_dashboard_requires_authentication(client):
    response = await client.get("/api/dashboard/yearly")
    assert response.status_code == 401
