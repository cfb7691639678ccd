"""
Helpers compartilhados pelos testes (payloads e criação de registros)
"""

from imobras.core import Principal, Role
from imobras.database import AsyncSessionLocal
from imobras.services import auth as auth_service


async def create_user(email: str, role: str = Role.USER.value, password: str = "secret123",
                      full_name: str = "Usuário Teste") -> dict:
    """Cria identidade direto no banco e devolve id, token e headers"""
    async with AsyncSessionLocal() as session:
        profile = await auth_service.sign_up(session, email, password, full_name, role=role)
        _, token = await auth_service.authenticate(session, email, password)
    return {
        "id": profile.id,
        "email": profile.email,
        "password": password,
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
        "principal": Principal(
            identity_id=profile.id,
            email=profile.email,
            is_admin=role == Role.ADMIN.value
        ),
    }


def contract_payload(**overrides) -> dict:
    data = {
        "name": "Apto 101 - Ed. Aurora",
        "owner_name": "Carlos Mendes",
        "owner_document": "123.456.789-00",
        "tenant_name": "Fernanda Alves",
        "tenant_document": "987.654.321-00",
        "property_address": "Rua das Flores, 100 - Apto 101",
        "property_iptu": "0123456-7",
        "property_due_day": 10,
        "start_date": "2025-01-01",
        "end_date": "2026-12-31",
        "rent_value": "2500.00",
        "iptu_value": "120.00",
        "admin_fee_percentage": "10",
    }
    data.update(overrides)
    return data


def expense_payload(**overrides) -> dict:
    data = {
        "description": "Conta de luz",
        "value": "400.00",
        "due_date": "2025-03-15",
        "status": "paid",
        "bank": "Banco do Brasil",
        "payment_method": "PIX",
    }
    data.update(overrides)
    return data


async def create_contract(client, user, **overrides) -> dict:
    response = await client.post("/api/contracts", json=contract_payload(**overrides), headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()


async def create_revenue(client, user, contract_id, value="1000.00", type="location", month=3, year=2025) -> dict:
    response = await client.post(
        "/api/revenues",
        json={"contract_id": contract_id, "type": type, "value": value, "month": month, "year": year},
        headers=user["headers"]
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_expense(client, user, **overrides) -> dict:
    response = await client.post("/api/expenses", json=expense_payload(**overrides), headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()
