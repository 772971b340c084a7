import json
from datetime import date

import pytest

from app.services.asaas_service import AsaasClient


def charge_body(fake_asaas):
    return json.loads(fake_asaas.calls("POST", "/payments")[0].content)


async def test_pix_charge_includes_qr_code(client, fake_asaas):
    response = await client.post("/charges", json={
        "customer": "cus_000010",
        "billingType": "PIX",
        "value": 57.9,
        "description": "Pedido A123",
        "externalReference": "order-1",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "pay_000001"
    assert body["pixQrCode"]["payload"] == "00020101021226"
    sent = charge_body(fake_asaas)
    assert sent["customer"] == "cus_000010"
    assert sent["value"] == 57.9
    assert sent["dueDate"] == date.today().isoformat()
    assert sent["externalReference"] == "order-1"


async def test_pix_charge_survives_qr_code_failure(client, fake_asaas):
    fake_asaas.fail_qr_code = True

    response = await client.post("/charges", json={"customer": "cus_000010", "billingType": "PIX", "value": 10})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "pay_000001"
    assert "pixQrCode" not in body


async def test_non_pix_charge_does_not_fetch_qr_code(client, fake_asaas):
    response = await client.post("/charges", json={
        "customer": "cus_000010", "billingType": "BOLETO", "value": 10, "dueDate": "2026-11-05",
    })

    assert response.status_code == 200
    assert "pixQrCode" not in response.json()
    assert charge_body(fake_asaas)["dueDate"] == "2026-11-05"
    assert [r for r in fake_asaas.requests if r.url.path.endswith("/pixQrCode")] == []


async def test_charge_creates_customer_from_identity(client, fake_asaas):
    response = await client.post("/charges", json={
        "name": "Lucia Alves",
        "cpfCnpj": "555.666.777-88",
        "mobilePhone": "11912345678",
        "billingType": "CREDIT_CARD",
        "value": 30,
    })

    assert response.status_code == 200
    assert len(fake_asaas.calls("POST", "/customers")) == 1
    assert charge_body(fake_asaas)["customer"] == "cus_000001"


async def test_charge_reuses_customer_with_same_cpf(client, fake_asaas):
    fake_asaas.customers = [{"id": "cus_000500", "name": "Lucia Alves", "cpfCnpj": "55566677788"}]

    response = await client.post("/charges", json={
        "name": "Lucia Alves", "cpfCnpj": "55566677788", "billingType": "PIX", "value": 30,
    })

    assert response.status_code == 200
    assert fake_asaas.calls("POST", "/customers") == []
    assert charge_body(fake_asaas)["customer"] == "cus_000500"


async def test_charge_requires_customer_identity(client, fake_asaas):
    response = await client.post("/charges", json={"billingType": "PIX", "value": 30, "name": "Sem CPF"})

    assert response.status_code == 400
    assert "cliente" in response.json()["error"]
    assert fake_asaas.calls("POST", "/payments") == []


async def test_provider_error_is_reported(client, fake_asaas):
    fake_asaas.charge_error = "O valor da cobrança deve ser maior que zero."

    response = await client.post("/charges", json={"customer": "cus_000010", "billingType": "PIX", "value": 0})

    assert response.status_code == 500
    assert response.json() == {"error": "O valor da cobrança deve ser maior que zero."}


async def test_missing_api_key_is_an_upstream_error(client):
    from app.api import deps
    from app.main import app

    unconfigured = AsaasClient(api_url="https://asaas.test/v3", api_key="")
    app.dependency_overrides[deps.get_asaas_client] = lambda: unconfigured
    try:
        response = await client.post("/charges", json={"customer": "cus_1", "billingType": "PIX", "value": 1})
    finally:
        await unconfigured.aclose()

    assert response.status_code == 500
    assert response.json() == {"error": "ASAAS_API_KEY não configurada"}
