import uuid

import pytest

from app.db.models import Profile


@pytest.fixture
async def profile_id(session_factory):
    profile_id = uuid.uuid4()
    async with session_factory() as session:
        session.add(Profile(id=profile_id, full_name="Helena Prado", phone="11933334444"))
        await session.commit()
    return str(profile_id)


ADDRESS = {"street": "Rua das Flores", "number": "120", "neighborhood": "Jardins", "city": "São Paulo", "state": "SP"}


async def add_address(client, customer_id, **overrides):
    response = await client.post(f"/customers/{customer_id}/addresses", json={**ADDRESS, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


async def test_first_address_becomes_default(client, profile_id):
    first = await add_address(client, profile_id)
    second = await add_address(client, profile_id, street="Rua do Comércio", number=45)

    assert first["is_default"] is True
    assert second["is_default"] is False
    assert second["number"] == "45"
    assert first["zip_code"] == "00000-000"
    assert first["user_id"] == profile_id

    listed = await client.get(f"/customers/{profile_id}/addresses")
    assert [a["street"] for a in listed.json()] == ["Rua das Flores", "Rua do Comércio"]


@pytest.mark.parametrize("missing", ["street", "number", "neighborhood"])
async def test_street_number_and_neighborhood_are_required(client, profile_id, missing):
    response = await client.post(f"/customers/{profile_id}/addresses", json={**ADDRESS, missing: "  "})

    assert response.status_code == 400
    assert response.json() == {"error": "Preencha Rua, Número e Bairro"}


async def test_asaas_only_customer_addresses(client):
    address = await add_address(client, "asaas_cus_000042")

    assert address["asaas_customer_id"] == "cus_000042"
    assert address["user_id"] is None
    assert address["is_default"] is True

    listed = await client.get("/customers/asaas_cus_000042/addresses")
    assert [a["id"] for a in listed.json()] == [address["id"]]
    other = await client.get("/customers/asaas_cus_000099/addresses")
    assert other.json() == []


async def test_unknown_or_invalid_customer(client):
    unknown = await client.get(f"/customers/{uuid.uuid4()}/addresses")
    invalid = await client.post("/customers/nao-e-um-id/addresses", json=ADDRESS)

    assert unknown.status_code == 404
    assert unknown.json() == {"error": "Cliente não encontrado"}
    assert invalid.status_code == 400


async def test_set_default_address(client, profile_id):
    first = await add_address(client, profile_id)
    second = await add_address(client, profile_id, street="Rua do Comércio")

    response = await client.patch(f"/customers/{profile_id}/addresses/{second['id']}/default")

    assert response.status_code == 200
    assert response.json()["is_default"] is True
    listed = {a["id"]: a["is_default"] for a in (await client.get(f"/customers/{profile_id}/addresses")).json()}
    assert listed == {first["id"]: False, second["id"]: True}


async def test_update_address(client, profile_id):
    address = await add_address(client, profile_id)

    response = await client.put(
        f"/customers/{profile_id}/addresses/{address['id']}", json={"complement": "Apto 12", "zip_code": "01234-000"}
    )
    blank = await client.put(f"/customers/{profile_id}/addresses/{address['id']}", json={"street": ""})

    assert response.status_code == 200
    assert response.json()["complement"] == "Apto 12"
    assert response.json()["zip_code"] == "01234-000"
    assert response.json()["street"] == "Rua das Flores"
    assert blank.status_code == 400


async def test_address_of_another_customer_is_not_found(client, profile_id):
    address = await add_address(client, "asaas_cus_000042")

    update = await client.put(f"/customers/{profile_id}/addresses/{address['id']}", json={"number": "2"})
    delete = await client.delete(f"/customers/asaas_cus_000099/addresses/{address['id']}")

    assert update.status_code == 404
    assert delete.status_code == 404
    assert update.json() == {"error": "Endereço não encontrado"}


async def test_delete_address(client, profile_id):
    address = await add_address(client, profile_id)

    response = await client.delete(f"/customers/{profile_id}/addresses/{address['id']}")

    assert response.json() == {"success": True}
    assert (await client.get(f"/customers/{profile_id}/addresses")).json() == []
