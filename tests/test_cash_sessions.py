import uuid

import pytest

from app.core.exceptions import ConflictError
from app.crud import cash_session as crud_cash_session
from app.db.models import CashSession, CashSessionStatus
from app.schemas.cash_session import CashSessionOpenSchemas
from app.services.cash_session_service import CashSessionService, reconcile


async def open_session(client, **payload):
    payload.setdefault("opened_by_name", "Maria")
    response = await client.post("/cash-sessions", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_open_session(client):
    session = await open_session(client, initial_balance=100, opened_by_id="u-1")

    assert session["status"] == "OPEN"
    assert session["initial_balance"] == 100
    assert session["opened_by_id"] == "u-1"
    assert session["opened_by_name"] == "Maria"
    assert session["closed_at"] is None
    assert session["variance"] is None


async def test_open_session_defaults_initial_balance(client):
    session = await open_session(client)

    assert session["initial_balance"] == 0


@pytest.mark.parametrize("name", [None, "", "   "])
async def test_open_session_requires_operator_name(client, name):
    response = await client.post("/cash-sessions", json={"opened_by_name": name})

    assert response.status_code == 400
    assert response.json() == {"error": "Nome do operador é obrigatório"}


async def test_only_one_open_session(client):
    first = await open_session(client)

    response = await client.post("/cash-sessions", json={"opened_by_name": "João"})
    assert response.status_code == 400
    assert "caixa aberto" in response.json()["error"]

    response = await client.patch(f"/cash-sessions/{first['id']}", json={"counted_cash": 0})
    assert response.status_code == 200

    second = await open_session(client, opened_by_name="João")
    assert second["id"] != first["id"]


async def test_unique_index_blocks_racing_open(db, monkeypatch):
    service = CashSessionService(db)
    await service.open_session(CashSessionOpenSchemas(opened_by_name="Maria"))

    # Simula a corrida: a leitura não enxerga o caixa já aberto
    async def no_open_session(db):
        return None

    monkeypatch.setattr(crud_cash_session, "get_open", no_open_session)

    with pytest.raises(ConflictError):
        await service.open_session(CashSessionOpenSchemas(opened_by_name="João"))


async def test_close_session_computes_variance(client):
    session = await open_session(client, initial_balance=100)

    response = await client.patch(f"/cash-sessions/{session['id']}", json={
        "counted_cash": 360,
        "closed_by_id": "u-2",
        "closed_by_name": "Pedro",
        "notes": "sobrou troco",
        "total_sales": 900,
        "total_pix": 400,
        "total_card": 250,
        "total_cash_sales": 250,
        "order_count": 31,
    })

    assert response.status_code == 200
    closed = response.json()
    assert closed["status"] == "CLOSED"
    assert closed["expected_cash"] == 350
    assert closed["counted_cash"] == 360
    assert closed["variance"] == 10
    assert closed["total_sales"] == 900
    assert closed["total_pix"] == 400
    assert closed["total_card"] == 250
    assert closed["total_cash_sales"] == 250
    assert closed["order_count"] == 31
    assert closed["closed_by_name"] == "Pedro"
    assert closed["notes"] == "sobrou troco"
    assert closed["closed_at"] is not None


async def test_close_session_with_missing_totals(client):
    session = await open_session(client)

    response = await client.patch(f"/cash-sessions/{session['id']}", json={"counted_cash": 12.5})

    closed = response.json()
    assert closed["expected_cash"] == 0
    assert closed["variance"] == 12.5
    assert closed["total_sales"] == 0
    assert closed["order_count"] == 0


async def test_close_session_twice_is_rejected(client):
    session = await open_session(client, initial_balance=50)
    first = await client.patch(f"/cash-sessions/{session['id']}", json={
        "counted_cash": 80, "total_cash_sales": 30, "closed_by_name": "Pedro",
    })
    assert first.status_code == 200

    second = await client.patch(f"/cash-sessions/{session['id']}", json={
        "counted_cash": 999, "total_cash_sales": 1, "closed_by_name": "Outro",
    })

    assert second.status_code == 400
    assert second.json() == {"error": "Esta sessão já foi fechada"}

    stored = (await client.get(f"/cash-sessions/{session['id']}")).json()
    assert stored == first.json()


async def test_close_session_requires_counted_cash(client):
    session = await open_session(client)

    response = await client.patch(f"/cash-sessions/{session['id']}", json={"total_cash_sales": 10})

    assert response.status_code == 400
    assert response.json() == {"error": "Valor contado é obrigatório para fechar o caixa"}


async def test_close_unknown_session(client):
    response = await client.patch(f"/cash-sessions/{uuid.uuid4()}", json={"counted_cash": 10})

    assert response.status_code == 404
    assert response.json() == {"error": "Sessão não encontrada"}


async def test_current_session(client):
    response = await client.get("/cash-sessions", params={"current": "true"})
    assert response.status_code == 200
    assert response.json() is None

    session = await open_session(client)

    response = await client.get("/cash-sessions", params={"current": "true"})
    assert response.json()["id"] == session["id"]


async def test_list_sessions_by_status_newest_first(client):
    first = await open_session(client, opened_by_name="Ana")
    await client.patch(f"/cash-sessions/{first['id']}", json={"counted_cash": 0})
    second = await open_session(client, opened_by_name="Bia")
    await client.patch(f"/cash-sessions/{second['id']}", json={"counted_cash": 0})
    third = await open_session(client, opened_by_name="Caio")

    all_sessions = (await client.get("/cash-sessions")).json()
    assert [s["id"] for s in all_sessions] == [third["id"], second["id"], first["id"]]

    closed = (await client.get("/cash-sessions", params={"status": "CLOSED"})).json()
    assert [s["id"] for s in closed] == [second["id"], first["id"]]

    opened = (await client.get("/cash-sessions", params={"status": "OPEN"})).json()
    assert [s["id"] for s in opened] == [third["id"]]


async def test_session_status(client):
    assert (await client.get("/cash-sessions/status")).json() == {"isOpen": False, "session": None}

    session = await open_session(client, initial_balance=20)

    body = (await client.get("/cash-sessions/status")).json()
    assert body["isOpen"] is True
    assert body["session"]["id"] == session["id"]


async def test_get_unknown_session(client):
    response = await client.get(f"/cash-sessions/{uuid.uuid4()}")

    assert response.status_code == 404


async def test_closed_session_keeps_status_in_store(db, client):
    session = await open_session(client)
    await client.patch(f"/cash-sessions/{session['id']}", json={"counted_cash": 5})

    stored = await db.get(CashSession, uuid.UUID(session["id"]))
    assert stored.status == CashSessionStatus.CLOSED


def test_reconcile():
    from decimal import Decimal

    assert reconcile(Decimal("100"), Decimal("250"), Decimal("360")) == (Decimal("350"), Decimal("10"))
    assert reconcile(None, None, Decimal("-5")) == (Decimal("0"), Decimal("-5"))
