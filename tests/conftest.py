import json
import os

# Configuração de teste antes de importar a aplicação
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api import deps
from app.database import get_db
from app.db.base_class import Base
from app.db import models  # noqa: F401
from app.main import app
from app.services.asaas_service import AsaasClient
from app.utils import only_digits


class FakeKitchenQueue:
    """Fila em memória no lugar da lista do Redis."""

    def __init__(self):
        self.ids = []
        self.fail = False

    async def push(self, order_id):
        if self.fail:
            raise RedisConnectionError("Redis fora do ar")
        self.ids.append(str(order_id))

    async def remove(self, order_id):
        if self.fail:
            raise RedisConnectionError("Redis fora do ar")
        self.ids = [i for i in self.ids if i != str(order_id)]


class FakeAsaas:
    """Imita as rotas do Asaas usadas pela API (para httpx.MockTransport)."""

    def __init__(self):
        self.requests = []
        self.customers = []
        self.fail_search = False
        self.fail_qr_code = False
        self.charge_error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/customers") and request.method == "GET":
            if self.fail_search:
                return httpx.Response(503, json={"errors": [{"description": "Serviço indisponível"}]})
            cpf = request.url.params.get("cpfCnpj")
            name = request.url.params.get("name")
            data = [
                c for c in self.customers
                if (cpf and only_digits(c.get("cpfCnpj")) == cpf)
                or (name and name.lower() in (c.get("name") or "").lower())
            ]
            return httpx.Response(200, json={"object": "list", "data": data, "totalCount": len(data)})

        if path.endswith("/customers") and request.method == "POST":
            customer = {"id": f"cus_{len(self.customers) + 1:06d}", **json.loads(request.content)}
            self.customers.append(customer)
            return httpx.Response(200, json=customer)

        if path.endswith("/payments") and request.method == "POST":
            if self.charge_error:
                return httpx.Response(400, json={"errors": [{"code": "invalid_value", "description": self.charge_error}]})
            body = json.loads(request.content)
            return httpx.Response(200, json={"id": "pay_000001", "status": "PENDING", **body})

        if path.endswith("/pixQrCode"):
            if self.fail_qr_code:
                return httpx.Response(404, json={"errors": [{"description": "Cobrança não encontrada"}]})
            return httpx.Response(200, json={"encodedImage": "iVBORw0KGgo=", "payload": "00020101021226", "expirationDate": "2026-10-20 23:59:59"})

        return httpx.Response(404, json={"errors": [{"description": "Rota desconhecida"}]})

    def calls(self, method: str, suffix: str):
        return [r for r in self.requests if r.method == method and r.url.path.endswith(suffix)]


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def kitchen_queue():
    return FakeKitchenQueue()


@pytest.fixture
def fake_asaas():
    return FakeAsaas()


@pytest.fixture
async def asaas_client(fake_asaas):
    client = AsaasClient(
        api_url="https://asaas.test/v3",
        api_key="test-key",
        transport=httpx.MockTransport(fake_asaas),
    )
    yield client
    await client.aclose()


@pytest.fixture
async def client(session_factory, kitchen_queue, asaas_client):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_kitchen_queue] = lambda: kitchen_queue
    app.dependency_overrides[deps.get_asaas_client] = lambda: asaas_client

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test/api/v1") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def count_rows(session_factory):
    async def _count(model) -> int:
        async with session_factory() as session:
            return await session.scalar(select(func.count()).select_from(model))
    return _count
