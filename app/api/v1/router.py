from fastapi import APIRouter

from app.api.v1.endpoints import (
    orders,
    kds,
    cash_sessions,
    customers,
    charges,
    menu,
)

api_router_v1 = APIRouter()

api_router_v1.include_router(orders.router, prefix="/orders", tags=["Pedidos"])
api_router_v1.include_router(kds.router, prefix="/kds", tags=["Cozinha"])
api_router_v1.include_router(cash_sessions.router, prefix="/cash-sessions", tags=["Caixa"])
api_router_v1.include_router(customers.router, prefix="/customers", tags=["Clientes"])
api_router_v1.include_router(charges.router, prefix="/charges", tags=["Cobranças"])
api_router_v1.include_router(menu.router, prefix="/menu", tags=["Cardápio"])


@api_router_v1.get("/", tags=["Root V1"])
async def read_root_v1():
    return {"message": "API V1 Operacional"}
