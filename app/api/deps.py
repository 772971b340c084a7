# app/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.address_service import AddressService
from app.services.asaas_service import AsaasClient, asaas_client
from app.services.cash_session_service import CashSessionService
from app.services.charge_service import ChargeService
from app.services.customer_service import CustomerResolver
from app.services.menu_service import MenuService
from app.services.order_service import OrderService
from app.services.redis_service import KitchenQueue, kitchen_queue


def get_kitchen_queue() -> KitchenQueue:
    return kitchen_queue


def get_asaas_client() -> AsaasClient:
    return asaas_client


def get_order_service(
    db: AsyncSession = Depends(get_db),
    queue: KitchenQueue = Depends(get_kitchen_queue),
) -> OrderService:
    return OrderService(db, queue)


def get_cash_session_service(db: AsyncSession = Depends(get_db)) -> CashSessionService:
    return CashSessionService(db)


def get_customer_resolver(
    db: AsyncSession = Depends(get_db),
    asaas: AsaasClient = Depends(get_asaas_client),
) -> CustomerResolver:
    return CustomerResolver(db, asaas)


def get_charge_service(asaas: AsaasClient = Depends(get_asaas_client)) -> ChargeService:
    return ChargeService(asaas)


def get_address_service(db: AsyncSession = Depends(get_db)) -> AddressService:
    return AddressService(db)


def get_menu_service(db: AsyncSession = Depends(get_db)) -> MenuService:
    return MenuService(db)
