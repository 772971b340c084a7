# app/services/order_service.py
import logging
import random
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from redis.exceptions import RedisError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.crud import order as crud_order
from app.db.models.order import Order, OrderStatus, ServiceType, TERMINAL_STATUSES
from app.schemas.order import OrderCreateSchemas, OrderItemInSchemas, OrderUpdateSchemas
from app.services.redis_service import KitchenQueue

logger = logging.getLogger(__name__)

CODE_ATTEMPTS = 10
MAX_QUANTITY = 2_147_483_647  # limite da coluna Integer


def _coerce_quantity(value: Any) -> int:
    try:
        quantity = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    if quantity <= 0:
        return 1
    return min(quantity, MAX_QUANTITY)


def normalize_items(items: Optional[Sequence[OrderItemInSchemas]]) -> List[Dict[str, Any]]:
    """
    Valida os itens e devolve as linhas prontas para gravar.
    O nome do produto é o primeiro não vazio entre product_name, name e title.
    """
    if not items:
        raise ValidationError("Itens obrigatórios")

    normalized = []
    for index, item in enumerate(items, start=1):
        product_name = next(
            (value.strip() for value in (item.product_name, item.name, item.title) if value and value.strip()),
            None,
        )
        if not product_name:
            raise ValidationError(
                f"Item {index} sem product_name (envie product_name, name ou title no body)"
            )
        normalized.append({
            "product_name": product_name,
            "quantity": _coerce_quantity(item.quantity),
            "notes": str(item.notes) if item.notes else None,
            "price": item.price,
        })
    return normalized


def is_delivery_table(table_number: Any) -> bool:
    """Sem mesa, "0" ou 0 significam entrega."""
    if table_number is None:
        return True
    if isinstance(table_number, str):
        return table_number.strip() in ("", "0")
    return table_number == 0


def resolve_service_type(table_number: Any) -> Tuple[ServiceType, Optional[str]]:
    if is_delivery_table(table_number):
        return ServiceType.DELIVERY, None
    return ServiceType.MESA, str(table_number).strip()


def order_total(db_order: Order) -> Decimal:
    if db_order.total is not None:
        return db_order.total
    return sum(
        (item.price * item.quantity for item in db_order.items if item.price is not None),
        Decimal("0"),
    )


class OrderService:
    def __init__(self, db: AsyncSession, queue: KitchenQueue):
        self.db = db
        self.queue = queue

    async def _generate_code(self) -> str:
        # Evita repetir códigos de pedidos ainda na cozinha; sem garantia global de unicidade
        in_use = await crud_order.get_active_codes(self.db)
        code = None
        for _ in range(CODE_ATTEMPTS):
            code = f"{settings.ORDER_CODE_PREFIX}{random.randint(100, 999)}"
            if code not in in_use:
                break
        return code

    async def _notify_kitchen(self, order_id: uuid.UUID) -> None:
        try:
            await self.queue.push(order_id)
        except RedisError as e:
            logger.warning("Pedido %s gravado, mas não entrou na fila da cozinha: %s", order_id, e)

    async def _drop_from_kitchen(self, order_id: uuid.UUID) -> None:
        try:
            await self.queue.remove(order_id)
        except RedisError as e:
            logger.warning("Não foi possível remover o pedido %s da fila da cozinha: %s", order_id, e)

    async def create_order(self, order_in: OrderCreateSchemas) -> Order:
        items = normalize_items(order_in.items)
        service_type, table_number = resolve_service_type(order_in.table_number)

        db_order = await crud_order.create_with_items(
            self.db,
            obj_in={
                "code": await self._generate_code(),
                "table_number": table_number,
                "customer_name": order_in.customer_name or None,
                "customer_phone": order_in.customer_phone or None,
                "status": OrderStatus.PENDENTE,
                "source": order_in.source or "PDV",
                "service_type": service_type,
                "obs": order_in.obs,
                "payment_method": order_in.payment_method,
                "total": order_in.total,
            },
            items=items,
        )

        # Após o commit: falha na fila não desfaz o pedido
        await self._notify_kitchen(db_order.id)
        return db_order

    async def list_orders(self, status: Optional[OrderStatus] = None, skip: int = 0, limit: int = 100) -> List[Order]:
        return await crud_order.get_multi(self.db, status=status, skip=skip, limit=limit)

    async def kitchen_queue(self) -> List[Order]:
        return await crud_order.get_active(self.db)

    async def update_status(self, order_id: uuid.UUID, status: OrderStatus) -> Order:
        db_order = await crud_order.update_status(self.db, order_id=order_id, status=status)
        if not db_order:
            raise NotFoundError("Pedido não encontrado")
        if status in TERMINAL_STATUSES:
            await self._drop_from_kitchen(db_order.id)
        return db_order

    async def update_order(self, order_id: uuid.UUID, order_in: OrderUpdateSchemas) -> Order:
        db_order = await crud_order.get(self.db, id=order_id)
        if not db_order:
            raise NotFoundError("Pedido não encontrado")

        update_data = order_in.model_dump(exclude_unset=True)
        if "status" in update_data and update_data["status"] is None:
            raise ValidationError("Status não pode ser nulo")
        if "table_number" in update_data:
            delivery = is_delivery_table(update_data["table_number"])
            if db_order.service_type == ServiceType.DELIVERY and not delivery:
                raise ValidationError("Pedido de entrega não pode ter número de mesa")
            if db_order.service_type == ServiceType.MESA and delivery:
                raise ValidationError("Pedido de mesa exige número de mesa")
            update_data["table_number"] = None if delivery else str(update_data["table_number"]).strip()

        db_order = await crud_order.update(self.db, db_obj=db_order, obj_in=update_data)
        if db_order.status in TERMINAL_STATUSES:
            await self._drop_from_kitchen(db_order.id)
        return db_order

    async def delete_order(self, order_id: uuid.UUID) -> None:
        db_order = await crud_order.remove(self.db, id=order_id)
        if not db_order:
            raise NotFoundError("Pedido não encontrado")
        await self._drop_from_kitchen(order_id)

    async def track(self, code: str) -> Tuple[Order, Decimal]:
        db_order = await crud_order.get_by_code(self.db, code=code)
        if not db_order:
            raise NotFoundError("Pedido não encontrado")
        return db_order, order_total(db_order)
