# app/crud/crud_order.py
import uuid
from typing import Any, Dict, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base_class import utcnow
from app.db.models.order import Order, OrderItem, OrderStatus, TERMINAL_STATUSES


class CRUDOrder:
    async def get(self, db: AsyncSession, id: uuid.UUID) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.id == id))
        return result.scalars().first()

    async def get_by_code(self, db: AsyncSession, *, code: str) -> Optional[Order]:
        # Códigos não são únicos: vale o pedido mais recente
        result = await db.execute(
            select(Order).where(Order.code == code).order_by(Order.created_at.desc()).limit(1)
        )
        return result.scalars().first()

    async def get_multi(
        self, db: AsyncSession, *, status: Optional[OrderStatus] = None, skip: int = 0, limit: int = 100
    ) -> List[Order]:
        query = select(Order)
        if status:
            query = query.where(Order.status == status)
        result = await db.execute(query.order_by(Order.created_at.desc()).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def get_active(self, db: AsyncSession) -> List[Order]:
        """Pedidos fora dos status terminais, do mais antigo para o mais novo."""
        result = await db.execute(
            select(Order).where(Order.status.not_in(TERMINAL_STATUSES)).order_by(Order.created_at.asc())
        )
        return list(result.scalars().all())

    async def get_active_codes(self, db: AsyncSession) -> Set[str]:
        result = await db.execute(select(Order.code).where(Order.status.not_in(TERMINAL_STATUSES)))
        return set(result.scalars().all())

    def _build_item(self, position: int, item_in: Dict[str, Any]) -> OrderItem:
        return OrderItem(position=position, **item_in)

    async def create_with_items(
        self, db: AsyncSession, *, obj_in: Dict[str, Any], items: List[Dict[str, Any]]
    ) -> Order:
        """
        Insere o pedido e todos os seus itens na mesma transação.
        Qualquer falha desfaz tudo: o pedido nunca fica visível com parte dos itens.
        """
        db_order = Order(**obj_in, items=[])
        try:
            db.add(db_order)
            await db.flush()  # Insere o pedido antes dos itens
            for position, item_in in enumerate(items):
                db_order.items.append(self._build_item(position, item_in))
            await db.flush()
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return db_order

    async def update(self, db: AsyncSession, *, db_obj: Order, obj_in: Dict[str, Any]) -> Order:
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def update_status(self, db: AsyncSession, *, order_id: uuid.UUID, status: OrderStatus) -> Optional[Order]:
        # Sem tabela de transições: qualquer status pode seguir qualquer outro
        db_order = await self.get(db, id=order_id)
        if not db_order:
            return None
        db_order.status = status
        db_order.updated_at = utcnow()
        await db.commit()
        return db_order

    async def remove(self, db: AsyncSession, *, id: uuid.UUID) -> Optional[Order]:
        obj = await self.get(db, id=id)
        if obj:
            await db.delete(obj)  # Itens removidos em cascata
            await db.commit()
        return obj


order = CRUDOrder()
