# app/crud/crud_address.py
import uuid
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base_class import utcnow
from app.db.models.address import Address


def _owned_by(user_id: Optional[uuid.UUID], asaas_customer_id: Optional[str]):
    if user_id is not None:
        return Address.user_id == user_id
    return Address.asaas_customer_id == asaas_customer_id


class CRUDAddress:
    async def get(self, db: AsyncSession, id: uuid.UUID) -> Optional[Address]:
        return await db.get(Address, id)

    async def get_by_owner(
        self, db: AsyncSession, *, user_id: Optional[uuid.UUID] = None, asaas_customer_id: Optional[str] = None
    ) -> List[Address]:
        result = await db.execute(
            select(Address).where(_owned_by(user_id, asaas_customer_id)).order_by(Address.created_at)
        )
        return list(result.scalars().all())

    async def count_by_owner(
        self, db: AsyncSession, *, user_id: Optional[uuid.UUID] = None, asaas_customer_id: Optional[str] = None
    ) -> int:
        return await db.scalar(
            select(func.count()).select_from(Address).where(_owned_by(user_id, asaas_customer_id))
        )

    async def get_defaults_for_users(self, db: AsyncSession, *, user_ids: Sequence[uuid.UUID]) -> Dict[uuid.UUID, Address]:
        if not user_ids:
            return {}
        result = await db.execute(
            select(Address).where(Address.user_id.in_(user_ids), Address.is_default.is_(True))
        )
        return {a.user_id: a for a in result.scalars().all()}

    async def get_defaults_for_asaas(self, db: AsyncSession, *, customer_ids: Sequence[str]) -> Dict[str, Address]:
        if not customer_ids:
            return {}
        result = await db.execute(
            select(Address).where(Address.asaas_customer_id.in_(customer_ids), Address.is_default.is_(True))
        )
        return {a.asaas_customer_id: a for a in result.scalars().all()}

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Address:
        db_obj = Address(**obj_in)
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: Address, obj_in: Dict[str, Any]) -> Address:
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def set_default(self, db: AsyncSession, *, db_obj: Address) -> Address:
        """Desmarca o padrão atual do mesmo dono e marca este, na mesma transação."""
        try:
            await db.execute(
                update(Address)
                .where(_owned_by(db_obj.user_id, db_obj.asaas_customer_id), Address.id != db_obj.id)
                .values(is_default=False, updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            db_obj.is_default = True
            db_obj.updated_at = utcnow()
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: Address) -> Address:
        await db.delete(db_obj)
        await db.commit()
        return db_obj


address = CRUDAddress()
