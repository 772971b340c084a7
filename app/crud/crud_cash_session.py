# app/crud/crud_cash_session.py
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base_class import utcnow
from app.db.models.cash_session import CashSession, CashSessionStatus


class CRUDCashSession:
    async def get(self, db: AsyncSession, id: uuid.UUID) -> Optional[CashSession]:
        return await db.get(CashSession, id, populate_existing=True)

    async def get_open(self, db: AsyncSession) -> Optional[CashSession]:
        result = await db.execute(
            select(CashSession)
            .where(CashSession.status == CashSessionStatus.OPEN)
            .order_by(CashSession.opened_at.desc())
            .limit(1)
        )
        return result.scalars().first()

    async def get_multi(
        self, db: AsyncSession, *, status: Optional[CashSessionStatus] = None, skip: int = 0, limit: int = 100
    ) -> List[CashSession]:
        query = select(CashSession)
        if status:
            query = query.where(CashSession.status == status)
        result = await db.execute(query.order_by(CashSession.opened_at.desc()).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> CashSession:
        db_obj = CashSession(**obj_in, status=CashSessionStatus.OPEN)
        try:
            db.add(db_obj)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return db_obj

    async def close(self, db: AsyncSession, *, id: uuid.UUID, obj_in: Dict[str, Any]) -> Optional[CashSession]:
        """
        Fecha a sessão somente se ela ainda estiver aberta.
        Retorna None quando outra requisição já a fechou.
        """
        now = utcnow()
        result = await db.execute(
            update(CashSession)
            .where(CashSession.id == id, CashSession.status == CashSessionStatus.OPEN)
            .values(**obj_in, status=CashSessionStatus.CLOSED, closed_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await db.rollback()
            return None
        await db.commit()
        return await self.get(db, id=id)


cash_session = CRUDCashSession()
