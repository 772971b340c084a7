# app/crud/crud_menu.py
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base_class import utcnow
from app.db.models.menu import Category, ChoiceGroup, ChoiceOption, Product


class CRUDMenuBase:
    """Operações comuns às tabelas do cardápio (todas ordenadas por sort_order)."""

    model = None
    children: Optional[str] = None  # coleção filha, carregada vazia em objetos novos

    async def get(self, db: AsyncSession, id: uuid.UUID):
        return await db.get(self.model, id)

    async def next_sort_order(self, db: AsyncSession, **filters: Any) -> int:
        query = select(func.max(self.model.sort_order))
        for field, value in filters.items():
            query = query.where(getattr(self.model, field) == value)
        current = await db.scalar(query)
        return (current or 0) + 1

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]):
        db_obj = self.model(**obj_in)
        if self.children:
            setattr(db_obj, self.children, [])
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj, obj_in: Dict[str, Any]):
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj) -> None:
        await db.delete(db_obj)  # Filhos removidos em cascata
        await db.commit()


class CRUDCategory(CRUDMenuBase):
    model = Category
    children = "products"

    async def get_multi(self, db: AsyncSession) -> List[Category]:
        result = await db.execute(select(Category).order_by(Category.sort_order, Category.created_at))
        return list(result.scalars().all())


class CRUDProduct(CRUDMenuBase):
    model = Product
    children = "choice_groups"


class CRUDChoiceGroup(CRUDMenuBase):
    model = ChoiceGroup
    children = "options"

    async def get_by_product(self, db: AsyncSession, *, product_id: uuid.UUID) -> List[ChoiceGroup]:
        result = await db.execute(
            select(ChoiceGroup).where(ChoiceGroup.product_id == product_id).order_by(ChoiceGroup.sort_order)
        )
        return list(result.scalars().all())


class CRUDChoiceOption(CRUDMenuBase):
    model = ChoiceOption


category = CRUDCategory()
product = CRUDProduct()
choice_group = CRUDChoiceGroup()
choice_option = CRUDChoiceOption()
