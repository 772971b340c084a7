# app/services/menu_service.py
import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import category as crud_category
from app.crud import choice_group as crud_choice_group
from app.crud import choice_option as crud_choice_option
from app.crud import product as crud_product
from app.db.models.menu import Category, ChoiceGroup, ChoiceOption, Product
from app.schemas.menu import (
    CategoryCreateSchemas,
    CategoryUpdateSchemas,
    ChoiceGroupCreateSchemas,
    ChoiceGroupUpdateSchemas,
    ChoiceOptionCreateSchemas,
    ChoiceOptionUpdateSchemas,
    ProductCreateSchemas,
    ProductUpdateSchemas,
)

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "Novo Produto"


def _required_name(value: Any, message: str) -> str:
    name = (value or "").strip()
    if not name:
        raise ValidationError(message)
    return name


def _check_selection_range(min_selections: int, max_selections: int) -> None:
    if min_selections > max_selections:
        raise ValidationError("Mínimo de seleções maior que o máximo")


class MenuService:
    """Cardápio: categorias, produtos, grupos de opções e opções."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_or_404(self, crud, id: uuid.UUID, message: str):
        db_obj = await crud.get(self.db, id=id)
        if not db_obj:
            raise NotFoundError(message)
        return db_obj

    # --- Categorias ---
    async def get_menu(self) -> List[Category]:
        return await crud_category.get_multi(self.db)

    async def add_category(self, category_in: CategoryCreateSchemas) -> Category:
        name = _required_name(category_in.name, "Nome da categoria é obrigatório")
        sort_order = await crud_category.next_sort_order(self.db)
        db_category = await crud_category.create(self.db, obj_in={"name": name, "sort_order": sort_order})
        logger.info("Categoria %s (%s) criada", db_category.id, name)
        return db_category

    async def update_category(self, category_id: uuid.UUID, category_in: CategoryUpdateSchemas) -> Category:
        db_category = await self._get_or_404(crud_category, category_id, "Categoria não encontrada")
        update_data = category_in.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["name"] = _required_name(update_data["name"], "Nome da categoria é obrigatório")
        return await crud_category.update(self.db, db_obj=db_category, obj_in=update_data)

    async def delete_category(self, category_id: uuid.UUID) -> None:
        db_category = await self._get_or_404(crud_category, category_id, "Categoria não encontrada")
        await crud_category.remove(self.db, db_obj=db_category)

    # --- Produtos ---
    async def add_product(self, category_id: uuid.UUID, product_in: ProductCreateSchemas) -> Product:
        await self._get_or_404(crud_category, category_id, "Categoria não encontrada")
        sort_order = await crud_product.next_sort_order(self.db, category_id=category_id)
        return await crud_product.create(self.db, obj_in={
            "category_id": category_id,
            "name": (product_in.name or "").strip() or DEFAULT_PRODUCT_NAME,
            "description": product_in.description or None,
            "price": product_in.price or Decimal("0"),
            "promotional_price": product_in.promotional_price or None,
            "img": product_in.img or None,
            "sort_order": sort_order,
        })

    async def update_product(self, product_id: uuid.UUID, product_in: ProductUpdateSchemas) -> Product:
        db_product = await self._get_or_404(crud_product, product_id, "Produto não encontrado")
        update_data = product_in.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["name"] = _required_name(update_data["name"], "Nome do produto é obrigatório")
        if "price" in update_data and update_data["price"] is None:
            raise ValidationError("Preço do produto é obrigatório")
        return await crud_product.update(self.db, db_obj=db_product, obj_in=update_data)

    async def delete_product(self, product_id: uuid.UUID) -> None:
        db_product = await self._get_or_404(crud_product, product_id, "Produto não encontrado")
        await crud_product.remove(self.db, db_obj=db_product)

    async def move_product(self, product_id: uuid.UUID, category_id: uuid.UUID) -> Product:
        """Move o produto para o fim de outra categoria."""
        db_product = await self._get_or_404(crud_product, product_id, "Produto não encontrado")
        await self._get_or_404(crud_category, category_id, "Categoria de destino não encontrada")
        sort_order = await crud_product.next_sort_order(self.db, category_id=category_id)
        return await crud_product.update(
            self.db, db_obj=db_product, obj_in={"category_id": category_id, "sort_order": sort_order}
        )

    # --- Grupos de opções ---
    async def get_product_choices(self, product_id: uuid.UUID) -> List[ChoiceGroup]:
        await self._get_or_404(crud_product, product_id, "Produto não encontrado")
        return await crud_choice_group.get_by_product(self.db, product_id=product_id)

    async def add_choice_group(self, product_id: uuid.UUID, group_in: ChoiceGroupCreateSchemas) -> ChoiceGroup:
        await self._get_or_404(crud_product, product_id, "Produto não encontrado")
        name = _required_name(group_in.name, "Nome do grupo é obrigatório")
        min_selections = group_in.min if group_in.min is not None else 0
        max_selections = group_in.max if group_in.max is not None else 1
        _check_selection_range(min_selections, max_selections)

        sort_order = await crud_choice_group.next_sort_order(self.db, product_id=product_id)
        return await crud_choice_group.create(self.db, obj_in={
            "product_id": product_id,
            "name": name,
            "required": bool(group_in.required),
            "min_selections": min_selections,
            "max_selections": max_selections,
            "use_greater_option_price": False,
            "sort_order": sort_order,
        })

    async def update_choice_group(self, group_id: uuid.UUID, group_in: ChoiceGroupUpdateSchemas) -> ChoiceGroup:
        db_group = await self._get_or_404(crud_choice_group, group_id, "Grupo de opções não encontrado")
        data = group_in.model_dump(exclude_unset=True)

        update_data: Dict[str, Any] = {}
        if "name" in data:
            update_data["name"] = _required_name(data["name"], "Nome do grupo é obrigatório")
        if data.get("required") is not None:
            update_data["required"] = data["required"]
        if data.get("min") is not None:
            update_data["min_selections"] = data["min"]
        if data.get("max") is not None:
            update_data["max_selections"] = data["max"]
        _check_selection_range(
            update_data.get("min_selections", db_group.min_selections),
            update_data.get("max_selections", db_group.max_selections),
        )
        return await crud_choice_group.update(self.db, db_obj=db_group, obj_in=update_data)

    async def delete_choice_group(self, group_id: uuid.UUID) -> None:
        db_group = await self._get_or_404(crud_choice_group, group_id, "Grupo de opções não encontrado")
        await crud_choice_group.remove(self.db, db_obj=db_group)

    # --- Opções ---
    async def add_choice_option(self, group_id: uuid.UUID, option_in: ChoiceOptionCreateSchemas) -> ChoiceOption:
        await self._get_or_404(crud_choice_group, group_id, "Grupo de opções não encontrado")
        sort_order = await crud_choice_option.next_sort_order(self.db, choice_group_id=group_id)
        return await crud_choice_option.create(self.db, obj_in={
            "choice_group_id": group_id,
            "name": _required_name(option_in.name, "Nome da opção é obrigatório"),
            "price": option_in.price if option_in.price is not None else Decimal("0"),
            "description": option_in.description,
            "max_quantity": option_in.max if option_in.max is not None else 1,
            "sort_order": sort_order,
        })

    async def update_choice_option(self, option_id: uuid.UUID, option_in: ChoiceOptionUpdateSchemas) -> ChoiceOption:
        db_option = await self._get_or_404(crud_choice_option, option_id, "Opção não encontrada")
        data = option_in.model_dump(exclude_unset=True)

        update_data: Dict[str, Any] = {}
        if "name" in data:
            update_data["name"] = _required_name(data["name"], "Nome da opção é obrigatório")
        if data.get("price") is not None:
            update_data["price"] = data["price"]
        if "description" in data:
            update_data["description"] = data["description"]
        if data.get("max") is not None:
            update_data["max_quantity"] = data["max"]
        return await crud_choice_option.update(self.db, db_obj=db_option, obj_in=update_data)

    async def delete_choice_option(self, option_id: uuid.UUID) -> None:
        db_option = await self._get_or_404(crud_choice_option, option_id, "Opção não encontrada")
        await crud_choice_option.remove(self.db, db_obj=db_option)
