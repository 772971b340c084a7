# app/schemas/menu.py
"""
Cardápio no formato consumido pelo PDV e pela página do cardápio:
categoria -> items (produtos) -> choices (grupos de opções) -> options.
"""
import uuid
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import Money


# --- Opções ---
class MenuOptionSchemas(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    price: Money
    img: Optional[str] = None
    max: int = Field(validation_alias="max_quantity")

    class Config:
        from_attributes = True


class ChoiceOptionCreateSchemas(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = None
    max: Optional[int] = Field(None, ge=1)


class ChoiceOptionUpdateSchemas(ChoiceOptionCreateSchemas):
    pass


# --- Grupos de opções ---
class MenuChoiceSchemas(BaseModel):
    id: uuid.UUID
    name: str
    required: bool
    min: int = Field(validation_alias="min_selections")
    max: int = Field(validation_alias="max_selections")
    options: List[MenuOptionSchemas] = []

    class Config:
        from_attributes = True


class ChoiceGroupCreateSchemas(BaseModel):
    name: Optional[str] = None
    required: Optional[bool] = None
    min: Optional[int] = Field(None, ge=0)
    max: Optional[int] = Field(None, ge=0)


class ChoiceGroupUpdateSchemas(ChoiceGroupCreateSchemas):
    pass


# --- Produtos ---
class MenuItemSchemas(BaseModel):
    id: uuid.UUID
    category_id: uuid.UUID
    name: str
    description: Optional[str] = None
    price: Money
    promotional_price: Optional[Money] = None
    img: Optional[str] = None
    choices: List[MenuChoiceSchemas] = Field([], validation_alias="choice_groups")

    class Config:
        from_attributes = True


class ProductCreateSchemas(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    promotional_price: Optional[Decimal] = Field(None, ge=0)
    img: Optional[str] = None


class ProductUpdateSchemas(ProductCreateSchemas):
    pass


class ProductMoveSchemas(BaseModel):
    category_id: uuid.UUID


# --- Categorias ---
class MenuCategorySchemas(BaseModel):
    id: uuid.UUID
    name: str
    img: Optional[str] = None
    schedule_available: str
    schedule_type: int
    items: List[MenuItemSchemas] = Field([], validation_alias="products")

    class Config:
        from_attributes = True


class CategorySummarySchemas(BaseModel):
    id: uuid.UUID
    name: str
    img: Optional[str] = None

    class Config:
        from_attributes = True


class CategoryCreateSchemas(BaseModel):
    name: Optional[str] = None


class CategoryUpdateSchemas(BaseModel):
    name: Optional[str] = None
    img: Optional[str] = None
