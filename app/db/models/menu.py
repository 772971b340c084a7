# app/db/models/menu.py
from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.db.base_class import Base

# Um caractere por dia da semana (domingo a sábado); "1" = disponível
ALWAYS_AVAILABLE = "1111111"


class Category(Base):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    img = Column(Text, nullable=True)  # URL já publicada; upload fica fora da API
    sort_order = Column(Integer, nullable=False, default=0)
    schedule_available = Column(String(7), nullable=False, default=ALWAYS_AVAILABLE)
    schedule_type = Column(Integer, nullable=False, default=0)

    products = relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="Product.sort_order",
    )


class Product(Base):
    category_id = Column(Uuid(as_uuid=True), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    promotional_price = Column(Numeric(10, 2), nullable=True)
    img = Column(Text, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
    schedule_available = Column(String(7), nullable=False, default=ALWAYS_AVAILABLE)
    schedule_type = Column(Integer, nullable=False, default=0)

    category = relationship("Category", back_populates="products")
    choice_groups = relationship(
        "ChoiceGroup",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="ChoiceGroup.sort_order",
    )


class ChoiceGroup(Base):
    """Grupo de adicionais/opções de um produto (ex: "Escolha o molho")."""
    __tablename__ = "choice_groups"

    product_id = Column(Uuid(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    required = Column(Boolean, nullable=False, default=False)
    min_selections = Column(Integer, nullable=False, default=0)
    max_selections = Column(Integer, nullable=False, default=1)
    use_greater_option_price = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="choice_groups")
    options = relationship(
        "ChoiceOption",
        back_populates="choice_group",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="ChoiceOption.sort_order",
    )


class ChoiceOption(Base):
    __tablename__ = "choice_options"

    choice_group_id = Column(
        Uuid(as_uuid=True), ForeignKey("choice_groups.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    img = Column(Text, nullable=True)
    max_quantity = Column(Integer, nullable=False, default=1)
    sort_order = Column(Integer, nullable=False, default=0)

    choice_group = relationship("ChoiceGroup", back_populates="options")
