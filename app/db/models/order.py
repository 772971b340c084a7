# app/db/models/order.py
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class OrderStatus(str, enum.Enum):
    PENDENTE = "PENDENTE"
    IN_PREP = "IN_PREP"
    READY = "READY"
    ENTREGUE = "ENTREGUE"
    CANCELADO = "CANCELADO"


# Pedidos nesses status saem da fila da cozinha
TERMINAL_STATUSES = (OrderStatus.ENTREGUE, OrderStatus.CANCELADO)


class ServiceType(str, enum.Enum):
    MESA = "MESA"
    DELIVERY = "DELIVERY"


class Order(Base):
    # id, created_at, updated_at são herdados da Base

    code = Column(String(50), nullable=False, index=True)
    table_number = Column(String(50), nullable=True)  # Nulo para DELIVERY
    customer_name = Column(String(255), nullable=True)
    customer_phone = Column(String(50), nullable=True)
    status = Column(SAEnum(OrderStatus, name="order_status"), default=OrderStatus.PENDENTE, nullable=False, index=True)
    source = Column(String(50), default="PDV", nullable=False)
    service_type = Column(SAEnum(ServiceType, name="service_type"), nullable=False)

    # Dados operacionais (entrega / pagamento)
    obs = Column(Text, nullable=True)
    motoboy_name = Column(String(255), nullable=True)
    motoboy_phone = Column(String(50), nullable=True)
    payment_method = Column(String(50), nullable=True)
    payment_status = Column(String(50), nullable=True)
    billing_type = Column(String(50), nullable=True)
    total = Column(Numeric(10, 2), nullable=True)
    delivered_by_id = Column(String(255), nullable=True)
    delivered_by_name = Column(String(255), nullable=True)
    delivered_at = Column(DateTime(timezone=True), nullable=True)
    invoice_url = Column(Text, nullable=True)
    pix_copy_paste = Column(Text, nullable=True)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="OrderItem.position",
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    order_id = Column(Uuid(as_uuid=True), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)  # Ordem do item no pedido
    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)  # Preço unitário, quando informado

    order = relationship("Order", back_populates="items")
