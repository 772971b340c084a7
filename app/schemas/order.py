# app/schemas/order.py
import uuid
from typing import Any, List, Optional, Union
from decimal import Decimal
from datetime import datetime

from pydantic import BaseModel

from app.db.models.order import OrderStatus, ServiceType
from app.schemas.common import Money


# --- OrderItem Schemas ---
class OrderItemInSchemas(BaseModel):
    # O nome do produto pode vir em qualquer um destes campos
    product_name: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    quantity: Optional[Any] = None
    notes: Optional[Any] = None
    price: Optional[Decimal] = None

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True


class OrderItemSchemas(BaseModel):
    id: uuid.UUID
    product_name: str
    quantity: int
    notes: Optional[str] = None
    price: Optional[Money] = None

    class Config:
        from_attributes = True


# --- Order Schemas ---
class OrderCreateSchemas(BaseModel):
    items: Optional[List[OrderItemInSchemas]] = None
    table_number: Optional[Union[int, str]] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    source: Optional[str] = None
    obs: Optional[str] = None
    payment_method: Optional[str] = None
    total: Optional[Decimal] = None


class OrderCreatedSchemas(BaseModel):
    id: uuid.UUID
    code: str
    status: OrderStatus
    service_type: ServiceType

    class Config:
        from_attributes = True


class OrderUpdateSchemas(BaseModel):
    # service_type não é atualizável: é derivado da mesa na criação
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    table_number: Optional[Union[int, str]] = None
    status: Optional[OrderStatus] = None
    obs: Optional[str] = None
    motoboy_name: Optional[str] = None
    motoboy_phone: Optional[str] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    billing_type: Optional[str] = None
    total: Optional[Decimal] = None
    delivered_by_id: Optional[str] = None
    delivered_by_name: Optional[str] = None
    delivered_at: Optional[datetime] = None
    invoice_url: Optional[str] = None
    pix_copy_paste: Optional[str] = None


class OrderStatusUpdateSchemas(BaseModel):
    status: OrderStatus


class OrderSchemas(BaseModel):
    id: uuid.UUID
    code: str
    table_number: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    status: OrderStatus
    source: str
    service_type: ServiceType
    obs: Optional[str] = None
    motoboy_name: Optional[str] = None
    motoboy_phone: Optional[str] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    billing_type: Optional[str] = None
    total: Optional[Money] = None
    delivered_by_id: Optional[str] = None
    delivered_by_name: Optional[str] = None
    delivered_at: Optional[datetime] = None
    invoice_url: Optional[str] = None
    pix_copy_paste: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemSchemas] = []

    class Config:
        from_attributes = True


class OrderTrackingSchemas(OrderSchemas):
    # Total armazenado ou derivado dos itens com preço
    total: Money
