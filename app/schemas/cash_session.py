# app/schemas/cash_session.py
import uuid
from typing import Optional
from decimal import Decimal
from datetime import datetime

from pydantic import BaseModel

from app.db.models.cash_session import CashSessionStatus
from app.schemas.common import Money


class CashSessionOpenSchemas(BaseModel):
    initial_balance: Optional[Decimal] = None
    opened_by_id: Optional[str] = None
    opened_by_name: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class CashSessionCloseSchemas(BaseModel):
    counted_cash: Optional[Decimal] = None
    closed_by_id: Optional[str] = None
    closed_by_name: Optional[str] = None
    notes: Optional[str] = None
    # Totais calculados pelo PDV; gravados como recebidos
    total_sales: Optional[Decimal] = None
    total_pix: Optional[Decimal] = None
    total_card: Optional[Decimal] = None
    total_cash_sales: Optional[Decimal] = None
    order_count: Optional[int] = None

    class Config:
        coerce_numbers_to_str = True


class CashSessionSchemas(BaseModel):
    id: uuid.UUID
    opened_at: datetime
    opened_by_id: Optional[str] = None
    opened_by_name: str
    closed_at: Optional[datetime] = None
    closed_by_id: Optional[str] = None
    closed_by_name: Optional[str] = None
    initial_balance: Money
    expected_cash: Optional[Money] = None
    counted_cash: Optional[Money] = None
    variance: Optional[Money] = None
    total_sales: Money
    total_pix: Money
    total_card: Money
    total_cash_sales: Money
    order_count: int
    notes: Optional[str] = None
    status: CashSessionStatus

    class Config:
        from_attributes = True


class CashSessionStatusSchemas(BaseModel):
    isOpen: bool
    session: Optional[CashSessionSchemas] = None
