# app/schemas/charge.py
from typing import Optional
from decimal import Decimal
from datetime import date

from pydantic import BaseModel, Field


class ChargeCreateSchemas(BaseModel):
    customer: Optional[str] = None  # ID do cliente no Asaas
    billing_type: str = Field(..., alias="billingType")  # BOLETO, CREDIT_CARD, PIX, UNDEFINED
    value: Decimal
    due_date: Optional[date] = Field(None, alias="dueDate")
    description: Optional[str] = None
    external_reference: Optional[str] = Field(None, alias="externalReference")

    # Dados para criar o cliente quando o ID não é informado
    name: Optional[str] = None
    cpf_cnpj: Optional[str] = Field(None, alias="cpfCnpj")
    mobile_phone: Optional[str] = Field(None, alias="mobilePhone")
    email: Optional[str] = None

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True
