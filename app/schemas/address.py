# app/schemas/address.py
import uuid
from typing import Optional

from pydantic import BaseModel


class AddressCreateSchemas(BaseModel):
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class AddressUpdateSchemas(AddressCreateSchemas):
    pass


class AddressSchemas(BaseModel):
    id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    asaas_customer_id: Optional[str] = None
    street: str
    number: str
    complement: Optional[str] = None
    neighborhood: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: str
    is_default: bool

    class Config:
        from_attributes = True
