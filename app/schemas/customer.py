# app/schemas/customer.py
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.address import AddressSchemas


class CustomerSearchResultSchemas(BaseModel):
    id: str  # UUID local ou "asaas_<id>" para clientes só do Asaas
    full_name: Optional[str] = None
    phone: Optional[str] = None
    cpf: Optional[str] = None
    email: Optional[str] = None
    source: Literal["LOCAL", "ASAAS"]
    address: Optional[AddressSchemas] = None  # Endereço padrão, quando cadastrado


class AsaasCustomerCreateSchemas(BaseModel):
    name: Optional[str] = None
    cpf_cnpj: Optional[str] = Field(None, alias="cpfCnpj")
    mobile_phone: Optional[str] = Field(None, alias="mobilePhone")
    email: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = Field(None, alias="addressNumber")
    complement: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True
