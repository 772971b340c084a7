# app/services/address_service.py
import logging
import uuid
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import address as crud_address
from app.crud import profile as crud_profile
from app.db.models.address import DEFAULT_ZIP_CODE, Address
from app.schemas.address import AddressCreateSchemas, AddressUpdateSchemas
from app.services.customer_service import REMOTE_ID_PREFIX

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("street", "number", "neighborhood")
REQUIRED_MESSAGE = "Preencha Rua, Número e Bairro"


def _clean(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (v.strip() or None) if isinstance(v, str) else v for k, v in data.items()}


class AddressService:
    """
    Endereços de entrega de um cliente.
    O cliente é identificado pelo mesmo ID da busca: UUID do profile local
    ou "asaas_<id>" para clientes que só existem no Asaas.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _resolve_owner(self, customer_id: str) -> Dict[str, Any]:
        if customer_id.startswith(REMOTE_ID_PREFIX):
            remote_id = customer_id[len(REMOTE_ID_PREFIX):]
            if not remote_id:
                raise ValidationError("ID de cliente inválido")
            return {"user_id": None, "asaas_customer_id": remote_id}

        try:
            user_id = uuid.UUID(customer_id)
        except ValueError:
            raise ValidationError("ID de cliente inválido")
        if not await crud_profile.get(self.db, id=user_id):
            raise NotFoundError("Cliente não encontrado")
        return {"user_id": user_id, "asaas_customer_id": None}

    async def _get_owned(self, customer_id: str, address_id: uuid.UUID) -> Address:
        owner = await self._resolve_owner(customer_id)
        db_address = await crud_address.get(self.db, id=address_id)
        if (
            not db_address
            or db_address.user_id != owner["user_id"]
            or db_address.asaas_customer_id != owner["asaas_customer_id"]
        ):
            raise NotFoundError("Endereço não encontrado")
        return db_address

    async def list_addresses(self, customer_id: str) -> List[Address]:
        owner = await self._resolve_owner(customer_id)
        return await crud_address.get_by_owner(self.db, **owner)

    async def add_address(self, customer_id: str, address_in: AddressCreateSchemas) -> Address:
        data = _clean(address_in.model_dump())
        if not all(data.get(field) for field in REQUIRED_FIELDS):
            raise ValidationError(REQUIRED_MESSAGE)

        owner = await self._resolve_owner(customer_id)
        # O primeiro endereço do cliente vira o padrão
        is_default = await crud_address.count_by_owner(self.db, **owner) == 0
        data["zip_code"] = data.get("zip_code") or DEFAULT_ZIP_CODE

        db_address = await crud_address.create(self.db, obj_in={**data, **owner, "is_default": is_default})
        logger.info("Endereço %s cadastrado para o cliente %s", db_address.id, customer_id)
        return db_address

    async def update_address(
        self, customer_id: str, address_id: uuid.UUID, address_in: AddressUpdateSchemas
    ) -> Address:
        db_address = await self._get_owned(customer_id, address_id)
        data = _clean(address_in.model_dump(exclude_unset=True))
        if any(field in data and not data[field] for field in REQUIRED_FIELDS):
            raise ValidationError(REQUIRED_MESSAGE)
        if "zip_code" in data:
            data["zip_code"] = data["zip_code"] or DEFAULT_ZIP_CODE
        return await crud_address.update(self.db, db_obj=db_address, obj_in=data)

    async def set_default(self, customer_id: str, address_id: uuid.UUID) -> Address:
        db_address = await self._get_owned(customer_id, address_id)
        return await crud_address.set_default(self.db, db_obj=db_address)

    async def delete_address(self, customer_id: str, address_id: uuid.UUID) -> None:
        db_address = await self._get_owned(customer_id, address_id)
        await crud_address.remove(self.db, db_obj=db_address)
