import uuid
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.api.deps import get_address_service, get_charge_service, get_customer_resolver
from app.core.exceptions import AppError, StoreError
from app.core.logging import logger
from app.services.address_service import AddressService
from app.services.charge_service import ChargeService
from app.services.customer_service import CustomerResolver

router = APIRouter()


@router.get("/search", response_model=List[schemas.CustomerSearchResult])
async def search_customers(
    query: str = "",
    resolver: CustomerResolver = Depends(get_customer_resolver),
) -> List[schemas.CustomerSearchResult]:
    """
    Busca clientes locais e no Asaas (mínimo de 3 caracteres).
    Se o Asaas falhar, retorna apenas os locais.
    """
    try:
        return await resolver.search(query)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao buscar clientes: {str(e)}")
        raise StoreError("Erro ao buscar clientes")


@router.post("")
async def create_customer(
    customer_in: schemas.AsaasCustomerCreate,
    service: ChargeService = Depends(get_charge_service),
) -> Dict[str, Any]:
    """Cria (ou reaproveita, pelo CPF/CNPJ) um cliente no Asaas."""
    customer = await service.create_customer(customer_in)
    logger.info(f"Cliente Asaas {customer.get('id')} disponível")
    return customer


# --- Endereços do cliente ---
@router.get("/{customer_id}/addresses", response_model=List[schemas.Address])
async def list_customer_addresses(
    customer_id: str,
    service: AddressService = Depends(get_address_service),
) -> List[schemas.Address]:
    """Endereços do cliente (UUID local ou "asaas_<id>"), na ordem de cadastro."""
    try:
        return await service.list_addresses(customer_id)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao listar endereços do cliente {customer_id}: {str(e)}")
        raise StoreError("Erro ao listar endereços")


@router.post("/{customer_id}/addresses", response_model=schemas.Address, status_code=status.HTTP_201_CREATED)
async def add_customer_address(
    customer_id: str,
    address_in: schemas.AddressCreate,
    service: AddressService = Depends(get_address_service),
) -> schemas.Address:
    """
    Cadastra um endereço. Rua, número e bairro são obrigatórios;
    o primeiro endereço do cliente vira o padrão.
    """
    try:
        return await service.add_address(customer_id, address_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao cadastrar endereço do cliente {customer_id}: {str(e)}")
        raise StoreError("Erro ao cadastrar endereço")


@router.put("/{customer_id}/addresses/{address_id}", response_model=schemas.Address)
async def update_customer_address(
    customer_id: str,
    address_id: uuid.UUID,
    address_in: schemas.AddressUpdate,
    service: AddressService = Depends(get_address_service),
) -> schemas.Address:
    try:
        return await service.update_address(customer_id, address_id, address_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar endereço {address_id}: {str(e)}")
        raise StoreError("Erro ao atualizar endereço")


@router.patch("/{customer_id}/addresses/{address_id}/default", response_model=schemas.Address)
async def set_default_customer_address(
    customer_id: str,
    address_id: uuid.UUID,
    service: AddressService = Depends(get_address_service),
) -> schemas.Address:
    try:
        return await service.set_default(customer_id, address_id)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao definir endereço padrão {address_id}: {str(e)}")
        raise StoreError("Erro ao definir endereço padrão")


@router.delete("/{customer_id}/addresses/{address_id}")
async def delete_customer_address(
    customer_id: str,
    address_id: uuid.UUID,
    service: AddressService = Depends(get_address_service),
):
    try:
        await service.delete_address(customer_id, address_id)
        logger.info(f"Endereço {address_id} removido")
        return {"success": True}
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover endereço {address_id}: {str(e)}")
        raise StoreError("Erro ao remover endereço")
