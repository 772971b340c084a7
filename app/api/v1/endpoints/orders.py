import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.api.deps import get_order_service
from app.core.exceptions import AppError, StoreError
from app.core.logging import logger
from app.db.models.order import OrderStatus
from app.services.order_service import OrderService

router = APIRouter()


@router.post("", response_model=schemas.OrderCreated, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: schemas.OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> schemas.OrderCreated:
    """
    Cria um pedido (PDV) com seus itens em uma única transação
    e o envia para a fila da cozinha.
    """
    try:
        order = await service.create_order(order_in)
        logger.info(f"Pedido {order.id} ({order.code}) criado: {order.service_type.value}, {len(order.items)} itens")
        return order

    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar pedido: {str(e)}")
        raise StoreError("Erro ao criar pedido")


@router.get("", response_model=List[schemas.Order])
async def list_orders(
    status: Optional[OrderStatus] = None,
    skip: int = 0,
    limit: int = 100,
    service: OrderService = Depends(get_order_service),
) -> List[schemas.Order]:
    """
    Lista pedidos, mais recentes primeiro.
    - status: filtra por status do pedido
    """
    try:
        return await service.list_orders(status=status, skip=skip, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao listar pedidos: {str(e)}")
        raise StoreError("Erro ao listar pedidos")


@router.get("/track/{code}", response_model=schemas.OrderTracking)
async def track_order(
    code: str,
    service: OrderService = Depends(get_order_service),
) -> schemas.OrderTracking:
    """Acompanhamento do pedido pelo código exibido ao cliente."""
    try:
        order, total = await service.track(code)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao buscar pedido {code}: {str(e)}")
        raise StoreError("Erro ao buscar pedido")

    data = schemas.Order.model_validate(order).model_dump()
    data["total"] = total
    return schemas.OrderTracking(**data)


@router.put("/{order_id}", response_model=schemas.Order)
async def update_order(
    order_id: uuid.UUID,
    order_in: schemas.OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> schemas.Order:
    try:
        order = await service.update_order(order_id, order_in)
        logger.info(f"Pedido {order_id} atualizado")
        return order

    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar pedido {order_id}: {str(e)}")
        raise StoreError("Erro ao atualizar pedido")


@router.patch("/{order_id}/status", response_model=schemas.Order)
async def update_order_status(
    order_id: uuid.UUID,
    status_update: schemas.OrderStatusUpdate,
    service: OrderService = Depends(get_order_service),
) -> schemas.Order:
    """
    Atualiza o status do pedido (tela da cozinha).
    Qualquer status pode seguir qualquer outro; pedidos finalizados saem da fila.
    """
    try:
        order = await service.update_status(order_id, status_update.status)
        logger.info(f"Status do pedido {order_id} atualizado para {status_update.status.value}")
        return order

    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao atualizar status do pedido {order_id}: {str(e)}")
        raise StoreError("Erro ao atualizar status")


@router.delete("/{order_id}")
async def delete_order(
    order_id: uuid.UUID,
    service: OrderService = Depends(get_order_service),
):
    try:
        await service.delete_order(order_id)
        logger.info(f"Pedido {order_id} removido")
        return {"success": True}

    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao remover pedido {order_id}: {str(e)}")
        raise StoreError("Erro ao remover pedido")
