from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.api.deps import get_order_service
from app.core.exceptions import StoreError
from app.core.logging import logger
from app.services.order_service import OrderService

router = APIRouter()


@router.get("/queue", response_model=List[schemas.Order])
async def read_kitchen_queue(service: OrderService = Depends(get_order_service)) -> List[schemas.Order]:
    """
    Pedidos ainda não entregues nem cancelados, do mais antigo para o mais novo.
    A tela da cozinha consulta esta rota periodicamente.
    """
    try:
        return await service.kitchen_queue()
    except SQLAlchemyError as e:
        logger.error(f"Erro ao carregar fila da cozinha: {str(e)}")
        raise StoreError("Erro ao carregar fila da cozinha")
