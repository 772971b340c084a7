import uuid
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app import schemas
from app.api.deps import get_cash_session_service
from app.core.exceptions import AppError, StoreError
from app.core.logging import logger
from app.db.models.cash_session import CashSessionStatus
from app.services.cash_session_service import CashSessionService

router = APIRouter()


@router.get("", response_model=Union[List[schemas.CashSession], Optional[schemas.CashSession]])
async def read_cash_sessions(
    current: bool = False,
    status: Optional[CashSessionStatus] = None,
    service: CashSessionService = Depends(get_cash_session_service),
):
    """
    Sessões de caixa, mais recentes primeiro.
    - current=true: somente o caixa aberto (ou null)
    - status: OPEN ou CLOSED
    """
    try:
        if current:
            return await service.get_current()
        return await service.list_sessions(status=status)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao buscar sessões de caixa: {str(e)}")
        raise StoreError("Erro ao buscar sessões de caixa")


@router.post("", response_model=schemas.CashSession, status_code=status.HTTP_201_CREATED)
async def open_cash_session(
    session_in: schemas.CashSessionOpen,
    service: CashSessionService = Depends(get_cash_session_service),
) -> schemas.CashSession:
    """Abre um novo caixa. Só pode haver um caixa aberto por vez."""
    try:
        return await service.open_session(session_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao abrir caixa: {str(e)}")
        raise StoreError("Erro ao abrir caixa")


@router.get("/status", response_model=schemas.CashSessionStatus)
async def read_cash_session_status(
    service: CashSessionService = Depends(get_cash_session_service),
) -> schemas.CashSessionStatus:
    try:
        session = await service.get_current()
    except SQLAlchemyError as e:
        logger.error(f"Erro ao verificar caixa: {str(e)}")
        raise StoreError("Erro ao verificar caixa")
    if not session:
        return schemas.CashSessionStatus(isOpen=False)
    return schemas.CashSessionStatus(isOpen=True, session=schemas.CashSession.model_validate(session))


@router.get("/{session_id}", response_model=schemas.CashSession)
async def read_cash_session(
    session_id: uuid.UUID,
    service: CashSessionService = Depends(get_cash_session_service),
) -> schemas.CashSession:
    try:
        return await service.get_session(session_id)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao buscar sessão {session_id}: {str(e)}")
        raise StoreError("Erro ao buscar sessão de caixa")


@router.patch("/{session_id}", response_model=schemas.CashSession)
async def close_cash_session(
    session_id: uuid.UUID,
    close_in: schemas.CashSessionClose,
    service: CashSessionService = Depends(get_cash_session_service),
) -> schemas.CashSession:
    """
    Fecha o caixa: calcula o valor esperado (fundo + vendas em dinheiro)
    e a diferença em relação ao valor contado.
    """
    try:
        return await service.close_session(session_id, close_in)
    except AppError:
        raise
    except SQLAlchemyError as e:
        logger.error(f"Erro ao fechar caixa {session_id}: {str(e)}")
        raise StoreError("Erro ao fechar caixa")
