# app/services/cash_session_service.py
import logging
import uuid
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud import cash_session as crud_cash_session
from app.db.models.cash_session import CashSession, CashSessionStatus
from app.schemas.cash_session import CashSessionCloseSchemas, CashSessionOpenSchemas

logger = logging.getLogger(__name__)

ALREADY_OPEN_MESSAGE = "Já existe um caixa aberto. Feche-o antes de abrir um novo."
ALREADY_CLOSED_MESSAGE = "Esta sessão já foi fechada"

ZERO = Decimal("0")


def reconcile(
    initial_balance: Optional[Decimal], total_cash_sales: Optional[Decimal], counted_cash: Decimal
) -> Tuple[Decimal, Decimal]:
    """Retorna (esperado, diferença): esperado = fundo de troco + vendas em dinheiro."""
    expected_cash = (initial_balance or ZERO) + (total_cash_sales or ZERO)
    return expected_cash, counted_cash - expected_cash


class CashSessionService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def open_session(self, session_in: CashSessionOpenSchemas) -> CashSession:
        opened_by_name = (session_in.opened_by_name or "").strip()
        if not opened_by_name:
            raise ValidationError("Nome do operador é obrigatório")

        if await crud_cash_session.get_open(self.db):
            raise ConflictError(ALREADY_OPEN_MESSAGE)

        try:
            db_session = await crud_cash_session.create(
                self.db,
                obj_in={
                    "initial_balance": session_in.initial_balance or ZERO,
                    "opened_by_id": session_in.opened_by_id,
                    "opened_by_name": opened_by_name,
                },
            )
        except IntegrityError:
            # Outra abertura venceu a corrida; o índice único barrou esta
            raise ConflictError(ALREADY_OPEN_MESSAGE)

        logger.info("Caixa %s aberto por %s", db_session.id, opened_by_name)
        return db_session

    async def close_session(self, session_id: uuid.UUID, close_in: CashSessionCloseSchemas) -> CashSession:
        if close_in.counted_cash is None:
            raise ValidationError("Valor contado é obrigatório para fechar o caixa")

        db_session = await crud_cash_session.get(self.db, id=session_id)
        if not db_session:
            raise NotFoundError("Sessão não encontrada")
        if db_session.status == CashSessionStatus.CLOSED:
            raise ConflictError(ALREADY_CLOSED_MESSAGE)

        expected_cash, variance = reconcile(
            db_session.initial_balance, close_in.total_cash_sales, close_in.counted_cash
        )
        closed = await crud_cash_session.close(
            self.db,
            id=session_id,
            obj_in={
                "closed_by_id": close_in.closed_by_id,
                "closed_by_name": close_in.closed_by_name,
                "expected_cash": expected_cash,
                "counted_cash": close_in.counted_cash,
                "variance": variance,
                "total_sales": close_in.total_sales or ZERO,
                "total_pix": close_in.total_pix or ZERO,
                "total_card": close_in.total_card or ZERO,
                "total_cash_sales": close_in.total_cash_sales or ZERO,
                "order_count": close_in.order_count or 0,
                "notes": close_in.notes,
            },
        )
        if not closed:
            raise ConflictError(ALREADY_CLOSED_MESSAGE)

        logger.info("Caixa %s fechado: esperado=%s contado=%s diferença=%s",
                    session_id, expected_cash, close_in.counted_cash, variance)
        return closed

    async def get_current(self) -> Optional[CashSession]:
        return await crud_cash_session.get_open(self.db)

    async def list_sessions(self, status: Optional[CashSessionStatus] = None) -> List[CashSession]:
        return await crud_cash_session.get_multi(self.db, status=status)

    async def get_session(self, session_id: uuid.UUID) -> CashSession:
        db_session = await crud_cash_session.get(self.db, id=session_id)
        if not db_session:
            raise NotFoundError("Sessão não encontrada")
        return db_session
