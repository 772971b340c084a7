# app/db/models/cash_session.py
import enum

from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String, Text, Enum as SAEnum, text

from app.db.base_class import Base, utcnow


class CashSessionStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class CashSession(Base):
    __tablename__ = "cash_sessions"
    __table_args__ = (
        # No máximo um caixa aberto por vez
        Index(
            "uq_cash_sessions_single_open",
            "status",
            unique=True,
            postgresql_where=text("status = 'OPEN'"),
            sqlite_where=text("status = 'OPEN'"),
        ),
    )

    opened_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    opened_by_id = Column(String(255), nullable=True)
    opened_by_name = Column(String(255), nullable=False)
    closed_at = Column(DateTime(timezone=True), nullable=True)
    closed_by_id = Column(String(255), nullable=True)
    closed_by_name = Column(String(255), nullable=True)

    initial_balance = Column(Numeric(10, 2), default=0, nullable=False)
    expected_cash = Column(Numeric(10, 2), nullable=True)
    counted_cash = Column(Numeric(10, 2), nullable=True)
    variance = Column(Numeric(10, 2), nullable=True)

    # Totais informados pelo PDV no fechamento
    total_sales = Column(Numeric(10, 2), default=0, nullable=False)
    total_pix = Column(Numeric(10, 2), default=0, nullable=False)
    total_card = Column(Numeric(10, 2), default=0, nullable=False)
    total_cash_sales = Column(Numeric(10, 2), default=0, nullable=False)
    order_count = Column(Integer, default=0, nullable=False)

    notes = Column(Text, nullable=True)
    status = Column(SAEnum(CashSessionStatus, name="cash_session_status"), default=CashSessionStatus.OPEN, nullable=False)
