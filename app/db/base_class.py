import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import as_declarative, declared_attr


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@as_declarative()
class Base:
    """
    Base class which provides automated table name,
    surrogate UUID primary key and audit timestamps.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"  # Ex: Profile -> profiles

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
