# app/db/models/address.py
from sqlalchemy import Boolean, Column, ForeignKey, String, Uuid

from app.db.base_class import Base

DEFAULT_ZIP_CODE = "00000-000"


class Address(Base):
    __tablename__ = "addresses"

    # Dono do endereço: um profile local OU um cliente que só existe no Asaas
    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=True, index=True)
    asaas_customer_id = Column(String(100), nullable=True, index=True)

    street = Column(String(255), nullable=False)
    number = Column(String(20), nullable=False)
    complement = Column(String(255), nullable=True)
    neighborhood = Column(String(255), nullable=False)
    city = Column(String(255), nullable=True)
    state = Column(String(50), nullable=True)
    zip_code = Column(String(20), nullable=False, default=DEFAULT_ZIP_CODE)
    is_default = Column(Boolean, nullable=False, default=False)
