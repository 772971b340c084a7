# app/db/models/profile.py
from sqlalchemy import Column, String

from app.db.base_class import Base


class Profile(Base):
    full_name = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True, index=True)
    cpf = Column(String(20), nullable=True, index=True)
    email = Column(String(255), nullable=True)
