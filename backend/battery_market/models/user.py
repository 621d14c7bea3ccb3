"""SQLAlchemy model for marketplace users."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, String

from battery_market.core.db import Base
from battery_market.models.types import Timestamp, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    location = Column(String(255), nullable=True)
    country = Column(String(64), nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(Timestamp, nullable=False, default=utcnow)
