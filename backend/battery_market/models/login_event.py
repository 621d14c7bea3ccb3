"""SQLAlchemy model for the login audit trail."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String

from battery_market.core.db import Base
from battery_market.models.types import Timestamp, utcnow


class LoginEvent(Base):
    __tablename__ = "logins"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    username = Column(String(64), nullable=False)
    timestamp = Column(Timestamp, nullable=False, default=utcnow, index=True)
