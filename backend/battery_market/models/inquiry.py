"""SQLAlchemy model for buyer inquiries on listings."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from battery_market.core.db import Base
from battery_market.models.types import Timestamp, utcnow


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    battery_id = Column(Integer, ForeignKey("batteries.id"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    contact_email = Column(String(255), nullable=True)
    status = Column(String(32), nullable=False, default="new")
    timestamp = Column(Timestamp, nullable=False, default=utcnow, index=True)
