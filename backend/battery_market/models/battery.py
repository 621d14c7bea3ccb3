"""SQLAlchemy model for battery listings."""
from __future__ import annotations

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text

from battery_market.core.db import Base
from battery_market.models.types import Decimal10_2, Timestamp, utcnow


class Battery(Base):
    __tablename__ = "batteries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Decimal10_2, nullable=False)
    listing_type = Column(String(16), nullable=False, index=True)
    availability = Column(Boolean, nullable=False, default=True)
    rental_period = Column(String(64), nullable=True)

    battery_type = Column(String(16), nullable=False, index=True)
    category = Column(String(32), nullable=False, index=True)
    technology_type = Column(String(128), nullable=False)

    capacity = Column(Decimal10_2, nullable=False)
    voltage = Column(Decimal10_2, nullable=False)
    current_rating = Column(Decimal10_2, nullable=True)
    cycle_count = Column(Integer, nullable=True)
    health_percentage = Column(Integer, nullable=True)
    dimensions = Column(String(255), nullable=True)
    weight = Column(Decimal10_2, nullable=True)
    manufacturer = Column(String(255), nullable=False)
    model_number = Column(String(128), nullable=True)
    year_of_manufacture = Column(Integer, nullable=True)
    warranty = Column(String(255), nullable=True)
    certifications = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    additional_specs = Column(JSON, nullable=True)

    location = Column(String(255), nullable=False)
    country = Column(String(64), nullable=False, index=True)

    created_at = Column(Timestamp, nullable=False, default=utcnow, index=True)
    updated_at = Column(Timestamp, nullable=False, default=utcnow)
