"""Pydantic schemas for battery listings."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import ConfigDict, Field, model_validator

from battery_market.schemas.common import MAX_ID, CamelModel


class BatteryType(str, Enum):
    NEW = "new"
    USED = "used"
    SECOND_LIFE = "second-life"


class BatteryCategory(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    GRID_SCALE = "grid-scale"
    EV = "ev"
    SOLAR_INTEGRATION = "solar-integration"


class ListingType(str, Enum):
    BUY = "buy"
    SELL = "sell"
    RENT = "rent"
    LEND = "lend"


# matches the NUMERIC(10, 2) columns
Amount = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
Text255 = Annotated[str, Field(min_length=1, max_length=255)]

NOT_NULLABLE_FIELDS = (
    "title", "price", "listing_type", "availability", "battery_type", "category",
    "technology_type", "capacity", "voltage", "manufacturer", "certifications",
    "images", "location", "country",
)


class BatteryFields(CamelModel):
    """Optional listing attributes shared by create and update payloads."""

    model_config = ConfigDict(use_enum_values=True)

    description: Optional[str] = None
    availability: Optional[bool] = None
    rental_period: Optional[str] = Field(default=None, max_length=64)
    current_rating: Optional[Amount] = None
    cycle_count: Optional[int] = Field(default=None, ge=0)
    health_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    dimensions: Optional[str] = Field(default=None, max_length=255)
    weight: Optional[Amount] = None
    model_number: Optional[str] = Field(default=None, max_length=128)
    year_of_manufacture: Optional[int] = Field(default=None, ge=1800, le=9999)
    warranty: Optional[str] = Field(default=None, max_length=255)
    additional_specs: Optional[Dict[str, Any]] = None


class BatteryCreate(BatteryFields):
    user_id: int = Field(..., le=MAX_ID)
    title: Text255
    price: Amount
    listing_type: ListingType
    availability: bool = True
    battery_type: BatteryType
    category: BatteryCategory
    technology_type: Text255
    capacity: Amount
    voltage: Amount
    manufacturer: Text255
    certifications: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    location: Text255
    country: Annotated[str, Field(min_length=1, max_length=64)]


class BatteryUpdate(BatteryFields):
    """Partial update; only fields present in the payload change."""

    title: Optional[Text255] = None
    price: Optional[Amount] = None
    listing_type: Optional[ListingType] = None
    battery_type: Optional[BatteryType] = None
    category: Optional[BatteryCategory] = None
    technology_type: Optional[Text255] = None
    capacity: Optional[Amount] = None
    voltage: Optional[Amount] = None
    manufacturer: Optional[Text255] = None
    certifications: Optional[List[str]] = None
    images: Optional[List[str]] = None
    location: Optional[Text255] = None
    country: Optional[Annotated[str, Field(min_length=1, max_length=64)]] = None

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "BatteryUpdate":
        cleared = [name for name in NOT_NULLABLE_FIELDS if name in self.model_fields_set and getattr(self, name) is None]
        if cleared:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(cleared))}")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class BatteryOut(CamelModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    price: Decimal
    listing_type: str
    availability: bool
    rental_period: Optional[str] = None
    battery_type: str
    category: str
    technology_type: str
    capacity: Decimal
    voltage: Decimal
    current_rating: Optional[Decimal] = None
    cycle_count: Optional[int] = None
    health_percentage: Optional[int] = None
    dimensions: Optional[str] = None
    weight: Optional[Decimal] = None
    manufacturer: str
    model_number: Optional[str] = None
    year_of_manufacture: Optional[int] = None
    warranty: Optional[str] = None
    certifications: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    additional_specs: Optional[Dict[str, Any]] = None
    location: str
    country: str
    created_at: datetime
    updated_at: datetime
