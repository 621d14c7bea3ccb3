"""Search filter parsed from catalog query parameters.

Every field is optional and ``None`` means "no predicate". Blank strings
coming from an HTML form count as absent.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from battery_market.schemas.battery import BatteryCategory, BatteryType, ListingType


class SearchFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)

    query: Optional[str] = Field(default=None, alias="q")
    battery_type: Optional[BatteryType] = Field(default=None, alias="type")
    category: Optional[BatteryCategory] = None
    listing_type: Optional[ListingType] = Field(default=None, alias="listingType")
    manufacturer: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    min_capacity: Optional[Decimal] = Field(default=None, alias="minCapacity")
    max_capacity: Optional[Decimal] = Field(default=None, alias="maxCapacity")
    min_price: Optional[Decimal] = Field(default=None, alias="minPrice")
    max_price: Optional[Decimal] = Field(default=None, alias="maxPrice")

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
