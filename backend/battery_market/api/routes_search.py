"""Catalog search route."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from battery_market.api.deps import get_battery_service
from battery_market.core.db import get_db
from battery_market.core.errors import ValidationError, field_errors
from battery_market.schemas.battery import BatteryOut
from battery_market.schemas.search import SearchFilter
from battery_market.services.battery_service import BatteryService

router = APIRouter(prefix="/api", tags=["search"])


def search_filter(
    q: Optional[str] = None,
    type: Optional[str] = None,  # noqa: A002 - public query parameter name
    category: Optional[str] = None,
    listing_type: Optional[str] = Query(None, alias="listingType"),
    manufacturer: Optional[str] = None,
    location: Optional[str] = None,
    country: Optional[str] = None,
    min_capacity: Optional[str] = Query(None, alias="minCapacity"),
    max_capacity: Optional[str] = Query(None, alias="maxCapacity"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
) -> SearchFilter:
    raw = {
        "q": q,
        "type": type,
        "category": category,
        "listingType": listing_type,
        "manufacturer": manufacturer,
        "location": location,
        "country": country,
        "minCapacity": min_capacity,
        "maxCapacity": max_capacity,
        "minPrice": min_price,
        "maxPrice": max_price,
    }
    try:
        return SearchFilter.model_validate(raw)
    except SchemaError as exc:
        raise ValidationError("Invalid search parameters", errors=field_errors(exc.errors())) from exc


@router.get("/search", response_model=List[BatteryOut])
def search_batteries(
    filters: SearchFilter = Depends(search_filter),
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.search(db, filters)
