"""Battery listing routes: lifecycle, browse, categories and featured."""
from __future__ import annotations

import json
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from battery_market.api.deps import get_app_settings, get_battery_service
from battery_market.core.config import Settings
from battery_market.core.db import get_db
from battery_market.core.errors import ValidationError
from battery_market.core.security import get_current_user_id
from battery_market.models.battery import Battery
from battery_market.schemas.battery import BatteryCreate, BatteryOut
from battery_market.services.battery_service import BatteryService

router = APIRouter(prefix="/api", tags=["batteries"])


def owned_battery(
    battery_id: str,
    request: Request,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
    battery_service: BatteryService = Depends(get_battery_service),
) -> Battery:
    action = "delete" if request.method == "DELETE" else "update"
    return battery_service.owned(db, battery_id, user_id, action=action)


async def json_body(request: Request) -> Any:
    """Raw JSON body, decoded only after the ownership check has passed."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError("Request body must be valid JSON") from exc


@router.post("/batteries", response_model=BatteryOut, status_code=status.HTTP_201_CREATED)
def create_battery(
    payload: BatteryCreate,
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.create(db, payload)


@router.get("/batteries", response_model=List[BatteryOut])
def list_batteries(
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    battery_service: BatteryService = Depends(get_battery_service),
):
    page_size = settings.MARKET_DEFAULT_PAGE_SIZE if limit is None else limit
    return battery_service.list_page(db, limit=page_size, offset=offset)


@router.get("/batteries/{battery_id}", response_model=BatteryOut)
def get_battery(
    battery_id: str,
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.get(db, battery_id)


@router.put("/batteries/{battery_id}", response_model=BatteryOut)
def update_battery(
    battery: Battery = Depends(owned_battery),
    data: Any = Depends(json_body),
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.update(db, battery, data)


@router.delete("/batteries/{battery_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_battery(
    battery: Battery = Depends(owned_battery),
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
) -> Response:
    battery_service.delete(db, battery)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/categories/{category}", response_model=List[BatteryOut])
def batteries_by_category(
    category: str,
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.by_category(db, category)


@router.get("/featured", response_model=List[BatteryOut])
def featured_batteries(
    limit: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.featured(db, settings.MARKET_FEATURED_LIMIT if limit is None else limit)
