"""User profile routes."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from battery_market.api.deps import get_auth_service, get_battery_service
from battery_market.core.db import get_db
from battery_market.schemas.auth import UserCreate, UserOut
from battery_market.schemas.battery import BatteryOut
from battery_market.schemas.common import MAX_ID
from battery_market.services.auth_service import AuthService
from battery_market.services.battery_service import BatteryService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserOut:
    return UserOut.model_validate(auth_service.create_user(db, payload))


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserOut:
    return auth_service.get_user(db, user_id)


@router.get("/{user_id}/batteries", response_model=List[BatteryOut])
def user_batteries(
    user_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    battery_service: BatteryService = Depends(get_battery_service),
):
    return battery_service.by_owner(db, user_id)
