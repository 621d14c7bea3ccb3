"""Listing lifecycle: create, read, update and delete with ownership checks."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from battery_market.core.errors import AuthorizationError, NotFoundError, ValidationError, field_errors
from battery_market.models.battery import Battery
from battery_market.repositories.battery_repository import BatteryRepository
from battery_market.repositories.user_repository import UserRepository
from battery_market.schemas.battery import BatteryCreate, BatteryUpdate
from battery_market.schemas.search import SearchFilter

LOGGER = logging.getLogger(__name__)

BATTERY_NOT_FOUND = "Battery not found"
USER_NOT_FOUND = "User not found"


def parse_listing_id(raw: Union[int, str]) -> Optional[int]:
    """Return the numeric id behind ``raw``, or None for identifiers that can not match."""
    if isinstance(raw, int):
        return raw
    raw = raw.strip()
    # ids beyond 64-bit range can not exist in the table
    if raw.isascii() and raw.isdigit() and len(raw) <= 18:
        return int(raw)
    return None


class BatteryService:
    def __init__(self, repo: BatteryRepository, user_repo: UserRepository) -> None:
        self.repo = repo
        self.user_repo = user_repo

    def create(self, db: Session, payload: BatteryCreate) -> Battery:
        if self.user_repo.get_by_id(db, payload.user_id) is None:
            raise NotFoundError(USER_NOT_FOUND)
        battery = self.repo.create(db, payload.model_dump())
        LOGGER.info("Created battery id=%s for user=%s", battery.id, battery.user_id)
        return battery

    def get(self, db: Session, raw_id: Union[int, str]) -> Battery:
        battery_id = parse_listing_id(raw_id)
        battery = self.repo.get(db, battery_id) if battery_id is not None else None
        if battery is None:
            LOGGER.info("Battery %r not found", raw_id)
            raise NotFoundError(BATTERY_NOT_FOUND)
        return battery

    def list_page(self, db: Session, limit: int, offset: int) -> List[Battery]:
        return self.repo.list_recent(db, limit=limit, offset=offset)

    def featured(self, db: Session, limit: int) -> List[Battery]:
        return self.repo.list_recent(db, limit=limit)

    def search(self, db: Session, filters: SearchFilter) -> List[Battery]:
        results = self.repo.search(db, filters)
        LOGGER.info("Search %s -> %d results", filters.model_dump(exclude_none=True), len(results))
        return results

    def by_category(self, db: Session, category: str) -> List[Battery]:
        return self.repo.list_by_category(db, category)

    def by_owner(self, db: Session, user_id: int) -> List[Battery]:
        if self.user_repo.get_by_id(db, user_id) is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self.repo.list_by_owner(db, user_id)

    def owned(self, db: Session, raw_id: Union[int, str], user_id: int, action: str = "update") -> Battery:
        """Load a listing and require ``user_id`` to be its owner."""
        battery = self.get(db, raw_id)
        if battery.user_id != user_id:
            LOGGER.warning("User %s tried to %s battery id=%s owned by %s", user_id, action, battery.id, battery.user_id)
            raise AuthorizationError(f"You can only {action} your own listings")
        return battery

    def update(self, db: Session, battery: Battery, data: Any) -> Battery:
        """Apply a partial update to an already ownership-checked listing."""
        try:
            payload = BatteryUpdate.model_validate(data)
        except SchemaError as exc:
            raise ValidationError("Invalid battery data", errors=field_errors(exc.errors())) from exc
        changes = payload.changes()
        battery = self.repo.update(db, battery, changes)
        LOGGER.info("Updated battery id=%s fields=%s", battery.id, sorted(changes))
        return battery

    def delete(self, db: Session, battery: Battery) -> None:
        battery_id = battery.id
        self.repo.delete(db, battery)
        LOGGER.info("Deleted battery id=%s", battery_id)
