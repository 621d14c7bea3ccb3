"""Repository for battery listing persistence and catalog queries."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Query, Session

from battery_market.models.battery import Battery
from battery_market.models.inquiry import Inquiry
from battery_market.models.types import utcnow
from battery_market.repositories.search_predicates import build_search_clauses
from battery_market.schemas.search import SearchFilter

LOGGER = logging.getLogger(__name__)


class BatteryRepository:
    def _recent_first(self, query: Query) -> Query:
        return query.order_by(Battery.created_at.desc(), Battery.id.desc())

    def create(self, db: Session, values: Dict[str, Any]) -> Battery:
        now = utcnow()
        battery = Battery(**values, created_at=now, updated_at=now)
        try:
            db.add(battery)
            db.commit()
            db.refresh(battery)
            return battery
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB insert failed for battery owned by user=%s: %s", values.get("user_id"), exc)
            raise

    def get(self, db: Session, battery_id: int) -> Optional[Battery]:
        return db.get(Battery, battery_id)

    def update(self, db: Session, battery: Battery, changes: Dict[str, Any]) -> Battery:
        for key, value in changes.items():
            setattr(battery, key, value)
        now = utcnow()
        if battery.updated_at is not None and now <= battery.updated_at:
            now = battery.updated_at + timedelta(microseconds=1)
        battery.updated_at = now
        try:
            db.commit()
            db.refresh(battery)
            return battery
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB update failed for battery=%s fields=%s: %s", battery.id, sorted(changes), exc)
            raise

    def delete(self, db: Session, battery: Battery) -> None:
        try:
            db.query(Inquiry).filter(Inquiry.battery_id == battery.id).delete(synchronize_session=False)
            db.delete(battery)
            db.commit()
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB delete failed for battery=%s: %s", battery.id, exc)
            raise

    def list_recent(self, db: Session, limit: int, offset: int = 0) -> List[Battery]:
        return self._recent_first(db.query(Battery)).offset(offset).limit(limit).all()

    def search(self, db: Session, filters: SearchFilter) -> List[Battery]:
        query = db.query(Battery)
        clauses = build_search_clauses(filters)
        if clauses:
            query = query.filter(and_(*clauses))
        return self._recent_first(query).all()

    def list_by_category(self, db: Session, category: str) -> List[Battery]:
        return self._recent_first(db.query(Battery).filter(Battery.category == category)).all()

    def list_by_owner(self, db: Session, user_id: int) -> List[Battery]:
        return self._recent_first(db.query(Battery).filter(Battery.user_id == user_id)).all()
