"""Inquiry submission against existing listings."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from battery_market.core.errors import NotFoundError
from battery_market.models.inquiry import Inquiry
from battery_market.repositories.battery_repository import BatteryRepository
from battery_market.repositories.inquiry_repository import InquiryRepository
from battery_market.schemas.inquiry import InquiryCreate

LOGGER = logging.getLogger(__name__)


class InquiryService:
    def __init__(self, repo: InquiryRepository, battery_repo: BatteryRepository) -> None:
        self.repo = repo
        self.battery_repo = battery_repo

    def submit(self, db: Session, user_id: int, payload: InquiryCreate) -> Inquiry:
        if self.battery_repo.get(db, payload.battery_id) is None:
            raise NotFoundError("Battery not found")
        inquiry = self.repo.create(db, user_id, payload.battery_id, payload.message, payload.contact_email)
        LOGGER.info("Inquiry id=%s from user=%s on battery=%s", inquiry.id, user_id, payload.battery_id)
        return inquiry

