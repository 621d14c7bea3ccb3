"""Read-only administrative views over logins and inquiries."""
from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from battery_market.models.inquiry import Inquiry
from battery_market.models.login_event import LoginEvent
from battery_market.repositories.inquiry_repository import InquiryRepository
from battery_market.repositories.user_repository import UserRepository


class AdminService:
    def __init__(self, user_repo: UserRepository, inquiry_repo: InquiryRepository) -> None:
        self.user_repo = user_repo
        self.inquiry_repo = inquiry_repo

    def login_history(self, db: Session) -> List[LoginEvent]:
        return self.user_repo.list_logins(db)

    def inquiries(self, db: Session) -> List[Inquiry]:
        return self.inquiry_repo.list_all(db)
