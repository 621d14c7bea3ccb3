"""Repository for inquiries sent to listing owners."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from battery_market.models.inquiry import Inquiry


class InquiryRepository:
    def create(self, db: Session, user_id: int, battery_id: int, message: str, contact_email: Optional[str]) -> Inquiry:
        inquiry = Inquiry(
            user_id=user_id,
            battery_id=battery_id,
            message=message,
            contact_email=contact_email,
            status="new",
        )
        db.add(inquiry)
        db.commit()
        db.refresh(inquiry)
        return inquiry

    def list_all(self, db: Session) -> List[Inquiry]:
        return db.query(Inquiry).order_by(Inquiry.timestamp.desc(), Inquiry.id.desc()).all()
