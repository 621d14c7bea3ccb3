"""Inquiry submission route."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from battery_market.api.deps import get_inquiry_service
from battery_market.core.db import get_db
from battery_market.core.security import get_current_user_id
from battery_market.schemas.inquiry import InquiryCreate, InquiryOut
from battery_market.services.inquiry_service import InquiryService

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])


@router.post("", response_model=InquiryOut, status_code=status.HTTP_201_CREATED)
def create_inquiry(
    payload: InquiryCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
    inquiry_service: InquiryService = Depends(get_inquiry_service),
):
    return inquiry_service.submit(db, user_id, payload)
