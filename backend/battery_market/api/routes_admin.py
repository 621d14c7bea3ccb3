"""Administrative read endpoints, restricted to the admin account."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from battery_market.api.deps import get_admin_service
from battery_market.core.db import get_db
from battery_market.core.security import require_admin
from battery_market.schemas.inquiry import InquiryOut, LoginEventOut
from battery_market.services.admin_service import AdminService

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/logins", response_model=List[LoginEventOut])
def login_history(
    db: Session = Depends(get_db),
    admin_id: int = Depends(require_admin),  # noqa: ARG001 - enforces admin
    admin_service: AdminService = Depends(get_admin_service),
):
    return admin_service.login_history(db)


@router.get("/inquiries", response_model=List[InquiryOut])
def inquiries(
    db: Session = Depends(get_db),
    admin_id: int = Depends(require_admin),  # noqa: ARG001 - enforces admin
    admin_service: AdminService = Depends(get_admin_service),
):
    return admin_service.inquiries(db)
