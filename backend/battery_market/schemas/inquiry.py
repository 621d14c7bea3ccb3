"""Pydantic schemas for inquiries and the admin audit views."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from battery_market.schemas.common import MAX_ID, CamelModel


class InquiryCreate(CamelModel):
    battery_id: int = Field(..., le=MAX_ID)
    message: str = Field(..., max_length=5000)
    contact_email: Optional[str] = Field(default=None, max_length=255)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v


class InquiryOut(CamelModel):
    id: int
    user_id: int
    battery_id: int
    message: str
    contact_email: Optional[str] = None
    status: str
    timestamp: datetime


class LoginEventOut(CamelModel):
    id: int
    user_id: int
    username: str
    timestamp: datetime
