"""Authentication API routes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from battery_market.api.deps import get_auth_service
from battery_market.core.db import get_db
from battery_market.core.errors import AuthenticationError
from battery_market.core.security import get_bearer_token, get_current_user_id
from battery_market.schemas.auth import SessionOut, UserCreate, UserLogin, UserOut
from battery_market.schemas.common import Message
from battery_market.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> SessionOut:
    return auth_service.register_user(db, payload)


@router.post("/login", response_model=SessionOut)
def login(
    payload: UserLogin,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> SessionOut:
    session = auth_service.login(db, payload.username, payload.password)
    if session is None:
        raise AuthenticationError("Invalid username or password")
    return session


@router.post("/logout", response_model=Message)
def logout(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Message:
    auth_service.logout(token)
    return Message(message="Logged out successfully")


@router.get("/me", response_model=UserOut)
def me(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserOut:
    return auth_service.get_user(db, user_id)
