"""Authentication service handling registration, login and sessions."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from battery_market.core.errors import ConflictError, InvalidCredentialFormat, NotFoundError
from battery_market.core.security import get_password_hash, verify_password
from battery_market.core.sessions import SessionStore
from battery_market.models.user import User
from battery_market.repositories.user_repository import UserRepository
from battery_market.schemas.auth import SessionOut, UserCreate, UserOut

LOGGER = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repository: UserRepository, sessions: SessionStore) -> None:
        self.user_repository = user_repository
        self.sessions = sessions
        # serializes the "first user becomes admin" check with the insert
        self._bootstrap_lock = threading.Lock()

    def create_user(self, db: Session, user_create: UserCreate, is_admin: bool = False) -> User:
        existing = self.user_repository.get_by_username(db, user_create.username)
        if existing:
            raise ConflictError("Username already in use")
        password_hash = get_password_hash(user_create.password)
        with self._bootstrap_lock:
            make_admin = is_admin or not self.user_repository.has_users(db)
            try:
                user = self.user_repository.create_user(db, user_create, password_hash, is_admin=make_admin)
            except IntegrityError as exc:
                db.rollback()
                LOGGER.info("Duplicate username on insert: %s", exc.orig)
                raise ConflictError("Username already in use") from exc
        LOGGER.info("Registered user id=%s username=%s admin=%s", user.id, user.username, user.is_admin)
        return user

    def register_user(self, db: Session, user_create: UserCreate) -> SessionOut:
        """Create the account and open a session for it."""
        user = self.create_user(db, user_create)
        return self._open_session(db, user)

    def authenticate_user(self, db: Session, username: str, password: str) -> Optional[User]:
        user = self.user_repository.get_by_username(db, username)
        if user is None:
            return None
        try:
            valid = verify_password(password, user.password)
        except InvalidCredentialFormat as exc:
            LOGGER.error("Stored password hash for user id=%s is unusable: %s", user.id, exc)
            return None
        return user if valid else None

    def login(self, db: Session, username: str, password: str) -> Optional[SessionOut]:
        user = self.authenticate_user(db, username, password)
        if user is None:
            LOGGER.warning("Failed login for username=%s", username)
            return None
        return self._open_session(db, user)

    def logout(self, token: Optional[str]) -> None:
        if token:
            self.sessions.revoke(token)

    def get_user(self, db: Session, user_id: int) -> UserOut:
        user = self.user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserOut.model_validate(user)

    def seed_admin(self, db: Session, username: Optional[str], password: Optional[str]) -> Optional[User]:
        if not username or not password or self.user_repository.has_admin(db):
            return None
        if self.user_repository.get_by_username(db, username):
            LOGGER.warning("Bootstrap admin %s already exists as a regular user; not promoting", username)
            return None
        return self.create_user(db, UserCreate(username=username, password=password), is_admin=True)

    def _open_session(self, db: Session, user: User) -> SessionOut:
        token = self.sessions.create(user.id)
        self.user_repository.record_login(db, user)
        LOGGER.info("Session opened for user id=%s", user.id)
        return SessionOut(**UserOut.model_validate(user).model_dump(), token=token)

