"""Repository for user persistence, retrieval and the login audit trail."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from battery_market.models.login_event import LoginEvent
from battery_market.models.user import User
from battery_market.schemas.auth import UserCreate


class UserRepository:
    def create_user(self, db: Session, user_create: UserCreate, password_hash: str, is_admin: bool = False) -> User:
        user = User(
            username=user_create.username,
            password=password_hash,
            email=user_create.email,
            company=user_create.company,
            phone=user_create.phone,
            location=user_create.location,
            country=user_create.country,
            is_admin=is_admin,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    def get_by_id(self, db: Session, user_id: int) -> Optional[User]:
        return db.get(User, user_id)

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def has_users(self, db: Session) -> bool:
        return db.query(User.id).first() is not None

    def has_admin(self, db: Session) -> bool:
        return db.query(User.id).filter(User.is_admin.is_(True)).first() is not None

    def record_login(self, db: Session, user: User) -> LoginEvent:
        event = LoginEvent(user_id=user.id, username=user.username)
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    def list_logins(self, db: Session) -> List[LoginEvent]:
        return db.query(LoginEvent).order_by(LoginEvent.timestamp.desc(), LoginEvent.id.desc()).all()
