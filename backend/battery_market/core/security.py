"""Password hashing and bearer-token authentication dependencies."""
from __future__ import annotations

import binascii
import hashlib
import hmac
import logging
import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .db import get_db
from .errors import AuthenticationError, AuthorizationError, InvalidCredentialFormat
from .sessions import SessionStore

LOGGER = logging.getLogger(__name__)

# scrypt cost parameters; changing them invalidates stored hashes
SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1
SCRYPT_KEY_LEN = 64
SALT_BYTES = 16


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt,
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=SCRYPT_KEY_LEN,
    )


def get_password_hash(password: str) -> str:
    """Return ``<key_hex>.<salt_hex>`` for a fresh 128-bit salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    key = _derive(password, salt)
    return f"{binascii.hexlify(key).decode('ascii')}.{binascii.hexlify(salt).decode('ascii')}"


def verify_password(candidate: str, encoded: str) -> bool:
    """Check ``candidate`` against a value produced by ``get_password_hash``.

    Raises InvalidCredentialFormat when ``encoded`` is not a key/salt pair.
    """
    if not encoded or encoded.count(".") != 1:
        raise InvalidCredentialFormat("stored hash must be '<key_hex>.<salt_hex>'")
    key_hex, salt_hex = encoded.split(".")
    try:
        expected = binascii.unhexlify(key_hex)
        salt = binascii.unhexlify(salt_hex)
    except (binascii.Error, ValueError) as exc:
        raise InvalidCredentialFormat(f"stored hash is not hex encoded: {exc}") from exc
    if len(expected) != SCRYPT_KEY_LEN or not salt:
        raise InvalidCredentialFormat(
            f"stored hash has a {len(expected)}-byte key and {len(salt)}-byte salt"
        )
    return hmac.compare_digest(_derive(candidate, salt), expected)


class BearerAuthGuard:
    """Resolves bearer tokens to user ids through an injected session store."""

    def __init__(self, sessions: SessionStore) -> None:
        self.sessions = sessions

    def authenticate(self, token: Optional[str]) -> int:
        if not token:
            raise AuthenticationError()
        user_id = self.sessions.resolve(token)
        if user_id is None:
            LOGGER.info("Rejected unknown or expired token %s...", token[:6])
            raise AuthenticationError()
        return user_id


bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_guard(request: Request) -> BearerAuthGuard:
    return request.app.state.auth_guard


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_user_id(
    token: Optional[str] = Depends(get_bearer_token),
    guard: BearerAuthGuard = Depends(get_auth_guard),
) -> int:
    return guard.authenticate(token)


def require_admin(
    request: Request,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> int:
    user = request.app.state.user_repository.get_by_id(db, user_id)
    if user is None or not user.is_admin:
        LOGGER.warning("User %s denied admin access", user_id)
        raise AuthorizationError("Not authorized to access admin data")
    return user_id
