"""Session registry mapping opaque bearer tokens to user ids.

Sessions live in process memory only: a restart logs every user out. The
store is injected into the auth guard, so a durable backend can replace
``InMemorySessionStore`` without touching callers.
"""
from __future__ import annotations

import abc
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

TOKEN_BYTES = 32


def generate_token() -> str:
    """Return a 256-bit random token, hex encoded."""
    return secrets.token_hex(TOKEN_BYTES)


@dataclass(frozen=True)
class SessionRecord:
    user_id: int
    created_at: float


class SessionStore(abc.ABC):
    @abc.abstractmethod
    def create(self, user_id: int) -> str:
        """Open a session for ``user_id`` and return its token."""

    @abc.abstractmethod
    def resolve(self, token: str) -> Optional[int]:
        """Return the user id behind ``token`` or None."""

    @abc.abstractmethod
    def revoke(self, token: str) -> None:
        """Drop ``token``; unknown tokens are ignored."""


class InMemorySessionStore(SessionStore):
    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        token_factory: Callable[[], str] = generate_token,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._token_factory = token_factory
        self._sessions: Dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def create(self, user_id: int) -> str:
        with self._lock:
            self._purge_expired()
            token = self._token_factory()
            while token in self._sessions:
                token = self._token_factory()
            self._sessions[token] = SessionRecord(user_id=user_id, created_at=self._clock())
        return token

    def resolve(self, token: str) -> Optional[int]:
        if not token:
            return None
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if self._expired(record):
                del self._sessions[token]
                return None
            return record.user_id

    def revoke(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _purge_expired(self) -> None:
        if self.ttl_seconds is None:
            return
        stale = [token for token, record in self._sessions.items() if self._expired(record)]
        for token in stale:
            del self._sessions[token]

    def _expired(self, record: SessionRecord) -> bool:
        if self.ttl_seconds is None:
            return False
        return self._clock() - record.created_at > self.ttl_seconds
