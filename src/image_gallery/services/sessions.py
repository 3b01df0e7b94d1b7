"""Session issuing and lookup."""

import logging
import secrets
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from threading import Lock
from typing import Protocol
from uuid import UUID

from image_gallery.domain.sessions import SessionRecord

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Storage interface for login sessions."""

    def save(self, session: SessionRecord) -> None:
        """Persist a session."""

    def get(self, token: str) -> SessionRecord | None:
        """Return the session for a token, if present."""

    def delete(self, token: str) -> None:
        """Remove a session; removing an unknown token is a no-op."""

    def purge_expired(self, now: datetime) -> int:
        """Remove every session that expired at or before now."""


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-local session store."""

    _sessions: dict[str, SessionRecord] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def save(self, session: SessionRecord) -> None:
        with self._lock:
            self._sessions[session.token] = session

    def get(self, token: str) -> SessionRecord | None:
        with self._lock:
            return self._sessions.get(token)

    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self, now: datetime) -> int:
        with self._lock:
            expired = [
                token
                for token, session in self._sessions.items()
                if session.is_expired(now)
            ]
            for token in expired:
                del self._sessions[token]
        return len(expired)


@dataclass
class SessionService:
    """Issues, resolves and destroys sessions with a fixed TTL."""

    store: SessionStore
    ttl_seconds: int = 24 * 60 * 60

    def create(self, user_id: UUID) -> SessionRecord:
        """Create a session bound to the user, sweeping expired ones first."""
        now = datetime.now(tz=UTC)
        purged = self.store.purge_expired(now)
        if purged:
            logger.info("Purged %d expired sessions", purged)
        session = SessionRecord(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            expires_at=now + timedelta(seconds=self.ttl_seconds),
        )
        self.store.save(session)
        return session

    def resolve(self, token: str | None) -> UUID | None:
        """Return the user id for a live session; expired sessions are dropped."""
        if not token:
            return None
        session = self.store.get(token)
        if session is None:
            return None
        if session.is_expired():
            logger.info("Session expired", extra={"user_id": str(session.user_id)})
            self.store.delete(token)
            return None
        return session.user_id

    def destroy(self, token: str | None) -> None:
        """Destroy a session if it exists."""
        if token:
            self.store.delete(token)
