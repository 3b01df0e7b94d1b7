"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionRecord:
    """A server-held binding of a cookie token to a user."""

    token: str
    user_id: UUID
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(tz=UTC)) >= self.expires_at


@dataclass(frozen=True)
class RequestContext:
    """Per-request authentication state passed explicitly into services."""

    session_token: str | None = None
