"""Domain models for users."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class PublicUser:
    """The subset of a user that is safe to return to clients."""

    id: UUID
    username: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "PublicUser":
        return cls(id=record.id, username=record.username, email=record.email)

    def to_dict(self) -> dict[str, str]:
        return {"id": str(self.id), "username": self.username, "email": self.email}
