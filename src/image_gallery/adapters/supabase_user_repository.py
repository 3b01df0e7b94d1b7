"""Supabase-backed credential store."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from image_gallery.domain.users import UserRecord
from image_gallery.errors import ConflictError, InternalError
from image_gallery.services.users import UserRepository

_USER_COLUMNS = "id, username, email, password_hash, created_at"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        return self._first("id", str(user_id))

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        return self._first("username", username)

    def find_by_username_or_email(self, username: str, email: str) -> UserRecord | None:
        """Return a user holding either the username or the email."""
        return self._first("username", username) or self._first("email", email)

    def create_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "username": username,
                        "email": email,
                        "password_hash": password_hash,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError("User already exists") from exc
            raise
        if not response.data:
            raise InternalError("Failed to create user")
        return _parse_user(response.data[0])

    def _first(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        created_at=created_at,
    )
