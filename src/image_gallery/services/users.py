"""Credential store interface."""

from typing import Protocol
from uuid import UUID

from image_gallery.domain.users import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user credentials."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def find_by_username_or_email(self, username: str, email: str) -> UserRecord | None:
        """Return any user holding the username or the email."""

    def create_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user, raising ConflictError on duplicates."""
