"""Registration, login and session-bound identity."""

import logging
from dataclasses import dataclass

from image_gallery.domain.sessions import RequestContext, SessionRecord
from image_gallery.domain.users import PublicUser
from image_gallery.errors import AuthError, ConflictError, ValidationError
from image_gallery.services.passwords import PasswordHasher
from image_gallery.services.sessions import SessionService
from image_gallery.services.users import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass
class AuthService:
    """Application service for user authentication."""

    users: UserRepository
    sessions: SessionService
    hasher: PasswordHasher

    def register(
        self, username: str | None, email: str | None, password: str | None
    ) -> tuple[PublicUser, SessionRecord]:
        """Create a user and log them in."""
        clean_username = (username or "").strip()
        clean_email = (email or "").strip().lower()
        if not clean_username or not clean_email or not password:
            raise ValidationError("All fields are required")

        logger.info("Processing registration", extra={"username": clean_username})
        if self.users.find_by_username_or_email(clean_username, clean_email):
            raise ConflictError("User already exists")

        record = self.users.create_user(
            username=clean_username,
            email=clean_email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("User registered", extra={"user_id": str(record.id)})
        session = self.sessions.create(record.id)
        return PublicUser.from_record(record), session

    def login(
        self, username: str | None, password: str | None
    ) -> tuple[PublicUser, SessionRecord]:
        """Verify credentials and open a session."""
        record = self.users.get_by_username(username) if username else None
        if record is None or not password:
            raise AuthError(INVALID_CREDENTIALS)
        if not self.hasher.verify(password, record.password_hash):
            raise AuthError(INVALID_CREDENTIALS)
        session = self.sessions.create(record.id)
        return PublicUser.from_record(record), session

    def logout(self, context: RequestContext) -> None:
        """Destroy the caller's session; a missing session is not an error."""
        self.sessions.destroy(context.session_token)

    def current_user(self, context: RequestContext) -> PublicUser:
        """Resolve the caller's session to a public user view."""
        user_id = self.sessions.resolve(context.session_token)
        if user_id is None:
            raise AuthError("Unauthorized")
        record = self.users.get_by_id(user_id)
        if record is None:
            raise AuthError("User not found")
        return PublicUser.from_record(record)
