"""Request bodies for the REST API."""

from typing import Any

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LikeRequest(BaseModel):
    """Body sent by the client shell; the session user is authoritative."""

    user: Any = None
