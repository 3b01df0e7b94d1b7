"""Authentication endpoints backed by cookie sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from image_gallery.api.dependencies import (
    clear_session_cookie,
    get_request_context,
    require_user,
    set_session_cookie,
)
from image_gallery.api.schemas import LoginRequest, RegisterRequest  # noqa: TC001
from image_gallery.domain.sessions import RequestContext  # noqa: TC001
from image_gallery.domain.users import PublicUser  # noqa: TC001

if TYPE_CHECKING:
    from image_gallery.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest, request: Request, response: Response
) -> dict[str, object]:
    """Create an account and start a session for it."""
    container: AppContainer = request.app.state.container
    user, session = container.auth_service.register(
        body.username, body.email, body.password
    )
    set_session_cookie(response, container, session)
    return {"message": "User registered successfully", "user": user.to_dict()}


@router.post("/login")
def login(
    body: LoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Verify credentials and start a session."""
    container: AppContainer = request.app.state.container
    user, session = container.auth_service.login(body.username, body.password)
    set_session_cookie(response, container, session)
    return {"message": "Login successful", "user": user.to_dict()}


@router.post("/logout")
def logout(
    request: Request,
    response: Response,
    context: RequestContext = Depends(get_request_context),
) -> dict[str, str]:
    """End the caller's session."""
    container: AppContainer = request.app.state.container
    container.auth_service.logout(context)
    clear_session_cookie(response, container)
    return {"message": "Logged out successfully"}


@router.get("/me")
def me(user: PublicUser = Depends(require_user)) -> dict[str, object]:
    """Return the logged-in user."""
    return {"user": user.to_dict()}
