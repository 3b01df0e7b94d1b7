"""Request-scoped dependencies for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request, Response

from image_gallery.domain.sessions import RequestContext, SessionRecord
from image_gallery.domain.users import PublicUser

if TYPE_CHECKING:
    from image_gallery.containers import AppContainer


def get_request_context(request: Request) -> RequestContext:
    """Build the explicit auth context from the session cookie."""
    container: AppContainer = request.app.state.container
    token = request.cookies.get(container.settings.session_cookie_name)
    return RequestContext(session_token=token)


def require_user(
    request: Request,
    context: RequestContext = Depends(get_request_context),
) -> PublicUser:
    """Resolve the caller to a user or fail with 401."""
    container: AppContainer = request.app.state.container
    return container.auth_service.current_user(context)


def set_session_cookie(
    response: Response, container: AppContainer, session: SessionRecord
) -> None:
    settings = container.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response, container: AppContainer) -> None:
    response.delete_cookie(
        key=container.settings.session_cookie_name,
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="lax",
    )
