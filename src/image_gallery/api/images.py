"""Image listing and like endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from image_gallery.api.dependencies import require_user
from image_gallery.api.schemas import LikeRequest  # noqa: TC001
from image_gallery.config import parse_positive_int
from image_gallery.domain.users import PublicUser  # noqa: TC001

if TYPE_CHECKING:
    from image_gallery.containers import AppContainer

router = APIRouter(prefix="/api/images", tags=["images"])


@router.get("")
def list_images(
    request: Request, page: str | None = None, limit: str | None = None
) -> dict[str, object]:
    """Return one page of images, newest first."""
    container: AppContainer = request.app.state.container
    service = container.gallery_service
    result = service.list_images(
        page=parse_positive_int(page, 1),
        page_size=parse_positive_int(limit, service.default_page_size),
    )
    return result.to_dict()


@router.get("/{image_id}/likes")
def like_status(
    image_id: str, request: Request, user: str | None = None
) -> dict[str, object]:
    """Return the like count and whether the given user likes the image."""
    container: AppContainer = request.app.state.container
    return container.gallery_service.get_like_status(image_id, user or None).to_dict()


@router.post("/{image_id}/like")
def toggle_like(
    image_id: str,
    request: Request,
    body: LikeRequest | None = None,
    caller: PublicUser = Depends(require_user),
) -> dict[str, object]:
    """Flip the caller's like on an image."""
    container: AppContainer = request.app.state.container
    return container.gallery_service.toggle_like(image_id, str(caller.id)).to_dict()
