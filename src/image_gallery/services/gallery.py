"""Image listing and likes."""

from dataclasses import dataclass
from typing import Protocol

from image_gallery.domain.images import ImagePage, ImageRecord, LikeStatus
from image_gallery.errors import NotFoundError


class ImageRepository(Protocol):
    """Persistence interface for the image catalog."""

    def count(self) -> int:
        """Return the number of images in the catalog."""

    def list_newest(self, offset: int, limit: int) -> list[ImageRecord]:
        """Return images ordered by creation time, newest first."""

    def get(self, external_id: str) -> ImageRecord | None:
        """Return an image by external id, if present."""

    def insert(self, image: ImageRecord) -> None:
        """Insert a new image."""

    def toggle_like(self, external_id: str, user_id: str) -> ImageRecord | None:
        """Atomically flip the user's membership in liked_by.

        Returns the updated image, or None when the image does not exist.
        """


@dataclass
class GalleryService:
    """Application service for browsing and liking images."""

    repository: ImageRepository
    default_page_size: int = 10
    max_page_size: int = 100

    def list_images(self, page: int = 1, page_size: int | None = None) -> ImagePage:
        """Return one page of the catalog, newest first."""
        page = max(page, 1)
        size = page_size or self.default_page_size
        size = min(max(size, 1), self.max_page_size)
        skip = (page - 1) * size
        images = self.repository.list_newest(skip, size)
        total = self.repository.count()
        return ImagePage(
            images=images,
            has_more=skip + len(images) < total,
            total=total,
        )

    def get_like_status(
        self, external_id: str, user_id: str | None = None
    ) -> LikeStatus:
        """Return the like count and whether user_id is among the likers."""
        image = self.repository.get(external_id)
        if image is None:
            raise NotFoundError("Image not found")
        liked = user_id in image.liked_by if user_id else False
        return LikeStatus(likes=len(image.liked_by), liked=liked)

    def toggle_like(self, external_id: str, user_id: str) -> LikeStatus:
        """Like the image if the user hasn't yet, otherwise unlike it."""
        image = self.repository.toggle_like(external_id, user_id)
        if image is None:
            raise NotFoundError("Image not found")
        return LikeStatus(likes=len(image.liked_by), liked=user_id in image.liked_by)
