"""Supabase implementation for the image catalog."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from image_gallery.domain.images import ImageRecord
from image_gallery.services.gallery import ImageRepository

_IMAGE_COLUMNS = (
    "external_id, author, width, height, url, download_url, liked_by, created_at"
)


@dataclass
class SupabaseImageRepository(ImageRepository):
    """Supabase-backed repository for images and their likes."""

    client: Client

    def count(self) -> int:
        """Return the number of images in the catalog."""
        response = (
            self.client.table("images")
            .select("external_id", count="exact", head=True)
            .execute()
        )
        return int(response.count or 0)

    def list_newest(self, offset: int, limit: int) -> list[ImageRecord]:
        """Return a window of images, newest first."""
        response = (
            self.client.table("images")
            .select(_IMAGE_COLUMNS)
            .order("created_at", desc=True)
            .order("seq", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [_parse_image(row) for row in response.data or []]

    def get(self, external_id: str) -> ImageRecord | None:
        """Return an image by external id, if present."""
        response = (
            self.client.table("images")
            .select(_IMAGE_COLUMNS)
            .eq("external_id", external_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_image(response.data[0])

    def insert(self, image: ImageRecord) -> None:
        """Insert a new image row."""
        self.client.table("images").insert(
            {
                "external_id": image.external_id,
                "author": image.author,
                "width": image.width,
                "height": image.height,
                "url": image.url,
                "download_url": image.download_url,
                "liked_by": list(image.liked_by),
            }
        ).execute()

    def toggle_like(self, external_id: str, user_id: str) -> ImageRecord | None:
        """Flip like membership with a single server-side update."""
        response = self.client.rpc(
            "toggle_image_like",
            {"p_external_id": external_id, "p_user_id": user_id},
        ).execute()
        if not response.data:
            return None
        return _parse_image(response.data[0])


def _parse_image(row: dict[str, object]) -> ImageRecord:
    """Parse an images row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return ImageRecord(
        external_id=str(row["external_id"]),
        author=str(row.get("author") or ""),
        width=int(row.get("width") or 0),
        height=int(row.get("height") or 0),
        url=str(row.get("url") or ""),
        download_url=str(row.get("download_url") or ""),
        liked_by=tuple(str(user_id) for user_id in row.get("liked_by") or []),
        created_at=created_at,
    )
