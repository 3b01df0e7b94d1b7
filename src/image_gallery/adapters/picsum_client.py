"""Picsum photo listing API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from image_gallery.domain.images import ImageRecord


class PicsumClient(Protocol):
    """Interface for the external photo listing."""

    async def list_photos(self, limit: int = 100) -> list[dict[str, object]]:
        """Return raw listing entries."""

    def to_image(self, entry: dict[str, object]) -> ImageRecord:
        """Map a listing entry to a catalog image."""


@dataclass
class HttpxPicsumClient(PicsumClient):
    """HTTPX-backed Picsum client."""

    base_url: str
    http_client: httpx.AsyncClient
    thumbnail_size: int = 400

    @classmethod
    def create(cls, base_url: str = "https://picsum.photos") -> "HttpxPicsumClient":
        """Create a Picsum client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_photos(self, limit: int = 100) -> list[dict[str, object]]:
        """Fetch one page of the photo listing."""
        response = await self.http_client.get(
            f"{self.base_url}/v2/list",
            params={"limit": limit},
            timeout=15,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError("Unexpected photo listing payload")
        return payload

    def to_image(self, entry: dict[str, object]) -> ImageRecord:
        """Map a listing entry, pointing download_url at a fixed-size thumbnail."""
        external_id = str(entry["id"])
        size = self.thumbnail_size
        return ImageRecord(
            external_id=external_id,
            author=str(entry.get("author", "")),
            width=int(entry.get("width", 0)),
            height=int(entry.get("height", 0)),
            url=str(entry.get("url", "")),
            download_url=f"{self.base_url}/id/{external_id}/{size}/{size}",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
