"""Domain models for the image catalog."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ImageRecord:
    """Represents an image stored in the catalog."""

    external_id: str
    author: str
    width: int
    height: int
    url: str
    download_url: str
    liked_by: tuple[str, ...] = ()
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize using the keys the client shell reads."""
        return {
            "id": self.external_id,
            "author": self.author,
            "width": self.width,
            "height": self.height,
            "url": self.url,
            "download_url": self.download_url,
            "likes": list(self.liked_by),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class LikeStatus:
    """Like count for an image and whether a given user is among the likers."""

    likes: int
    liked: bool

    def to_dict(self) -> dict[str, object]:
        return {"likes": self.likes, "liked": self.liked}


@dataclass(frozen=True)
class ImagePage:
    """One page of the catalog listing."""

    images: list[ImageRecord]
    has_more: bool
    total: int

    def to_dict(self) -> dict[str, object]:
        return {
            "images": [image.to_dict() for image in self.images],
            "hasMore": self.has_more,
            "total": self.total,
        }


@dataclass(frozen=True)
class SeedReport:
    """Outcome of a catalog seed run."""

    fetched: int = 0
    inserted: int = 0
    skipped: int = 0
    already_seeded: bool = False
