"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from threading import Lock
from uuid import UUID, uuid4

import pytest

from image_gallery.adapters.picsum_client import PicsumClient
from image_gallery.config import Settings
from image_gallery.containers import AppContainer
from image_gallery.domain.images import ImageRecord
from image_gallery.domain.users import UserRecord
from image_gallery.errors import ConflictError
from image_gallery.services.auth import AuthService
from image_gallery.services.gallery import GalleryService, ImageRepository
from image_gallery.services.passwords import BcryptPasswordHasher
from image_gallery.services.seeding import CatalogSeeder
from image_gallery.services.sessions import InMemorySessionStore, SessionService
from image_gallery.services.users import UserRepository

TEST_SUPABASE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def find_by_username_or_email(self, username: str, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username or user.email == email:
                return user
        return None

    def create_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        if self.find_by_username_or_email(username, email):
            raise ConflictError("User already exists")
        user = UserRecord(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryImageRepository(ImageRepository):
    """In-memory image catalog; like toggles are serialized by a lock."""

    images: dict[str, ImageRecord] = field(default_factory=dict)
    order: dict[str, int] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def count(self) -> int:
        return len(self.images)

    def list_newest(self, offset: int, limit: int) -> list[ImageRecord]:
        ranked = sorted(
            self.images.values(),
            key=lambda image: (image.created_at, self.order[image.external_id]),
            reverse=True,
        )
        return ranked[offset : offset + limit]

    def get(self, external_id: str) -> ImageRecord | None:
        return self.images.get(external_id)

    def insert(self, image: ImageRecord) -> None:
        if image.created_at is None:
            image = replace(image, created_at=datetime.now(tz=UTC))
        self.order[image.external_id] = len(self.order)
        self.images[image.external_id] = image

    def toggle_like(self, external_id: str, user_id: str) -> ImageRecord | None:
        with self._lock:
            image = self.images.get(external_id)
            if image is None:
                return None
            if user_id in image.liked_by:
                liked_by = tuple(uid for uid in image.liked_by if uid != user_id)
            else:
                liked_by = (*image.liked_by, user_id)
            updated = replace(image, liked_by=liked_by)
            self.images[external_id] = updated
            return updated


@dataclass
class FakePicsumClient(PicsumClient):
    """Fake photo source returning generated listing entries."""

    size: int = 100
    failures: int = 0
    calls: int = 0

    async def list_photos(self, limit: int = 100) -> list[dict[str, object]]:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError("photo source unavailable")
        return [
            {
                "id": str(index),
                "author": f"Author {index}",
                "width": 5000,
                "height": 3333,
                "url": f"https://unsplash.com/photos/{index}",
            }
            for index in range(min(limit, self.size))
        ]

    def to_image(self, entry: dict[str, object]) -> ImageRecord:
        external_id = str(entry["id"])
        return ImageRecord(
            external_id=external_id,
            author=str(entry["author"]),
            width=int(entry["width"]),
            height=int(entry["height"]),
            url=str(entry["url"]),
            download_url=f"https://picsum.photos/id/{external_id}/400/400",
        )


def make_image(external_id: str, created_at: datetime) -> ImageRecord:
    return ImageRecord(
        external_id=external_id,
        author="Alejandro Escamilla",
        width=5000,
        height=3333,
        url=f"https://unsplash.com/photos/{external_id}",
        download_url=f"https://picsum.photos/id/{external_id}/400/400",
        created_at=created_at,
    )


def seed_catalog(repository: InMemoryImageRepository, count: int) -> list[str]:
    """Insert count images with increasing timestamps; return ids newest first."""
    base = datetime(2024, 1, 1, tzinfo=UTC)
    for index in range(count):
        repository.insert(make_image(f"img-{index}", base + timedelta(minutes=index)))
    return [f"img-{index}" for index in reversed(range(count))]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SUPABASE_KEY,
        seed_on_startup=False,
        seed_retry_delay_seconds=0,
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def image_repository() -> InMemoryImageRepository:
    return InMemoryImageRepository()


@pytest.fixture
def session_service() -> SessionService:
    return SessionService(store=InMemorySessionStore())


@pytest.fixture
def auth_service(
    user_repository: InMemoryUserRepository, session_service: SessionService
) -> AuthService:
    return AuthService(
        users=user_repository,
        sessions=session_service,
        hasher=BcryptPasswordHasher(rounds=4),
    )


@pytest.fixture
def gallery_service(image_repository: InMemoryImageRepository) -> GalleryService:
    return GalleryService(repository=image_repository)


@pytest.fixture
def picsum_client() -> FakePicsumClient:
    return FakePicsumClient()


@pytest.fixture
def container(
    settings: Settings,
    auth_service: AuthService,
    gallery_service: GalleryService,
    image_repository: InMemoryImageRepository,
    picsum_client: FakePicsumClient,
) -> AppContainer:
    seeder = CatalogSeeder(
        client=picsum_client,
        repository=image_repository,
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        gallery_service=gallery_service,
        catalog_seeder=seeder,
        close_resources=close_resources,
    )
