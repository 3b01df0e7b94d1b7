"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from image_gallery.adapters.picsum_client import HttpxPicsumClient
from image_gallery.adapters.supabase_image_repository import SupabaseImageRepository
from image_gallery.adapters.supabase_session_repository import SupabaseSessionStore
from image_gallery.adapters.supabase_user_repository import SupabaseUserRepository
from image_gallery.config import Settings
from image_gallery.services.auth import AuthService
from image_gallery.services.gallery import GalleryService
from image_gallery.services.passwords import BcryptPasswordHasher
from image_gallery.services.seeding import CatalogSeeder
from image_gallery.services.sessions import (
    InMemorySessionStore,
    SessionService,
    SessionStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    gallery_service: GalleryService
    catalog_seeder: CatalogSeeder
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    image_repository = SupabaseImageRepository(supabase_client)
    session_store: SessionStore
    if resolved_settings.session_backend == "supabase":
        session_store = SupabaseSessionStore(supabase_client)
    else:
        session_store = InMemorySessionStore()
    session_service = SessionService(
        store=session_store, ttl_seconds=resolved_settings.session_ttl_seconds
    )
    auth_service = AuthService(
        users=user_repository,
        sessions=session_service,
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
    )
    gallery_service = GalleryService(
        repository=image_repository,
        default_page_size=resolved_settings.default_page_size,
        max_page_size=resolved_settings.max_page_size,
    )
    picsum_client = HttpxPicsumClient.create(resolved_settings.picsum_base_url)
    catalog_seeder = CatalogSeeder(
        client=picsum_client,
        repository=image_repository,
        limit=resolved_settings.seed_limit,
        attempts=resolved_settings.seed_attempts,
        retry_delay_seconds=resolved_settings.seed_retry_delay_seconds,
    )

    async def close_resources() -> None:
        await picsum_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        gallery_service=gallery_service,
        catalog_seeder=catalog_seeder,
        close_resources=close_resources,
    )
