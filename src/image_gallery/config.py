"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    session_backend: str = "memory"
    session_ttl_seconds: int = 24 * 60 * 60
    session_cookie_name: str = "session_id"
    cookie_secure: bool = False
    bcrypt_rounds: int = 10

    default_page_size: int = 10
    max_page_size: int = 100

    picsum_base_url: str = "https://picsum.photos"
    seed_limit: int = 100
    seed_on_startup: bool = True
    seed_attempts: int = 3
    seed_retry_delay_seconds: float = 5.0

    static_dir: str = "public"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query value as a positive integer, falling back to default."""
    if raw is None:
        return default
    cleaned = raw.strip()
    try:
        value = int(cleaned)
    except ValueError:
        return default
    return value if value > 0 else default
