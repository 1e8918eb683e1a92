"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from chef_next_door.domain.queries import normalize_tags

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    storage_bucket: str = "chef-next-door-images"
    login_path: str = "/login"
    dedupe_interval_seconds: float = 2.0
    error_retry_count: int = 3
    error_retry_interval_seconds: float = 1.0
    revalidate_on_focus: bool = False
    revalidate_on_reconnect: bool = True
    revalidate_on_mount: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_tags(raw: str | None) -> tuple[str, ...]:
    """Parse a comma-separated tag filter from a query string."""
    if raw is None:
        return ()
    return normalize_tags(raw.split(","))
