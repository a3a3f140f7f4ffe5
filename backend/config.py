"""Backend-specific configuration."""

from functools import lru_cache

from lyrics_link.core.config import Settings


class BackendSettings(Settings):
    """Extended settings for the backend API."""

    # CORS
    cors_allow_origins: list[str] = ["*"]

    # Deadline for one whole match operation (None = no deadline)
    resolve_timeout_seconds: float | None = None


@lru_cache
def get_backend_settings() -> BackendSettings:
    """Get cached backend settings instance."""
    return BackendSettings()
