"""Configuration management for Lyrics Link."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Genius API
    genius_access_token: str = ""
    genius_api_base: str = "https://api.genius.com"
    http_timeout_seconds: float = 10.0

    # Matching
    match_strategy: Literal["strict", "lenient"] = "lenient"
    match_cache_size: int = 512

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def has_genius_token(self) -> bool:
        """Check if a Genius access token is configured."""
        return bool(self.genius_access_token.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
