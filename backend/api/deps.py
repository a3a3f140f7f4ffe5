"""Dependency injection for API routes."""

from typing import Annotated

from fastapi import Depends

from backend.config import BackendSettings, get_backend_settings
from backend.services.track_service import TrackService, get_track_service


async def get_settings() -> BackendSettings:
    """Get application settings."""
    return get_backend_settings()


async def get_track_service_dep() -> TrackService:
    """Get the shared track service."""
    return get_track_service()


# Type aliases for cleaner route signatures
Settings = Annotated[BackendSettings, Depends(get_settings)]
TrackServiceDep = Annotated[TrackService, Depends(get_track_service_dep)]
