"""Shared test fixtures for backend tests."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.config import BackendSettings
from backend.services.track_service import TrackLookup
from lyrics_link.core.models import MatchResult, VideoMetadata


@pytest.fixture
def mock_backend_settings() -> BackendSettings:
    """Create mock backend settings for testing."""
    return BackendSettings(
        _env_file=None,
        environment="development",
        genius_access_token="test-token",
    )


@pytest.fixture
def sample_metadata() -> VideoMetadata:
    """Song card of a sample music video."""
    return VideoMetadata(
        title="夜に駆ける",
        artist="YOASOBI",
        thumbnail_url="https://i.ytimg.com/vi/x8VYWazR5mE/hqdefault.jpg",
    )


@pytest.fixture
def mock_track_service(sample_metadata: VideoMetadata) -> MagicMock:
    """Create a mock track service for API tests."""
    mock = MagicMock()
    mock.lookup = AsyncMock(
        return_value=TrackLookup(
            metadata=sample_metadata,
            match=MatchResult(url="https://genius.com/Yoasobi-yoru-ni-kakeru-lyrics"),
        )
    )
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def client(
    mock_track_service: MagicMock,
    mock_backend_settings: BackendSettings,
) -> Generator[TestClient, None, None]:
    """Create test client with mocked track service."""
    from backend.api.deps import get_settings, get_track_service_dep
    from backend.main import app

    app.dependency_overrides[get_track_service_dep] = lambda: mock_track_service
    app.dependency_overrides[get_settings] = lambda: mock_backend_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
