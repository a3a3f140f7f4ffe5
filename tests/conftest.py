"""Shared test fixtures for Lyrics Link."""

import pytest

from lyrics_link.core.config import Settings
from lyrics_link.core.exceptions import ExternalServiceError
from lyrics_link.core.models import SearchHit


class FakeSearchClient:
    """In-memory search provider keyed by exact query text."""

    def __init__(
        self,
        responses: dict[str, list[SearchHit]] | None = None,
        configured: bool = True,
        failing: set[str] | None = None,
    ):
        self.responses = responses or {}
        self.configured = configured
        self.failing = failing or set()
        self.calls: list[str] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def search(self, query: str) -> list[SearchHit]:
        self.calls.append(query)
        if query in self.failing:
            raise ExternalServiceError("Genius", "API error: 503")
        return list(self.responses.get(query, []))

    async def close(self) -> None:
        self.closed = True


def make_hit(title: str, artist: str, url: str | None, hit_id: int = 1) -> SearchHit:
    """Build a search hit the way the Genius client would."""
    return SearchHit(id=hit_id, title=title, full_title=f"{title} by {artist}", artist_name=artist, url=url)


@pytest.fixture
def fake_search_client() -> FakeSearchClient:
    """A configured search client with no canned responses."""
    return FakeSearchClient()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a Genius token and no .env lookup."""
    return Settings(
        _env_file=None,
        environment="development",
        genius_access_token="test-token",
        genius_api_base="https://api.genius.test",
    )


@pytest.fixture
def hit_factory():
    """Factory for search hits."""
    return make_hit
