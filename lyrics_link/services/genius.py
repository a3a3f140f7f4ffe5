"""Genius API client for song search.

Only the search endpoint is used: it returns the candidate song pages that
the resolver judges against the video's title and artist.
"""

import logging
from typing import Any

import httpx

from lyrics_link.core.config import Settings, get_settings
from lyrics_link.core.exceptions import ExternalServiceError, RateLimitError
from lyrics_link.core.models import SearchHit

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    """A scalar JSON value as a string; anything else as None."""
    if value is None or isinstance(value, dict | list):
        return None
    return str(value)


class GeniusClient:
    """API client for Genius song search.

    Requires an access token (``GENIUS_ACCESS_TOKEN``). Without one the
    client reports itself as unconfigured and callers should skip it.

    API Docs: https://docs.genius.com/#search-h2
    """

    def __init__(self, settings: Settings | None = None, http_client: httpx.AsyncClient | None = None):
        """Initialize the Genius client.

        Args:
            settings: Application settings. Defaults to the cached settings.
            http_client: Optional pre-built client (used by tests).
        """
        self.settings = settings or get_settings()
        self.API_BASE = self.settings.genius_api_base.rstrip("/")
        self._client = http_client

    @property
    def is_configured(self) -> bool:
        return self.settings.has_genius_token

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.http_timeout_seconds,
                headers={"User-Agent": "LyricsLink/0.1"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def search(self, query: str) -> list[SearchHit]:
        """Search Genius for songs.

        Args:
            query: Free-text search query.

        Returns:
            Hits in provider order.

        Raises:
            RateLimitError: If Genius answers 429.
            ExternalServiceError: On transport errors, non-200 responses or bad JSON.
        """
        client = await self._get_client()
        headers = {"Authorization": f"Bearer {self.settings.genius_access_token.strip()}"}

        try:
            response = await client.get(f"{self.API_BASE}/search", params={"q": query}, headers=headers)
        except httpx.HTTPError as e:
            raise ExternalServiceError("Genius", f"Failed to connect: {e}")

        if response.status_code == 429:
            raise RateLimitError("Genius", "Rate limited")

        if response.status_code != 200:
            raise ExternalServiceError("Genius", f"API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalServiceError("Genius", f"Invalid JSON response: {e}")

        payload = data.get("response") if isinstance(data, dict) else None
        raw_hits = (payload.get("hits") if isinstance(payload, dict) else None) or []
        if not isinstance(raw_hits, list):
            raw_hits = []
        hits = [self.parse_hit(h.get("result")) for h in raw_hits if isinstance(h, dict)]
        logger.debug(f"Genius search '{query}' returned {len(hits)} hits")
        return hits

    @staticmethod
    def parse_hit(result: Any) -> SearchHit:
        """Convert a Genius search result object to a SearchHit.

        Missing or wrongly typed fields become empty strings or None, so a
        malformed hit is judged by the normal rules instead of failing the search.
        """
        if not isinstance(result, dict):
            result = {}
        primary_artist = result.get("primary_artist")
        if not isinstance(primary_artist, dict):
            primary_artist = {}
        hit_id = result.get("id")
        if isinstance(hit_id, bool) or not isinstance(hit_id, int | str):
            hit_id = None
        return SearchHit(
            id=hit_id,
            title=_text(result.get("title")) or "",
            full_title=_text(result.get("full_title")),
            artist_name=_text(primary_artist.get("name")) or "",
            url=_text(result.get("url")),
        )
