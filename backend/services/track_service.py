"""Service for looking up a video's song card and its lyrics page."""

import asyncio
import logging
from dataclasses import dataclass

from backend.config import BackendSettings
from lyrics_link.core.models import MatchResult, MatchTrace, VideoMetadata
from lyrics_link.matching.resolver import LyricsResolver
from lyrics_link.services.genius import GeniusClient
from lyrics_link.services.youtube import YouTubeMetadataClient

logger = logging.getLogger(__name__)

REASON_TIMEOUT = "timeout"


@dataclass
class TrackLookup:
    """Song card and lyrics match for one video."""

    metadata: VideoMetadata | None
    match: MatchResult | None = None

    @property
    def is_song(self) -> bool:
        return self.metadata is not None


class TrackService:
    """Connects YouTube metadata to the lyrics resolver."""

    def __init__(
        self,
        settings: BackendSettings,
        youtube: YouTubeMetadataClient | None = None,
        resolver: LyricsResolver | None = None,
    ):
        """Initialize the track service.

        Args:
            settings: Backend settings.
            youtube: YouTube metadata client (created if not provided).
            resolver: Lyrics resolver (created from settings if not provided).
        """
        self.settings = settings
        self.youtube = youtube or YouTubeMetadataClient()
        self.resolver = resolver or LyricsResolver(
            GeniusClient(settings),
            strategy=settings.match_strategy,
            cache_size=settings.match_cache_size,
        )

    async def close(self) -> None:
        await self.resolver.search_client.close()

    async def find_lyrics(self, title: str, artist: str, want_trace: bool = False) -> MatchResult:
        """Resolve the lyrics page, bounded by ``resolve_timeout_seconds`` when set."""
        timeout = self.settings.resolve_timeout_seconds
        try:
            return await asyncio.wait_for(self.resolver.resolve(title, artist, want_trace=want_trace), timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Lyrics match for '{title}' by '{artist}' timed out after {timeout}s")
            return MatchResult(url=None, trace=MatchTrace(reason=REASON_TIMEOUT) if want_trace else None)

    async def lookup(self, video_id: str, want_trace: bool = False) -> TrackLookup:
        """Look up a video's song card and resolve its lyrics page.

        Args:
            video_id: YouTube video ID.
            want_trace: Include the match trace.

        Returns:
            TrackLookup; ``metadata`` is None for videos without a song card.

        Raises:
            ValidationError: If the video ID is malformed.
            ExternalServiceError: If video metadata could not be fetched.
        """
        metadata = await self.youtube.get_video_metadata(video_id)
        if metadata is None:
            return TrackLookup(metadata=None)

        match = await self.find_lyrics(metadata.title, metadata.artist, want_trace=want_trace)
        return TrackLookup(metadata=metadata, match=match)


# Singleton instance (lazy initialization)
_track_service: TrackService | None = None


def get_track_service(settings: BackendSettings | None = None) -> TrackService:
    """Get the track service instance.

    Args:
        settings: Optional settings override (for testing)

    Returns:
        TrackService instance
    """
    global _track_service
    if _track_service is None or settings is not None:
        if settings is None:
            from backend.config import get_backend_settings

            settings = get_backend_settings()
        _track_service = TrackService(settings)
    return _track_service


async def close_track_service() -> None:
    """Close the shared track service, if one was created."""
    global _track_service
    if _track_service is not None:
        await _track_service.close()
        _track_service = None
