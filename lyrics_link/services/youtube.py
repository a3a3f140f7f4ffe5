"""YouTube video metadata via yt-dlp.

Music videos carry a song card (track + artist) that YouTube shows below the
description. yt-dlp exposes it as the ``track`` and ``artist`` fields of the
extracted info; videos without a card leave ``track`` unset.
"""

import asyncio
import logging
import re
from typing import Any

import yt_dlp

from lyrics_link.core.exceptions import ExternalServiceError, ValidationError
from lyrics_link.core.models import VideoMetadata

logger = logging.getLogger(__name__)

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def _artist_name(info: dict[str, Any]) -> str:
    artists = info.get("artists")
    if isinstance(artists, list) and artists:
        return ", ".join(str(a) for a in artists if a)
    return info.get("artist") or info.get("creator") or ""


class YouTubeMetadataClient:
    """Reads the song card of a YouTube video without downloading it."""

    def __init__(self, ydl_opts: dict[str, Any] | None = None):
        self.ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "extract_flat": False,
            **(ydl_opts or {}),
        }

    @staticmethod
    def validate_video_id(video_id: str) -> str:
        video_id = (video_id or "").strip()
        if not VIDEO_ID_RE.match(video_id):
            raise ValidationError(f"Invalid YouTube video ID: {video_id!r}")
        return video_id

    @staticmethod
    def parse_info(info: dict[str, Any]) -> VideoMetadata | None:
        """Build VideoMetadata from yt-dlp info, or None when there is no song card."""
        title = info.get("track")
        if not title:
            return None
        return VideoMetadata(
            title=title,
            artist=_artist_name(info),
            thumbnail_url=info.get("thumbnail"),
        )

    def _extract_info(self, url: str) -> dict[str, Any]:
        with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
            info = ydl.extract_info(url, download=False)
        return info or {}

    async def get_video_metadata(self, video_id: str) -> VideoMetadata | None:
        """Fetch the song card for a video.

        Args:
            video_id: 11-character YouTube video ID.

        Returns:
            VideoMetadata, or None when the video is not a music video.

        Raises:
            ValidationError: If the video ID is malformed.
            ExternalServiceError: If YouTube could not be reached or parsed.
        """
        video_id = self.validate_video_id(video_id)
        url = WATCH_URL.format(video_id=video_id)

        try:
            info = await asyncio.to_thread(self._extract_info, url)
        except yt_dlp.utils.YoutubeDLError as e:
            logger.warning(f"Failed to fetch video info for {video_id}: {e}")
            raise ExternalServiceError("YouTube", f"Failed to fetch video info: {e}")

        metadata = self.parse_info(info)
        if metadata is None:
            logger.info(f"Video {video_id} has no song card")
        return metadata
