"""Track lookup endpoint: song card + lyrics page for a YouTube video."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from backend.api.deps import TrackServiceDep
from lyrics_link.core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


class TrackResponse(BaseModel):
    """Song card and lyrics page for a video.

    Only ``song`` is present for videos without a song card; ``debug`` is
    present only when requested.
    """

    song: bool
    title: str | None = None
    artist: str | None = None
    thumbnail: str | None = None
    genius_url: str | None = None
    debug: dict[str, Any] | None = None


@router.get("/track", response_model=TrackResponse, response_model_exclude_unset=True)
async def get_track(
    track_service: TrackServiceDep,
    v: str | None = Query(default=None, description="YouTube video ID"),
    debug: str | None = Query(default=None, description="Set to 1 to include the match trace"),
) -> TrackResponse:
    """Look up the song shown on a video and its Genius lyrics page."""
    if not v:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Video ID is required")

    want_trace = debug == "1"
    try:
        lookup = await track_service.lookup(v, want_trace=want_trace)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ExternalServiceError as e:
        logger.error(f"Failed to fetch video info for {v}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch video info: {e}",
        )

    if lookup.metadata is None or lookup.match is None:
        return TrackResponse(song=False)

    response = TrackResponse(
        song=True,
        title=lookup.metadata.title,
        artist=lookup.metadata.artist,
        thumbnail=lookup.metadata.thumbnail_url,
        genius_url=lookup.match.url,
    )
    if want_trace:
        response.debug = lookup.match.trace.model_dump() if lookup.match.trace else None
    return response
