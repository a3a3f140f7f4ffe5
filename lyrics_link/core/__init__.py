"""Core modules for Lyrics Link."""

from lyrics_link.core.config import Settings, get_settings
from lyrics_link.core.models import (
    CandidateDecision,
    MatchResult,
    MatchTrace,
    ParenRole,
    Query,
    QueryTrace,
    SearchHit,
    VideoMetadata,
)

__all__ = [
    "Settings",
    "get_settings",
    "ParenRole",
    "VideoMetadata",
    "SearchHit",
    "Query",
    "CandidateDecision",
    "QueryTrace",
    "MatchTrace",
    "MatchResult",
]
