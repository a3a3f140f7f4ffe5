"""Core data models for Lyrics Link."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ParenRole(str, Enum):
    """Semantic role of a parenthetical or bracketed span in a title."""

    ROMANIZATION = "romanization"
    TRANSLATION = "translation"
    DESCRIPTOR = "descriptor"
    FEATURE = "feature"
    EDITION = "edition"
    OTHER = "other"


class VideoMetadata(BaseModel):
    """Song information displayed for a music video."""

    title: str
    artist: str
    thumbnail_url: str | None = None


class SearchHit(BaseModel):
    """A single song hit returned by the lyrics search provider."""

    id: int | str | None = None
    title: str = ""
    full_title: str | None = None
    artist_name: str = ""
    url: str | None = None

    @property
    def display_title(self) -> str:
        """Title used for matching, falling back to the full title."""
        return self.title or self.full_title or ""


class Query(BaseModel):
    """One planned search query."""

    model_config = ConfigDict(frozen=True)

    label: str
    text: str
    require_artist_match: bool = True


class CandidateDecision(BaseModel):
    """Outcome of evaluating one search hit against the original title."""

    id: int | str | None = None
    title: str = ""
    artist: str = ""
    url: str | None = None
    outcome: str
    used_query_label: str
    penalized: bool = False

    @property
    def is_accept(self) -> bool:
        return self.outcome == "accept"

    @property
    def is_penalized(self) -> bool:
        return self.outcome == "penalized"


class QueryTrace(BaseModel):
    """Every candidate examined for one query."""

    query: Query
    examined: list[CandidateDecision] = Field(default_factory=list)
    error: str | None = None


class MatchTrace(BaseModel):
    """Debug trace of a whole match operation."""

    reason: str | None = None
    strategy: str | None = None
    accepted: CandidateDecision | None = None
    penalized_used: bool = False
    cover_detected: bool = False
    base_title: str = ""
    forms: list[str] = Field(default_factory=list)
    fragments: list[str] = Field(default_factory=list)
    steps: list[QueryTrace] = Field(default_factory=list)


class MatchResult(BaseModel):
    """Result of resolving a lyrics page for a title/artist pair."""

    url: str | None = None
    trace: MatchTrace | None = None
