"""The match operation: title + artist in, lyrics page URL (or nothing) out."""

import logging
from typing import Protocol

from lyrics_link.core.exceptions import ExternalServiceError
from lyrics_link.core.models import CandidateDecision, MatchResult, MatchTrace, Query, SearchHit
from lyrics_link.matching.artist import ArtistMatcher
from lyrics_link.matching.cache import BoundedCache
from lyrics_link.matching.canonicalizer import Canonicalizer
from lyrics_link.matching.comparison import get_comparator
from lyrics_link.matching.evaluator import CandidateEvaluator, MatchContext
from lyrics_link.matching.planner import plan_queries
from lyrics_link.matching.recorder import DecisionRecorder
from lyrics_link.matching.variants import TitleVariants, VariantGenerator
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

REASON_NO_TOKEN = "no_token"
REASON_ACCEPTED = "accepted"
REASON_PENALIZED_FALLBACK = "penalized_fallback"
REASON_NO_MATCH = "no_match"


class SearchClient(Protocol):
    """The lyrics search provider as seen by the resolver."""

    @property
    def is_configured(self) -> bool: ...

    async def search(self, query: str) -> list[SearchHit]: ...

    async def close(self) -> None: ...


class LyricsResolver:
    """Resolves the lyrics page for a video's displayed title and artist.

    Queries run strictly in plan order. The first accepted candidate ends
    the operation; if nothing is accepted, the first penalized candidate
    seen anywhere in the plan is returned instead.

    Canonicalization, variant generation and artist matching are memoized
    in bounded per-instance caches.
    """

    def __init__(
        self,
        search_client: SearchClient,
        strategy: str = "lenient",
        cache_size: int = 512,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ):
        self.search_client = search_client
        self.vocabulary = vocabulary
        self.comparator = get_comparator(strategy, vocabulary)
        self._canonicalizer = Canonicalizer(vocabulary)
        self._variant_generator = VariantGenerator(vocabulary)
        self._artist_matcher = ArtistMatcher(vocabulary)
        self._canonical_cache: BoundedCache[tuple[str, str], str] = BoundedCache(cache_size)
        self._variant_cache: BoundedCache[tuple[str, str], TitleVariants] = BoundedCache(cache_size)
        self._artist_cache: BoundedCache[tuple[str, str], bool] = BoundedCache(cache_size)
        self.evaluator = CandidateEvaluator(
            comparator=self.comparator,
            vocabulary=vocabulary,
            variant_source=self.variants,
            artist_matcher=self.artist_matches,
        )

    @property
    def strategy(self) -> str:
        return self.comparator.name

    def canonicalize(self, title: str, artist: str = "") -> str:
        return self._canonical_cache.get_or_compute(
            (title, artist), lambda: self._canonicalizer.canonicalize(title, artist)
        )

    def variants(self, title: str, artist: str = "") -> TitleVariants:
        return self._variant_cache.get_or_compute((title, artist), lambda: self._variant_generator.generate(title, artist))

    def artist_matches(self, query: str, candidate: str) -> bool:
        return self._artist_cache.get_or_compute((query, candidate), lambda: self._artist_matcher.matches(query, candidate))

    def plan(self, title: str, artist: str) -> list[Query]:
        """The ordered search plan for a title/artist pair."""
        return plan_queries(self.variants(title, artist), artist, self.vocabulary)

    def build_context(self, title: str, artist: str) -> MatchContext:
        variants = self.variants(title, artist)
        fragments = tuple(self.variants(f) for f in variants.parsed.fragments)
        return MatchContext(
            original_title=title or "",
            artist=artist or "",
            title_variants=variants,
            fragment_variants=fragments,
        )

    async def _search(self, query: Query) -> tuple[list[SearchHit], str | None]:
        """Run one search; a failure counts as zero hits."""
        try:
            return await self.search_client.search(query.text), None
        except ExternalServiceError as e:
            logger.warning(f"Search failed for query '{query.text}' ({query.label}): {e}")
            return [], str(e)

    async def resolve(self, title: str, artist: str, want_trace: bool = False) -> MatchResult:
        """Find the lyrics page URL for a title/artist pair.

        Never raises for configuration, upstream or data problems; each of
        those ends in a well-defined result with ``url=None``.

        Args:
            title: Raw displayed title.
            artist: Raw displayed artist.
            want_trace: Include the per-query decision trace.

        Returns:
            MatchResult with the chosen URL (or None) and optional trace.
        """
        title = title or ""
        artist = artist or ""

        if not self.search_client.is_configured:
            logger.warning("Lyrics search is not configured; skipping match")
            return MatchResult(url=None, trace=MatchTrace(reason=REASON_NO_TOKEN) if want_trace else None)

        recorder = DecisionRecorder(enabled=want_trace)
        context = self.build_context(title, artist)
        recorder.record_title(context.title_variants, self.strategy)
        queries = plan_queries(context.title_variants, artist, self.vocabulary)

        accepted: CandidateDecision | None = None
        penalized_fallback: CandidateDecision | None = None

        for query in queries:
            hits, error = await self._search(query)
            decisions = self.evaluator.evaluate(query, hits, context)
            recorder.record_query(query, decisions, error)

            for decision in decisions:
                if decision.is_penalized and penalized_fallback is None:
                    penalized_fallback = decision
            if decisions and decisions[-1].is_accept:
                accepted = decisions[-1]
                break

        if accepted is not None:
            logger.info(f"Accepted '{accepted.title}' by '{accepted.artist}' via {accepted.used_query_label}")
            return MatchResult(url=accepted.url, trace=recorder.build(REASON_ACCEPTED, accepted))

        if penalized_fallback is not None:
            logger.info(
                f"Using penalized fallback '{penalized_fallback.title}' via {penalized_fallback.used_query_label}"
            )
            return MatchResult(
                url=penalized_fallback.url,
                trace=recorder.build(REASON_PENALIZED_FALLBACK, penalized_fallback),
            )

        logger.info(f"No lyrics match for '{title}' by '{artist}' after {len(queries)} queries")
        return MatchResult(url=None, trace=recorder.build(REASON_NO_MATCH))
