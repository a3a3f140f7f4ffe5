"""Per-candidate accept / penalize / reject decisions."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from lyrics_link.core.models import CandidateDecision, Query, SearchHit
from lyrics_link.matching.artist import artist_matches
from lyrics_link.matching.comparison import LenientTitleComparator, TitleComparator
from lyrics_link.matching.variants import TitleVariants, generate_variants
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import contains_word

ACCEPT = "accept"
PENALIZED = "penalized"
REJECT_NON_SONG = "reject:non_song_content"
REJECT_BAD_WORD = "reject:bad_word"
REJECT_ARTIST = "reject:artist_mismatch"
REJECT_TITLE = "reject:title_mismatch"
REJECT_NO_URL = "reject:no_url"


@dataclass(frozen=True)
class MatchContext:
    """What the candidates are judged against for one match operation."""

    original_title: str
    artist: str
    title_variants: TitleVariants
    fragment_variants: tuple[TitleVariants, ...] = field(default=())

    def references_for(self, query: Query) -> list[TitleVariants]:
        """Reference titles for a query; fragment queries also accept their fragment."""
        if query.label.startswith("fragment_"):
            return [self.title_variants, *self.fragment_variants]
        return [self.title_variants]


class CandidateEvaluator:
    """Classifies search hits against the original title and artist.

    Rules, first match wins:

    1. non-song content (chapter, interview, ...) -> reject
    2. a bad word (cover, karaoke, ...) absent from the original -> reject
    3. artist mismatch, when the query requires the artist -> reject
    4. no title equivalence with any reference title -> reject
    5. no page URL to link to -> reject
    6. a romanized/translation marker absent from the original -> penalized
    7. otherwise -> accept
    """

    def __init__(
        self,
        comparator: TitleComparator | None = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        variant_source: Callable[[str, str], TitleVariants] = generate_variants,
        artist_matcher: Callable[[str, str], bool] = artist_matches,
    ):
        self.vocabulary = vocabulary
        self.comparator = comparator or LenientTitleComparator(vocabulary)
        self.variant_source = variant_source
        self.artist_matcher = artist_matcher
        self._non_song_re = re.compile(
            r"\b(" + "|".join(re.escape(m) for m in vocabulary.non_song_markers) + r")\b",
            re.IGNORECASE,
        )

    def is_non_song(self, candidate_title: str) -> bool:
        return bool(self._non_song_re.search(candidate_title))

    def has_bad_word(self, candidate_title: str, original_title: str) -> bool:
        """A disqualifying word in the candidate that the original does not carry."""
        return any(
            contains_word(candidate_title, w) and not contains_word(original_title, w) for w in self.vocabulary.bad_words
        )

    def is_penalized(self, candidate_title: str, original_title: str) -> bool:
        """A romanized/translated page for a title that did not ask for one."""
        if any(contains_word(original_title, m) for m in self.vocabulary.romanized_markers):
            return False
        return any(contains_word(candidate_title, m) for m in self.vocabulary.romanized_markers)

    def titles_match(self, references: list[TitleVariants], candidate: TitleVariants) -> bool:
        return any(self.comparator.same_title(ref, candidate) for ref in references)

    def evaluate_hit(self, query: Query, hit: SearchHit, context: MatchContext) -> CandidateDecision:
        """Decide the outcome for one search hit."""
        title = hit.display_title
        artist = hit.artist_name or ""

        def _decision(outcome: str, penalized: bool = False) -> CandidateDecision:
            return CandidateDecision(
                id=hit.id,
                title=title,
                artist=artist,
                url=hit.url,
                outcome=outcome,
                used_query_label=query.label,
                penalized=penalized,
            )

        if self.is_non_song(title):
            return _decision(REJECT_NON_SONG)
        if self.has_bad_word(title, context.original_title):
            return _decision(REJECT_BAD_WORD)
        if query.require_artist_match and not self.artist_matcher(context.artist, artist):
            return _decision(REJECT_ARTIST)

        penalized = self.is_penalized(title, context.original_title)
        candidate_variants = self.variant_source(title, artist)
        if not self.titles_match(context.references_for(query), candidate_variants):
            return _decision(REJECT_TITLE, penalized)
        if not hit.url:
            return _decision(REJECT_NO_URL, penalized)
        if penalized:
            return _decision(PENALIZED, True)
        return _decision(ACCEPT)

    def evaluate(self, query: Query, hits: list[SearchHit], context: MatchContext) -> list[CandidateDecision]:
        """Evaluate hits in provider order, stopping at the first accept."""
        decisions: list[CandidateDecision] = []
        for hit in hits:
            decision = self.evaluate_hit(query, hit, context)
            decisions.append(decision)
            if decision.is_accept:
                break
        return decisions
