"""Title normalization and candidate-decision engine."""

from lyrics_link.matching.artist import ArtistMatcher, artist_matches
from lyrics_link.matching.cache import BoundedCache
from lyrics_link.matching.canonicalizer import Canonicalizer, canonicalize
from lyrics_link.matching.comparison import (
    LenientTitleComparator,
    StrictTitleComparator,
    TitleComparator,
    get_comparator,
)
from lyrics_link.matching.evaluator import CandidateEvaluator, MatchContext
from lyrics_link.matching.parens import Paren, classify_paren, extract_parens
from lyrics_link.matching.planner import plan_queries
from lyrics_link.matching.recorder import DecisionRecorder
from lyrics_link.matching.resolver import LyricsResolver, SearchClient
from lyrics_link.matching.variants import (
    ParsedTitle,
    TitleVariants,
    VariantGenerator,
    generate_variants,
    parse_title,
)
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "ArtistMatcher",
    "artist_matches",
    "BoundedCache",
    "Canonicalizer",
    "canonicalize",
    "TitleComparator",
    "StrictTitleComparator",
    "LenientTitleComparator",
    "get_comparator",
    "CandidateEvaluator",
    "MatchContext",
    "Paren",
    "classify_paren",
    "extract_parens",
    "plan_queries",
    "DecisionRecorder",
    "LyricsResolver",
    "SearchClient",
    "ParsedTitle",
    "TitleVariants",
    "VariantGenerator",
    "generate_variants",
    "parse_title",
    "Vocabulary",
    "DEFAULT_VOCABULARY",
]
