"""Fuzzy equivalence between two artist-name strings."""

import re

from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import match_tokens, normalize_spaces, prenormalize, strip_punct_lower, tokenize

# Separators between collaborating artists. Intentionally no "and"/"with":
# they are part of names like "Florence and the Machine".
_SEGMENT_SPLIT_RE = re.compile(r"\s*(?:,|&|/|、|×|\s+x\s+|\bfeat\.?\s|\bft\.?\s|\bfeaturing\s)\s*", re.IGNORECASE)
_PAREN_RE = re.compile(r"\(([^()]*)\)|\[([^\[\]]*)\]")

MIN_CONTAINMENT_LENGTH = 3


def artist_variants(name: str) -> list[str]:
    """All comparison variants of an artist string.

    The whole name, each collaborating artist, each parenthetical alias
    ("YOASOBI (ヨアソビ)" -> "ヨアソビ") and each name without its alias.
    """
    text = normalize_spaces(prenormalize(name or ""))
    if not text:
        return []
    variants: list[str] = []

    def _add(value: str) -> None:
        value = normalize_spaces(value).lower()
        if value and value not in variants:
            variants.append(value)

    _add(text)
    for segment in [text, *_SEGMENT_SPLIT_RE.split(text)]:
        for match in _PAREN_RE.finditer(segment):
            _add(match.group(1) if match.group(1) is not None else match.group(2))
        _add(_PAREN_RE.sub(" ", segment))
        _add(segment)
    return variants


class ArtistMatcher:
    """Decides whether a candidate's artist is the queried artist."""

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary

    def pair_matches(self, query_variant: str, candidate_variant: str) -> bool:
        qs = strip_punct_lower(query_variant)
        cs = strip_punct_lower(candidate_variant)
        if not qs or not cs:
            return False
        if qs == cs:
            return True
        if (len(qs) >= MIN_CONTAINMENT_LENGTH and qs in cs) or (len(cs) >= MIN_CONTAINMENT_LENGTH and cs in qs):
            return True
        q_tokens = set(match_tokens(tokenize(query_variant), self.vocabulary.stopwords))
        c_tokens = set(match_tokens(tokenize(candidate_variant), self.vocabulary.stopwords))
        return bool(q_tokens & c_tokens)

    def matches(self, query: str, candidate: str) -> bool:
        """True if any variant pair is equal, contained, or shares a real token."""
        query_variants = artist_variants(query)
        candidate_variants = artist_variants(candidate)
        return any(self.pair_matches(q, c) for q in query_variants for c in candidate_variants)


DEFAULT_ARTIST_MATCHER = ArtistMatcher()


def artist_matches(query: str, candidate: str) -> bool:
    """Compare two artist strings with the default vocabulary."""
    return DEFAULT_ARTIST_MATCHER.matches(query, candidate)
