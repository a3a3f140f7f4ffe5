"""Search query planning.

Queries come out in decreasing confidence that their text is the real
title. Queries that carry the artist are preferred for precision; the
title-only ones are a recall fallback and do not require an artist match.
"""

import logging

from lyrics_link.core.models import ParenRole, Query
from lyrics_link.matching.canonicalizer import Canonicalizer
from lyrics_link.matching.variants import TitleVariants
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import ascii_fold, normalize_spaces, prenormalize

logger = logging.getLogger(__name__)


def dedupe_queries(queries: list[Query]) -> list[Query]:
    """Drop queries whose text repeats an earlier one, ignoring case."""
    seen: set[str] = set()
    result: list[Query] = []
    for query in queries:
        key = query.text.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(query)
    return result


def plan_queries(
    variants: TitleVariants,
    artist: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[Query]:
    """Turn title variants and an artist into an ordered, de-duplicated plan.

    Order:
        1. Japanese-script tokens of the base + artist
        2. full base + artist
        3. Japanese-script tokens alone
        4. base alone
        5. each romanization/translation paren + artist
        6. each romanization paren alone
        7. base without the featured-artist tail + artist
        8. each medley fragment + artist, then alone

    With a blank artist every query is title-only.
    """
    parsed = variants.parsed
    artist = normalize_spaces(prenormalize(artist or ""))
    canonicalizer = Canonicalizer(vocabulary)
    planned: list[Query] = []

    def with_artist(label: str, title: str) -> None:
        if not title:
            return
        if artist:
            planned.append(Query(label=label, text=f"{title} {artist}", require_artist_match=True))
        else:
            planned.append(Query(label=label, text=title, require_artist_match=False))

    def title_only(label: str, title: str) -> None:
        if title:
            planned.append(Query(label=label, text=title, require_artist_match=False))

    base = parsed.base_text
    japanese = " ".join(parsed.japanese_tokens)

    if japanese:
        with_artist("japanese_only", japanese)
    with_artist("base", base)
    if japanese:
        title_only("japanese_only_title_only", japanese)
    title_only("base_title_only", base)

    content_parens = parsed.content_parens()
    for i, paren in enumerate(content_parens):
        with_artist(f"paren_{paren.role.value}_{i}", canonicalizer.canonicalize(paren.content))
    for i, paren in enumerate(content_parens):
        if paren.role is ParenRole.ROMANIZATION:
            title_only(f"paren_romanization_{i}_title_only", canonicalizer.canonicalize(paren.content))
            # Letters and digits only; dropped by dedupe when identical.
            title_only(f"paren_romanization_{i}_folded", ascii_fold(paren.content))

    if parsed.feature_tail:
        with_artist("no_feature", parsed.base_without_feature)

    for i, fragment in enumerate(parsed.fragments):
        with_artist(f"fragment_{i}", fragment)
        title_only(f"fragment_{i}_title_only", fragment)

    queries = dedupe_queries(planned)
    logger.debug(f"Planned {len(queries)} queries for '{parsed.raw}'")
    return queries
