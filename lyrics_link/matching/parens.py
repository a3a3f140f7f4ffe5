"""Classification of parenthetical and bracketed title spans."""

import re
from dataclasses import dataclass

from lyrics_link.core.models import ParenRole
from lyrics_link.matching.canonicalizer import PAREN_SPAN_RE, span_inner
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import contains_word, normalize_spaces, tokenize

# Labels like "English:" or "Romanized -" that introduce the real content.
_LABEL_PREFIX_RE = re.compile(
    r"^\s*(?:english|eng|romanized|romaji|transliteration|translation|translated)"
    r"(?:\s+(?:title|ver\.?|version|translation))?\s*[:\-–]\s*",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Paren:
    """A parenthetical span with its role and marker-free content."""

    inner_text: str
    role: ParenRole
    content: str = ""


def classify_paren(
    inner_text: str,
    has_japanese: bool,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ParenRole:
    """Label a parenthetical's inner text with its semantic role.

    The first matching rule wins:

    1. feature marker prefix ("feat. X", "with X")
    2. translation markers ("English Translation")
    3. romanization markers ("Romanized", "romaji")
    4. cover credits ("Covered by X"), an arrangement note
    5. ambiguous ASCII-only text on a Japanese title, which is far more
       likely a romanized title than an unrelated note
    6. descriptor vocabulary ("Live", "Acoustic Version")
    7. production vocabulary ("Official MV")
    """
    tokens = tokenize(inner_text)
    if not tokens:
        return ParenRole.OTHER

    if tokens[0] in vocabulary.feature_markers:
        return ParenRole.FEATURE
    if any(contains_word(inner_text, m) for m in vocabulary.translation_paren_markers):
        return ParenRole.TRANSLATION
    if any(contains_word(inner_text, m) for m in vocabulary.romanization_paren_markers):
        return ParenRole.ROMANIZATION
    if re.search(vocabulary.cover_marker_pattern, inner_text, re.IGNORECASE):
        return ParenRole.DESCRIPTOR

    known = vocabulary.noise_words | vocabulary.descriptor_words | vocabulary.edition_words
    all_known = all(t in known or t.isdigit() for t in tokens)
    if has_japanese and inner_text.isascii() and not all_known:
        return ParenRole.ROMANIZATION

    if any(t in vocabulary.descriptor_words for t in tokens):
        return ParenRole.DESCRIPTOR
    if any(t in vocabulary.edition_words for t in tokens):
        return ParenRole.EDITION
    return ParenRole.OTHER


def paren_content(inner_text: str, role: ParenRole, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Strip labelling words from a romanization/translation span.

    ``"English: Blue Bird"`` -> ``"Blue Bird"``; ``"Romanized"`` -> ``""``.
    """
    if role not in (ParenRole.ROMANIZATION, ParenRole.TRANSLATION):
        return ""
    text = _LABEL_PREFIX_RE.sub("", inner_text)
    markers = vocabulary.translation_paren_markers + vocabulary.romanization_paren_markers
    remaining = [w for w in text.split() if not any(w.lower().strip(".:,-") == m for m in markers)]
    leftover = [t for t in tokenize(" ".join(remaining)) if t not in vocabulary.noise_words]
    if not leftover:
        return ""
    return normalize_spaces(" ".join(remaining))


def extract_parens(
    text: str,
    has_japanese: bool,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[Paren]:
    """Return every ``(...)`` / ``[...]`` span in order, classified."""
    parens: list[Paren] = []
    for match in PAREN_SPAN_RE.finditer(text):
        inner = span_inner(match)
        if not inner:
            continue
        role = classify_paren(inner, has_japanese, vocabulary)
        parens.append(Paren(inner_text=inner, role=role, content=paren_content(inner, role, vocabulary)))
    return parens
