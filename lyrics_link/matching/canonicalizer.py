"""Title canonicalization.

Turns a raw display title into a lowercase, de-noised token string. Every
step is a pure string transform; patterns that do not match leave the text
untouched and nothing here raises.
"""

import re

from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import (
    dedupe_tokens,
    normalize_spaces,
    prenormalize,
    tokenize,
)

PAREN_SPAN_RE = re.compile(r"\(([^()]*)\)|\[([^\[\]]*)\]")
_EMPTY_SPAN_RE = re.compile(r"\(\s*\)|\[\s*\]")


def span_inner(match: re.Match[str]) -> str:
    """Inner text of a ``PAREN_SPAN_RE`` match, whichever bracket kind it is."""
    inner = match.group(1) if match.group(1) is not None else match.group(2)
    return inner.strip()


def strip_artist_prefix(text: str, artist: str) -> str:
    """Remove a leading ``"Artist - "`` style prefix naming the given artist."""
    artist = normalize_spaces(prenormalize(artist or ""))
    if not artist:
        return text
    pattern = re.compile(rf"^\s*{re.escape(artist)}\s*[-–—/:|]\s*(.+)$", re.IGNORECASE)
    match = pattern.match(text)
    if match:
        return match.group(1).strip()
    return text


def contains_token_run(tokens: list[str], run: tuple[str, ...]) -> bool:
    """Check whether ``run`` appears as a contiguous slice of ``tokens``."""
    width = len(run)
    if not width or width > len(tokens):
        return False
    return any(tuple(tokens[i : i + width]) == run for i in range(len(tokens) - width + 1))


class Canonicalizer:
    """Applies the canonicalization steps with a given vocabulary."""

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary
        self._cover_re = re.compile(vocabulary.cover_marker_pattern, re.IGNORECASE)
        self._cover_tail_res = [re.compile(p, re.IGNORECASE) for p in vocabulary.cover_tail_patterns]

    def canonicalize(self, raw: str, artist: str = "") -> str:
        """Return the canonical token string for a raw title."""
        return " ".join(self.canonical_tokens(raw, artist))

    def canonical_tokens(self, raw: str, artist: str = "") -> list[str]:
        """Return canonical tokens for a raw title (digits kept)."""
        if not raw:
            return []
        text = prenormalize(raw)
        text = strip_artist_prefix(text, artist)
        text = self.truncate_noise_tail(text)
        text = self.strip_bracketed_noise(text)
        text = self.strip_cover_segments(text)
        text = _EMPTY_SPAN_RE.sub(" ", text)
        return dedupe_tokens(tokenize(text))

    def has_cover_marker(self, text: str) -> bool:
        return bool(self._cover_re.search(text or ""))

    def is_noise_tail(self, tokens: list[str]) -> bool:
        """True when a separator tail says nothing but noise (years allowed)."""
        if not tokens:
            return False
        if not any(t in self.vocabulary.noise_words for t in tokens):
            return False
        return all(t in self.vocabulary.noise_words or t.isdigit() for t in tokens)

    def truncate_noise_tail(self, text: str) -> str:
        """Cut trailing ``" - ..."`` segments made only of noise words.

        A real multi-word title containing a dash is left alone.
        """
        while True:
            cut = -1
            for sep in self.vocabulary.dash_separators:
                cut = max(cut, text.rfind(sep))
            if cut < 0:
                return text
            head = text[:cut].strip()
            tail = text[cut:]
            for sep in self.vocabulary.dash_separators:
                if tail.startswith(sep):
                    tail = tail[len(sep) :]
                    break
            if len(head) < 3 or not self.is_noise_tail(tokenize(tail)):
                return text
            text = head

    def should_remove_span(self, inner: str) -> bool:
        """Decide whether a bracketed span is marketing/format noise."""
        tokens = tokenize(inner)
        if not tokens:
            return True
        if any(contains_token_run(tokens, run) for run in self.vocabulary.trigger_tokens):
            return True
        if all(self.vocabulary.is_noise_or_descriptor(t) for t in tokens):
            return True
        return self.has_cover_marker(inner)

    def strip_bracketed_noise(self, text: str) -> str:
        def _replace(match: re.Match[str]) -> str:
            if self.should_remove_span(span_inner(match)):
                return " "
            return match.group(0)

        return normalize_spaces(PAREN_SPAN_RE.sub(_replace, text))

    def strip_cover_segments(self, text: str) -> str:
        """Remove trailing "covered by X" / "歌ってみた" credits."""
        for pattern in self._cover_tail_res:
            stripped = pattern.sub("", text).strip()
            # Never strip a title down to nothing.
            if stripped:
                text = stripped
        return text


DEFAULT_CANONICALIZER = Canonicalizer()


def canonicalize(raw: str, artist: str = "") -> str:
    """Canonicalize a raw title with the default vocabulary."""
    return DEFAULT_CANONICALIZER.canonicalize(raw, artist)
