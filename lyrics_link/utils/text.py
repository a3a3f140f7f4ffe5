"""Text normalization utilities for Lyrics Link."""

import re
import unicodedata
from collections.abc import Iterable

# Corner/angle brackets used in Japanese typography.
_OPEN_BRACKETS_RE = re.compile(r"[「『【〈《〔]")
_CLOSE_BRACKETS_RE = re.compile(r"[」』】〉》〕]")

_TOKEN_SPLIT_RE = re.compile(r"[\s\-–—_:/|.,!?;~〜、。]+")
_TOKEN_STRIP_RE = re.compile(r"[\"'“”‘’`#(){}\[\]]")
_NON_WORD_RE = re.compile(r"[\W_]+")
_WHITESPACE_RE = re.compile(r"\s+")

# Hiragana, Katakana, CJK ideographs (incl. extension A and compatibility), halfwidth Katakana.
_CJK_RE = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\uff66-\uff9f]")


def normalize_spaces(text: str) -> str:
    """Collapse runs of whitespace and strip the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_brackets(text: str) -> str:
    """Map Japanese bracket glyphs to square brackets."""
    return _CLOSE_BRACKETS_RE.sub("]", _OPEN_BRACKETS_RE.sub("[", text))


def normalize_quotes(text: str) -> str:
    """Replace curly quotes with straight ones."""
    return text.replace("“", '"').replace("”", '"').replace("‘", "'").replace("’", "'")


def prenormalize(text: str) -> str:
    """Bracket, quote and NFKC normalization; case is preserved."""
    if not text:
        return ""
    return unicodedata.normalize("NFKC", normalize_quotes(normalize_brackets(text)))


def fold_case(text: str) -> str:
    """NFKC, lowercase, then NFKC again so the result is stable."""
    return unicodedata.normalize("NFKC", unicodedata.normalize("NFKC", text).lower())


def tokenize(text: str) -> list[str]:
    """Split text into lowercase tokens on whitespace, punctuation and separators."""
    if not text:
        return []
    folded = _TOKEN_STRIP_RE.sub(" ", fold_case(normalize_quotes(text)))
    return [t for t in _TOKEN_SPLIT_RE.split(folded) if t]


def match_tokens(tokens: Iterable[str], stopwords: Iterable[str] = ()) -> list[str]:
    """Reduce tokens to the set used for matching: no stopwords, no pure digits."""
    stop = set(stopwords)
    return [t for t in tokens if t not in stop and not t.isdigit()]


def dedupe_tokens(tokens: list[str]) -> list[str]:
    """Drop repeated tokens, keeping first occurrences."""
    if len(tokens) <= 1:
        return list(tokens)
    seen: set[str] = set()
    result: list[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        result.append(token)
    return result


def strip_punct_lower(text: str) -> str:
    """Lowercase and remove everything that is not a letter or digit."""
    return _NON_WORD_RE.sub("", fold_case(text))


def ascii_fold(text: str) -> str:
    """Fold to lowercase ASCII letters and digits only.

    Diacritics are dropped ("Café" -> "cafe"); non-Latin scripts vanish.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    ascii_text = "".join(c for c in decomposed if not unicodedata.combining(c))
    return re.sub(r"[^a-z0-9]+", "", ascii_text)


def has_cjk(text: str) -> bool:
    """Check whether text contains Japanese kana or CJK ideographs."""
    return bool(_CJK_RE.search(text or ""))


def contains_word(text: str, word: str) -> bool:
    """Case-insensitive search for a word or phrase.

    Latin words must start on a word boundary so that "cover" does not match
    "discover"; they may be followed by more letters ("covered").
    """
    if not text or not word:
        return False
    pattern = re.escape(word.lower())
    if word[0].isascii() and word[0].isalnum():
        pattern = r"\b" + pattern
    return re.search(pattern, text.lower()) is not None
