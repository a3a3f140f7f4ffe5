"""Utility modules for Lyrics Link."""

from lyrics_link.utils.text import (
    ascii_fold,
    has_cjk,
    normalize_spaces,
    prenormalize,
    strip_punct_lower,
    tokenize,
)

__all__ = [
    "ascii_fold",
    "has_cjk",
    "normalize_spaces",
    "prenormalize",
    "strip_punct_lower",
    "tokenize",
]
