"""Parsed titles and the set of canonical strings a title could mean."""

import re
from dataclasses import dataclass

from lyrics_link.core.models import ParenRole
from lyrics_link.matching.canonicalizer import PAREN_SPAN_RE, Canonicalizer, span_inner, strip_artist_prefix
from lyrics_link.matching.parens import Paren, classify_paren, extract_parens
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import ascii_fold, has_cjk, normalize_spaces, prenormalize, tokenize

# Medley / double-title separators.
_FRAGMENT_SPLIT_RE = re.compile(r"\s*[/／｜|]\s*")

_CONTENT_ROLES = (ParenRole.ROMANIZATION, ParenRole.TRANSLATION)


@dataclass(frozen=True)
class ParsedTitle:
    """Structured view of one raw title. Never mutated after construction."""

    raw: str
    base: tuple[str, ...]
    parens: tuple[Paren, ...]
    feature_tail: tuple[str, ...]
    has_japanese: bool
    cover_detected: bool = False
    collapsed: tuple[str, ...] = ()
    fragments: tuple[str, ...] = ()

    @property
    def base_text(self) -> str:
        return " ".join(self.base)

    @property
    def base_without_feature(self) -> str:
        if not self.feature_tail:
            return self.base_text
        return " ".join(self.base[: len(self.base) - len(self.feature_tail)])

    @property
    def japanese_tokens(self) -> tuple[str, ...]:
        return tuple(t for t in self.base if has_cjk(t))

    def content_parens(self) -> list[Paren]:
        """Romanization/translation parens that carry a title of their own."""
        return [p for p in self.parens if p.role in _CONTENT_ROLES and p.content]


@dataclass(frozen=True)
class TitleVariants:
    """Canonical forms of one title plus its base tokens."""

    forms: frozenset[str]
    tokens: tuple[str, ...]
    romanizations: frozenset[str]
    parsed: ParsedTitle

    def __contains__(self, form: object) -> bool:
        return form in self.forms

    def sorted_forms(self) -> list[str]:
        return sorted(self.forms)


class VariantGenerator:
    """Builds ``ParsedTitle`` and ``TitleVariants`` for raw titles."""

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary
        self.canonicalizer = Canonicalizer(vocabulary)

    def trim_trailing(self, tokens: list[str]) -> list[str]:
        """Drop trailing noise/descriptor tokens while at least one token remains."""
        trimmed = list(tokens)
        while len(trimmed) > 1 and self.vocabulary.is_noise_or_descriptor(trimmed[-1]):
            trimmed.pop()
        return trimmed

    def feature_tail(self, tokens: list[str]) -> list[str]:
        for i, token in enumerate(tokens):
            if i > 0 and token in self.vocabulary.feature_markers:
                return tokens[i:]
        return []

    def split_fragments(self, text: str) -> list[str]:
        """Canonical medley fragments; empty unless at least two survive."""
        if not _FRAGMENT_SPLIT_RE.search(text):
            return []
        fragments = []
        for part in _FRAGMENT_SPLIT_RE.split(text):
            tokens = self.canonicalizer.canonical_tokens(part)
            if all(self.vocabulary.is_noise_or_descriptor(t) for t in tokens):
                continue
            fragment = " ".join(self.trim_trailing(tokens))
            if len(fragment) > 1 and fragment not in fragments:
                fragments.append(fragment)
        return fragments if len(fragments) >= 2 else []

    def parse(self, raw: str, artist: str = "") -> ParsedTitle:
        """Parse a raw title into base tokens, classified parens and flags."""
        text = strip_artist_prefix(prenormalize(raw or ""), artist)
        host = PAREN_SPAN_RE.sub(" ", text)
        has_japanese = has_cjk(host) if host.strip() else has_cjk(text)

        parens = extract_parens(text, has_japanese, self.vocabulary)

        def _drop_content_parens(match: re.Match[str]) -> str:
            role = classify_paren(span_inner(match), has_japanese, self.vocabulary)
            return " " if role in _CONTENT_ROLES else match.group(0)

        def _inline_content_parens(match: re.Match[str]) -> str:
            role = classify_paren(span_inner(match), has_japanese, self.vocabulary)
            return f" {span_inner(match)} " if role in _CONTENT_ROLES else match.group(0)

        collapsed = self.canonicalizer.canonical_tokens(PAREN_SPAN_RE.sub(_inline_content_parens, text))
        base = self.trim_trailing(self.canonicalizer.canonical_tokens(PAREN_SPAN_RE.sub(_drop_content_parens, text)))
        if not base:
            base = self.trim_trailing(collapsed) or tokenize(text)

        return ParsedTitle(
            raw=raw or "",
            base=tuple(base),
            parens=tuple(parens),
            feature_tail=tuple(self.feature_tail(base)),
            has_japanese=has_japanese,
            cover_detected=self.canonicalizer.has_cover_marker(text),
            collapsed=tuple(collapsed),
            fragments=tuple(self.split_fragments(text)),
        )

    def generate(self, raw: str, artist: str = "") -> TitleVariants:
        """Return every canonical form the title could mean.

        The set is never empty for a non-empty raw string and is identical
        for identical inputs.
        """
        parsed = self.parse(raw, artist)
        forms: set[str] = set()
        romanizations: set[str] = set()

        def _add(form: str) -> None:
            form = normalize_spaces(form)
            if form:
                forms.add(form)

        _add(parsed.base_text)
        _add(parsed.base_without_feature)
        _add(" ".join(self.trim_trailing(list(parsed.collapsed))))
        _add(" ".join(parsed.collapsed))

        for paren in parsed.content_parens():
            if paren.role is ParenRole.ROMANIZATION:
                folded = ascii_fold(paren.content)
                if folded:
                    romanizations.add(folded)
                    _add(folded)
            else:
                _add(self.canonicalizer.canonicalize(paren.content))

        if not parsed.has_japanese:
            _add(ascii_fold(parsed.base_text))

        if not forms:
            _add(" ".join(tokenize(raw or "")))
        if not forms and raw:
            _add(raw.strip().lower())
        if not forms and raw:
            forms.add(raw)

        return TitleVariants(
            forms=frozenset(forms),
            tokens=parsed.base,
            romanizations=frozenset(romanizations),
            parsed=parsed,
        )


DEFAULT_VARIANT_GENERATOR = VariantGenerator()


def parse_title(raw: str, artist: str = "") -> ParsedTitle:
    """Parse a raw title with the default vocabulary."""
    return DEFAULT_VARIANT_GENERATOR.parse(raw, artist)


def generate_variants(raw: str, artist: str = "") -> TitleVariants:
    """Generate title variants with the default vocabulary."""
    return DEFAULT_VARIANT_GENERATOR.generate(raw, artist)
