"""Title equivalence strategies.

Strict matching keeps false positives down but can miss heavily stylized
titles; lenient matching adds token-overlap and containment checks. Both
sit behind ``TitleComparator`` so callers pick one by name.
"""

from typing import Protocol

from lyrics_link.matching.variants import TitleVariants
from lyrics_link.matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from lyrics_link.utils.text import ascii_fold, match_tokens, strip_punct_lower, tokenize

MIN_CONTAINMENT_LENGTH = 2


class TitleComparator(Protocol):
    """Decides whether two titles name the same song."""

    name: str

    def same_title(self, a: TitleVariants, b: TitleVariants) -> bool: ...


class StrictTitleComparator:
    """Exact canonical equality, plus romanized-vs-Latin equivalence."""

    name = "strict"

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary

    def same_title(self, a: TitleVariants, b: TitleVariants) -> bool:
        if a.forms & b.forms:
            return True
        return self.cross_script_match(a, b) or self.cross_script_match(b, a)

    @staticmethod
    def cross_script_match(a: TitleVariants, b: TitleVariants) -> bool:
        """A romanized title of ``a`` spelled out as a form of ``b``."""
        if not a.romanizations:
            return False
        folded = {ascii_fold(form) for form in b.forms}
        return bool(a.romanizations & folded)


class LenientTitleComparator(StrictTitleComparator):
    """Strict matching plus token overlap and punctuation-free containment."""

    name = "lenient"

    def core_tokens(self, form: str) -> list[str]:
        """Match tokens without descriptor or feature words, if any remain."""
        tokens = match_tokens(tokenize(form), self.vocabulary.stopwords)
        core = [
            t for t in tokens if t not in self.vocabulary.descriptor_words and t not in self.vocabulary.feature_markers
        ]
        return core or tokens

    def token_overlap(self, x: str, y: str) -> float:
        x_tokens = set(self.core_tokens(x))
        y_tokens = set(self.core_tokens(y))
        if not x_tokens or not y_tokens:
            return 0.0
        shared = x_tokens & y_tokens
        return len(shared) / min(len(x_tokens), len(y_tokens))

    @staticmethod
    def contains(x: str, y: str) -> bool:
        xs = strip_punct_lower(x)
        ys = strip_punct_lower(y)
        if min(len(xs), len(ys)) < MIN_CONTAINMENT_LENGTH:
            return False
        return xs in ys or ys in xs

    def same_title(self, a: TitleVariants, b: TitleVariants) -> bool:
        if super().same_title(a, b):
            return True
        for x in a.sorted_forms():
            for y in b.sorted_forms():
                if self.token_overlap(x, y) >= self.vocabulary.min_token_overlap:
                    return True
                if self.contains(x, y):
                    return True
        return False


COMPARATORS: dict[str, type[StrictTitleComparator]] = {
    StrictTitleComparator.name: StrictTitleComparator,
    LenientTitleComparator.name: LenientTitleComparator,
}


def get_comparator(name: str = "lenient", vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> TitleComparator:
    """Look up a comparison strategy by name.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    try:
        comparator_cls = COMPARATORS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown match strategy: {name}. Use one of: {', '.join(COMPARATORS)}") from None
    return comparator_cls(vocabulary)
