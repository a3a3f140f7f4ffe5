"""Word lists driving title normalization and candidate decisions.

All vocabulary lives here as one frozen, versioned table so that lists can
be extended without touching matching logic. Components take a
``Vocabulary`` argument and default to ``DEFAULT_VOCABULARY``.
"""

import re
from dataclasses import dataclass, field, replace

# Marketing / format words that never carry title meaning.
NOISE_WORDS = frozenset(
    {
        # production
        "official", "offical", "music", "video", "musicvideo", "mv", "pv",
        "visualizer", "teaser", "trailer", "clip", "hd", "hq", "audio",
        "youtube", "yt",
        # lyrics pages
        "lyric", "lyrics", "romanized", "romaji", "translation", "translated",
        "english", "eng",
        # editions
        "ver", "version", "short", "shorts", "full", "performance", "live",
        "tour", "livetour", "session", "lounge", "remix", "mix", "alternate",
        "alt", "remastered", "remaster", "tv", "tvsize", "demo", "edit",
        "piano", "acoustic", "original", "ost", "soundtrack",
        # "THE FIRST TAKE" and behind-the-scenes uploads
        "the", "first", "take", "thefirsttake", "behind", "scenes",
        "behindthescenes", "making", "makingof",
        "by", "from",
    }
)

# Words naming an edition or arrangement rather than a different song.
DESCRIPTOR_WORDS = frozenset(
    {
        "instrumental", "inst", "offvocal", "off-vocal", "acoustic", "acapella",
        "cappella", "karaoke", "カラオケ", "カラオケver", "カラオケversion",
        "カラオケ音源", "original", "remix", "mix", "alternate", "alt",
        "remastered", "remaster", "tv", "tvsize", "demo", "edit", "short",
        "piano", "live", "version", "ver", "unplugged", "extended", "radio",
    }
)

# Production vocabulary used to label edition parentheticals.
EDITION_WORDS = frozenset(
    {
        "official", "offical", "mv", "pv", "music", "video", "musicvideo",
        "visualizer", "teaser", "trailer", "clip", "audio", "hd", "hq", "4k",
        "lyric", "lyrics", "full", "shorts",
    }
)

FEATURE_MARKERS = frozenset({"feat", "ft", "featuring", "with"})

# Any of these phrases inside ( ) or [ ] removes the whole span.
BRACKET_REMOVE_TRIGGERS = (
    # music video / live
    "music", "video", "mv", "pv", "official", "live", "live ver", "live version",
    "performance", "session", "lounge", "tour", "stage", "studio",
    # making-of
    "behind", "behind the scenes", "bts", "making", "making of",
    # channel formats
    "the first take", "first take", "youtube ver", "youtube version", "yt ver",
    # lyrics pages
    "lyric", "lyrics", "english translation", "translation", "translated",
    "romanized", "romaji",
    # editions
    "ver", "version", "alt ver", "alternate", "alternate ver", "alternate version",
    "remix", "mix", "edit", "demo", "short ver", "short version", "short",
    "tv", "tv size", "tvsize",
    # audio sources
    "acoustic", "piano", "inst", "instrumental", "off vocal", "offvocal",
    # misc
    "visualizer", "teaser", "trailer", "clip", "full ver", "full version",
    # language tags
    "english ver", "english version", "japanese ver", "japanese version",
)

BAD_WORDS = ("cover", "karaoke", "tribute", "sped up", "speed up", "slowed", "nightcore")

ROMANIZED_MARKERS = ("romanized", "translation", "translated", "english")

NON_SONG_MARKERS = ("chapter", "interview", "review", "article")

TRANSLATION_PAREN_MARKERS = ("translation", "translated", "english")

ROMANIZATION_PAREN_MARKERS = ("romanized", "romaji", "transliteration")

COVER_MARKER_PATTERN = r"(歌ってみた|covered?\s+by|カバー|\bcover\b)"

COVER_TAIL_PATTERNS = (
    r"\s*[-|]?\s*\bcovered?\s+by\s+\S.*$",
    r"\s*カバー(?:\s*by)?\s*.*$",
    r"\s*歌ってみた.*$",
)

DASH_SEPARATORS = (" - ", " | ", "｜")

MIN_TOKEN_OVERLAP = 0.6


@dataclass(frozen=True)
class Vocabulary:
    """A versioned set of word tables used by every matching component."""

    version: str = "2024.1"
    noise_words: frozenset[str] = NOISE_WORDS
    descriptor_words: frozenset[str] = DESCRIPTOR_WORDS
    edition_words: frozenset[str] = EDITION_WORDS
    feature_markers: frozenset[str] = FEATURE_MARKERS
    bracket_remove_triggers: tuple[str, ...] = BRACKET_REMOVE_TRIGGERS
    bad_words: tuple[str, ...] = BAD_WORDS
    romanized_markers: tuple[str, ...] = ROMANIZED_MARKERS
    non_song_markers: tuple[str, ...] = NON_SONG_MARKERS
    translation_paren_markers: tuple[str, ...] = TRANSLATION_PAREN_MARKERS
    romanization_paren_markers: tuple[str, ...] = ROMANIZATION_PAREN_MARKERS
    cover_marker_pattern: str = COVER_MARKER_PATTERN
    cover_tail_patterns: tuple[str, ...] = COVER_TAIL_PATTERNS
    dash_separators: tuple[str, ...] = DASH_SEPARATORS
    min_token_overlap: float = MIN_TOKEN_OVERLAP

    _trigger_tokens: tuple[tuple[str, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Triggers are matched as contiguous token runs; pre-split them once.
        triggers = tuple(tuple(re.split(r"[\s\-]+", t.lower())) for t in self.bracket_remove_triggers)
        object.__setattr__(self, "_trigger_tokens", triggers)

    @property
    def trigger_tokens(self) -> tuple[tuple[str, ...], ...]:
        return self._trigger_tokens

    @property
    def stopwords(self) -> frozenset[str]:
        return self.noise_words

    def is_noise_or_descriptor(self, token: str) -> bool:
        return token in self.noise_words or token in self.descriptor_words

    def extend(self, version: str, **tables: tuple[str, ...] | frozenset[str]) -> "Vocabulary":
        """Return a copy with extra entries merged into the named tables."""
        changes: dict[str, object] = {"version": version}
        for name, extra in tables.items():
            current = getattr(self, name)
            if isinstance(current, frozenset):
                changes[name] = current | frozenset(extra)
            else:
                changes[name] = tuple(current) + tuple(w for w in extra if w not in current)
        return replace(self, **changes)


DEFAULT_VOCABULARY = Vocabulary()
