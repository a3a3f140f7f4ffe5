"""Tests for text normalization utilities."""

import pytest

from lyrics_link.utils.text import (
    ascii_fold,
    contains_word,
    dedupe_tokens,
    has_cjk,
    match_tokens,
    normalize_brackets,
    prenormalize,
    strip_punct_lower,
    tokenize,
)


class TestPrenormalize:
    """Tests for prenormalize."""

    def test_fullwidth_to_ascii(self) -> None:
        """Test NFKC folds full-width letters and keeps case."""
        assert prenormalize("ＳＯＮＧ") == "SONG"

    def test_brackets(self) -> None:
        """Test Japanese brackets become square brackets."""
        assert normalize_brackets("【MV】「曲名」") == "[MV][曲名]"

    def test_empty(self) -> None:
        """Test empty input."""
        assert prenormalize("") == ""


class TestTokenize:
    """Tests for tokenize."""

    def test_separators(self) -> None:
        """Test punctuation and separators split tokens."""
        assert tokenize("Song - Title / Other|Part") == ["song", "title", "other", "part"]

    def test_quotes_and_brackets_are_dropped(self) -> None:
        """Test quotes and brackets never end up in tokens."""
        assert tokenize('"Song" (Live)') == ["song", "live"]

    def test_japanese_punctuation(self) -> None:
        """Test Japanese punctuation splits tokens."""
        assert tokenize("夜に駆ける、群青") == ["夜に駆ける", "群青"]

    def test_empty(self) -> None:
        """Test empty input."""
        assert tokenize("") == []


class TestTokenHelpers:
    """Tests for token list helpers."""

    def test_match_tokens(self) -> None:
        """Test stopwords and digits are dropped."""
        assert match_tokens(["the", "song", "2011"], {"the"}) == ["song"]

    def test_dedupe_tokens(self) -> None:
        """Test first occurrences are kept in order."""
        assert dedupe_tokens(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]


class TestFolding:
    """Tests for case and script folding."""

    def test_strip_punct_lower(self) -> None:
        """Test punctuation is removed and case folded."""
        assert strip_punct_lower("AC/DC!") == "acdc"

    @pytest.mark.parametrize(
        "text,expected",
        [("Café del Mar", "cafedelmar"), ("Yoru ni Kakeru", "yorunikakeru"), ("夜に駆ける", ""), ("", "")],
    )
    def test_ascii_fold(self, text: str, expected: str) -> None:
        """Test ASCII folding drops diacritics and non-Latin text."""
        assert ascii_fold(text) == expected

    def test_has_cjk(self) -> None:
        """Test Japanese script detection."""
        assert has_cjk("曲名")
        assert has_cjk("ヨアソビ")
        assert not has_cjk("Song")
        assert not has_cjk("")


class TestContainsWord:
    """Tests for contains_word."""

    def test_word_boundary(self) -> None:
        """Test Latin words need a leading boundary."""
        assert contains_word("Song (Cover)", "cover")
        assert contains_word("Covered by", "cover")
        assert not contains_word("Discover", "cover")

    def test_phrase(self) -> None:
        """Test multi-word phrases match."""
        assert contains_word("Song (Sped Up)", "sped up")

    def test_empty(self) -> None:
        """Test empty text never matches."""
        assert not contains_word("", "cover")
