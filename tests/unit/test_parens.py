"""Tests for parenthetical classification."""

import pytest

from lyrics_link.core.models import ParenRole
from lyrics_link.matching.parens import classify_paren, extract_parens, paren_content


class TestClassifyParen:
    """Tests for classify_paren."""

    @pytest.mark.parametrize(
        "inner,has_japanese,expected",
        [
            ("feat. Someone", False, ParenRole.FEATURE),
            ("with Someone", True, ParenRole.FEATURE),
            ("English Translation", False, ParenRole.TRANSLATION),
            ("Romanized", False, ParenRole.ROMANIZATION),
            ("Covered by Someone", True, ParenRole.DESCRIPTOR),
            ("Acoustic Version", False, ParenRole.DESCRIPTOR),
            ("Official MV", False, ParenRole.EDITION),
            ("Official MV", True, ParenRole.EDITION),
            ("Song Title", True, ParenRole.ROMANIZATION),
            ("Song Title", False, ParenRole.OTHER),
            ("", False, ParenRole.OTHER),
        ],
    )
    def test_roles(self, inner: str, has_japanese: bool, expected: ParenRole) -> None:
        """Test each rule assigns the expected role."""
        assert classify_paren(inner, has_japanese) == expected

    def test_non_ascii_on_japanese_title(self) -> None:
        """Test Japanese text in a paren is not taken for a romanization."""
        assert classify_paren("アニメ", True) == ParenRole.OTHER


class TestParenContent:
    """Tests for paren_content."""

    def test_label_prefix_is_removed(self) -> None:
        """Test 'English: Blue Bird' keeps only the title."""
        assert paren_content("English: Blue Bird", ParenRole.TRANSLATION) == "Blue Bird"

    def test_bare_marker_has_no_content(self) -> None:
        """Test a lone 'Romanized' carries no title."""
        assert paren_content("Romanized", ParenRole.ROMANIZATION) == ""

    def test_plain_romanization(self) -> None:
        """Test an unlabelled romanization is kept as is."""
        assert paren_content("Yoru ni Kakeru", ParenRole.ROMANIZATION) == "Yoru ni Kakeru"

    def test_other_roles_have_no_content(self) -> None:
        """Test descriptor parens never carry content."""
        assert paren_content("Live", ParenRole.DESCRIPTOR) == ""


class TestExtractParens:
    """Tests for extract_parens."""

    def test_cover_scenario(self) -> None:
        """Test a cover credit is one non-title paren."""
        parens = extract_parens("曲名 (Covered by Someone)", has_japanese=True)

        assert len(parens) == 1
        assert parens[0].inner_text == "Covered by Someone"
        assert parens[0].role not in (ParenRole.ROMANIZATION, ParenRole.TRANSLATION)

    def test_order_is_preserved(self) -> None:
        """Test spans come back in title order."""
        parens = extract_parens("夜に駆ける (Yoru ni Kakeru) [Official MV]", has_japanese=True)

        assert [p.role for p in parens] == [ParenRole.ROMANIZATION, ParenRole.EDITION]
        assert parens[0].content == "Yoru ni Kakeru"

    def test_empty_spans_are_skipped(self) -> None:
        """Test empty brackets produce nothing."""
        assert extract_parens("Song ()", has_japanese=False) == []
