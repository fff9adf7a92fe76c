"""Tests for combparse.primitives.

Every single-element primitive consumes exactly one element on success and
fails on empty input.
"""

from __future__ import annotations

import pytest

from combparse import any_element, char, digit, eof, literal, none_of, one_of, pure, satisfy

# ============================================================================
# SATISFY
# ============================================================================


class TestSatisfy:
    """Test the predicate primitive."""

    def test_matches_when_predicate_holds(self) -> None:
        """Consumes one element and outputs it."""
        assert satisfy(str.isalpha).parse("ab1") == ("a", "b1")

    def test_fails_when_predicate_rejects(self) -> None:
        """Predicate false -> failure."""
        assert satisfy(str.isalpha).parse("1ab") is None

    def test_fails_on_empty_input(self) -> None:
        """Predicate is never consulted at end of input."""
        calls: list[str] = []

        def predicate(element: str) -> bool:
            calls.append(element)
            return True

        assert satisfy(predicate).parse("") is None
        assert calls == []

    def test_works_over_non_character_elements(self) -> None:
        """Elements may be any type."""
        even = satisfy(lambda n: n % 2 == 0)

        assert even.parse([4, 5]) == (4, [5])
        assert even.parse([5, 4]) is None


# ============================================================================
# CHAR, DIGIT, ANY
# ============================================================================


class TestChar:
    """Test single-character equality."""

    def test_single_char_consumes_everything(self) -> None:
        """char('c') on ['c'] leaves an empty remainder."""
        assert char("c").parse(["c"]) == ("c", [])

    def test_mismatch_fails(self) -> None:
        """Different character -> failure."""
        assert char("c").parse("d") is None

    def test_empty_fails(self) -> None:
        """Empty input -> failure."""
        assert char("c").parse("") is None

    def test_repr_uses_character(self) -> None:
        """repr names the expected character."""
        assert repr(char("c")) == "<Parser 'c'>"


class TestDigit:
    """Test ASCII digit matching."""

    @pytest.mark.parametrize("ch", list("0123456789"))
    def test_any_ascii_digit(self, ch: str) -> None:
        """All ten ASCII digits match."""
        assert digit().parse(ch) == (ch, "")

    @pytest.mark.parametrize("ch", ["a", "²", "٣", " "])
    def test_non_ascii_digits_rejected(self, ch: str) -> None:
        """Letters and Unicode digits are rejected."""
        assert digit().parse(ch) is None

    def test_specific_digit(self) -> None:
        """digit(d) only matches d."""
        assert digit("7").parse("78") == ("7", "8")
        assert digit("7").parse("87") is None

    @pytest.mark.parametrize("bad", ["a", "12", ""])
    def test_specific_digit_validates_argument(self, bad: str) -> None:
        """digit(d) requires a single ASCII digit."""
        with pytest.raises(ValueError, match="single ASCII digit"):
            digit(bad)


class TestAnyElement:
    """Test the match-anything primitive."""

    def test_matches_any_non_empty(self) -> None:
        """Any element matches."""
        assert any_element().parse("?!") == ("?", "!")
        assert any_element().parse([None]) == (None, [])

    def test_fails_on_empty(self) -> None:
        """Empty input -> failure."""
        assert any_element().parse("") is None


# ============================================================================
# SET MEMBERSHIP
# ============================================================================


class TestOneOfNoneOf:
    """Test membership primitives."""

    def test_one_of(self) -> None:
        """one_of matches members only."""
        sign = one_of("+-")

        assert sign.parse("-1") == ("-", "1")
        assert sign.parse("1") is None

    def test_none_of(self) -> None:
        """none_of matches non-members only."""
        not_quote = none_of('"')

        assert not_quote.parse("a") == ("a", "")
        assert not_quote.parse('"') is None

    def test_none_of_fails_on_empty(self) -> None:
        """none_of still needs an element."""
        assert none_of("x").parse("") is None


# ============================================================================
# LITERAL, EOF, PURE
# ============================================================================


class TestLiteral:
    """Test fixed-run matching."""

    def test_matches_prefix(self) -> None:
        """Output is the matched slice."""
        assert literal("null").parse("nullable") == ("null", "able")

    def test_partial_match_fails(self) -> None:
        """A run cut short by EOF fails."""
        assert literal("null").parse("nul") is None

    def test_mismatch_fails(self) -> None:
        """A differing element fails."""
        assert literal("null").parse("nil") is None

    def test_list_input(self) -> None:
        """Works over lists, output is a list slice."""
        assert literal([1, 2]).parse([1, 2, 3]) == ([1, 2], [3])

    def test_empty_run_rejected(self) -> None:
        """An empty literal is a grammar error."""
        with pytest.raises(ValueError, match="non-empty"):
            literal("")


class TestEofAndPure:
    """Test zero-width primitives."""

    def test_eof_at_end(self) -> None:
        """eof succeeds with None on empty input."""
        assert eof().parse("") == (None, "")

    def test_eof_not_at_end(self) -> None:
        """eof fails when input remains."""
        assert eof().parse("x") is None

    def test_pure_consumes_nothing(self) -> None:
        """pure succeeds without consuming."""
        assert pure(42).parse("abc") == (42, "abc")
        assert pure(42).parse("") == (42, "")
