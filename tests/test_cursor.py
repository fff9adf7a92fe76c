"""Tests for combparse.cursor: Cursor and ParseResult.

Validates the immutable cursor pattern over str and list inputs, remainder
reporting at the end-of-input boundary, and depth guard propagation.
"""

from __future__ import annotations

import pytest

from combparse.core import DepthGuard
from combparse.cursor import Cursor, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor_defaults_to_start(self) -> None:
        """Cursor position defaults to 0."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_cursor_over_list(self) -> None:
        """Cursor works over list input."""
        cursor = Cursor(["a", "b"], 1)

        assert cursor.current == "b"
        assert cursor.remainder == ["b"]

    def test_equality_ignores_guard(self) -> None:
        """Cursors at the same position compare equal regardless of depth."""
        shallow = Cursor("abc", 1)
        deep = shallow.with_guard(DepthGuard().descend())

        assert shallow == deep
        assert deep.guard.current_depth == 1


# ============================================================================
# EOF AND REMAINDER
# ============================================================================


class TestCursorEOF:
    """Test EOF detection and remainder reporting."""

    def test_is_eof_true_at_end(self) -> None:
        """is_eof is True at end of source."""
        assert Cursor("hello", 5).is_eof

    def test_is_eof_true_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("", 0).is_eof

    def test_remainder_is_suffix(self) -> None:
        """remainder is the unconsumed suffix."""
        assert Cursor("hello", 2).remainder == "llo"

    def test_remainder_empty_at_eof(self) -> None:
        """remainder at EOF is an empty sequence of the source type."""
        assert Cursor("hi", 2).remainder == ""
        assert Cursor(["h", "i"], 2).remainder == []

    def test_current_raises_eof_error_at_end(self) -> None:
        """Accessing current at EOF raises EOFError."""
        cursor = Cursor("hello", 5)

        with pytest.raises(EOFError, match="Unexpected EOF"):
            _ = cursor.current

    def test_peek_beyond_eof_returns_none(self) -> None:
        """peek past the end returns None."""
        cursor = Cursor("ab", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) is None


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance and slicing."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor unchanged."""
        cursor = Cursor("hello", 0)
        new_cursor = cursor.advance()

        assert cursor.pos == 0
        assert new_cursor.pos == 1

    def test_advance_clamps_at_eof(self) -> None:
        """advance() never moves past the end."""
        assert Cursor("hi", 1).advance(10).pos == 2

    def test_advance_preserves_guard(self) -> None:
        """advance() keeps the depth guard."""
        guard = DepthGuard().descend()
        cursor = Cursor("abc", 0, guard).advance()

        assert cursor.guard is guard

    def test_slice_to(self) -> None:
        """slice_to extracts from current position."""
        assert Cursor("hello world", 6).slice_to(11) == "world"


# ============================================================================
# PARSE RESULT
# ============================================================================


class TestParseResult:
    """Test ParseResult container."""

    def test_holds_value_and_cursor(self) -> None:
        """ParseResult exposes value and cursor."""
        cursor = Cursor("hello", 1)
        result = ParseResult("h", cursor)

        assert result.value == "h"
        assert result.cursor is cursor

    def test_is_frozen(self) -> None:
        """ParseResult is immutable."""
        result = ParseResult("h", Cursor("hello", 1))

        with pytest.raises(AttributeError):
            result.value = "x"  # type: ignore[misc]
