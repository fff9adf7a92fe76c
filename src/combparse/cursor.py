"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern: an owned input sequence plus an
integer offset, instead of slicing the input at every step.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value or a marker object
    - The remainder is always source[pos:], which may be empty
    - Every advance() returns NEW cursor, so a failed parser cannot have
      moved the caller's cursor

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from combparse.core.depth_guard import DepthGuard
from combparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor[E]:
    """Immutable position in an input sequence.

    Works over any Sequence: str (elements are 1-char strings), list, tuple.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
        >>> Cursor("hi", 2).remainder
        ''

    Attributes:
        source: The complete input sequence
        pos: Offset of the next unconsumed element
        guard: Recursion depth state, not part of equality
    """

    source: Sequence[E]
    pos: int = 0
    guard: DepthGuard = field(default=DepthGuard(), compare=False, repr=False)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> E:
        """Get current element.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remainder(self) -> Sequence[E]:
        """Unconsumed suffix of the input.

        Has the same type as source (str in, str out). A zero-length
        remainder is a valid, matchable state.
        """
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> E | None:
        """Peek at element with offset without advancing.

        Returns:
            Element at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor[E]":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return replace(self, pos=new_pos)

    def slice_to(self, end_pos: int) -> Sequence[E]:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start = Cursor("hello world", 0)
            >>> start.slice_to(5)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def with_guard(self, guard: DepthGuard) -> "Cursor[E]":
        """Return the same position carrying a different depth guard."""
        return replace(self, guard=guard)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful match: the produced value and the cursor after it.

    Failure is not a ParseResult; matching functions return None.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
