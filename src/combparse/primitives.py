"""Primitive parsers.

Leaf parsers that inspect the input directly. The single-element primitives
(satisfy and everything built on it) consume exactly one element on success
and fail at end of input.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Collection, Sequence

from combparse.constants import ASCII_DIGITS
from combparse.cursor import Cursor, ParseResult
from combparse.diagnostics import ErrorTemplate
from combparse.parser import Parser

__all__ = [
    "any_element",
    "char",
    "digit",
    "eof",
    "literal",
    "none_of",
    "one_of",
    "pure",
    "satisfy",
]


def satisfy[E](predicate: Callable[[E], bool], name: str | None = None) -> Parser[E]:
    """Match one element for which predicate holds.

    Args:
        predicate: Test applied to the current element
        name: Optional label for repr()

    Returns:
        Parser producing the matched element

    Example:
        >>> vowel = satisfy(lambda c: c in "aeiou")
        >>> vowel.parse("echo")
        ('e', 'cho')
        >>> vowel.parse("") is None
        True
    """

    def parse_satisfy(cursor: Cursor) -> ParseResult[E] | None:
        if cursor.is_eof:
            return None
        element = cursor.current
        if not predicate(element):
            return None
        return ParseResult(element, cursor.advance())

    return Parser(parse_satisfy, name or "satisfy")


def char(c: str) -> Parser[str]:
    """Match exactly the character c."""
    return satisfy(lambda element: element == c, repr(c))


def digit(d: str | None = None) -> Parser[str]:
    """Match one ASCII digit, or the specific digit d when given.

    Unicode digits such as '²' or '٣' are rejected.

    Raises:
        ValueError: If d is not a single ASCII digit
    """
    if d is None:
        return satisfy(lambda element: element in ASCII_DIGITS, "digit")
    if d not in ASCII_DIGITS:
        msg = f"digit() expects a single ASCII digit, got {d!r}"
        raise ValueError(msg)
    return satisfy(lambda element: element == d, f"digit({d})")


def any_element() -> Parser[object]:
    """Match any single element. Fails only at end of input."""
    return satisfy(lambda _: True, "any")


def one_of(elements: Collection[object]) -> Parser[object]:
    """Match one element contained in elements."""
    allowed = frozenset(elements)
    return satisfy(lambda element: element in allowed, f"one_of({sorted(map(repr, allowed))})")


def none_of(elements: Collection[object]) -> Parser[object]:
    """Match one element NOT contained in elements. Fails at end of input."""
    excluded = frozenset(elements)
    return satisfy(lambda element: element not in excluded, f"none_of({sorted(map(repr, excluded))})")


def literal[E](run: Sequence[E]) -> Parser[Sequence[E]]:
    """Match a fixed run of elements.

    Output is the matched slice of the source (a str for str input).

    Raises:
        ValueError: If run is empty

    Example:
        >>> literal("null").parse("nullable")
        ('null', 'able')
    """
    if len(run) == 0:
        raise ValueError(str(ErrorTemplate.invalid_literal()))
    expected = tuple(run)
    size = len(expected)

    def parse_literal(cursor: Cursor) -> ParseResult[Sequence[E]] | None:
        end = cursor.pos + size
        if end > len(cursor.source):
            return None
        if tuple(cursor.slice_to(end)) != expected:
            return None
        return ParseResult(cursor.slice_to(end), cursor.advance(size))

    return Parser(parse_literal, f"literal({run!r})")


def eof() -> Parser[None]:
    """Succeed with None only at end of input, consuming nothing."""

    def parse_eof(cursor: Cursor) -> ParseResult[None] | None:
        if not cursor.is_eof:
            return None
        return ParseResult(None, cursor)

    return Parser(parse_eof, "eof")


def pure[T](value: T) -> Parser[T]:
    """Always succeed with value, consuming nothing.

    Do not repeat a pure() parser: many() rejects zero-width matches.
    """

    def parse_pure(cursor: Cursor) -> ParseResult[T]:
        return ParseResult(value, cursor)

    return Parser(parse_pure, f"pure({value!r})")
