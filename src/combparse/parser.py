"""Parser abstraction and combinators.

A Parser wraps a matching function ``Cursor -> ParseResult[T] | None``.
Combinator methods return NEW parsers whose matching functions call the
children's matching functions in a fixed order; nothing is compiled and
nothing is mutated.

Failure Model:
    There is exactly one failure signal: the matching function returns None.
    A failed parser never moves the caller's cursor (cursors are immutable),
    so or_(), choice() and maybe() simply retry from the cursor they were
    given.

End-of-input Boundary:
    The remainder is always source[pos:], possibly empty. Sequencing
    combinators ALWAYS run their second parser on the remainder left by the
    first, even when it is empty. An empty remainder fails only if the second
    parser itself fails on it:

        >>> char("a").and_(digit().many()).parse("a")
        (('a', []), '')

    Callers who want to stop at end of input compose with eof() explicitly.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from combparse.constants import MAX_SOURCE_SIZE
from combparse.core.depth_guard import root_guard
from combparse.cursor import Cursor, ParseResult
from combparse.diagnostics import ErrorTemplate, NoProgressError
from combparse.fold import concat_text

__all__ = ["MatchFn", "Parser", "choice", "parse"]

logger = logging.getLogger(__name__)

type MatchFn[T] = Callable[[Cursor], ParseResult[T] | None]


class Parser[T]:
    """Immutable, reusable matching function with combinator methods.

    Invoking a parser twice on the same cursor yields the same result. Parsers
    hold only what they captured at construction, so one parser may be
    embedded in any number of grammars.

    Example:
        >>> number = digit().many1().into_string().map(int)
        >>> number.parse("42abc")
        (42, 'abc')
        >>> number.parse("abc") is None
        True
    """

    __slots__ = ("_match", "_name")

    def __init__(self, match: MatchFn[T], name: str | None = None) -> None:
        """Wrap a matching function.

        Args:
            match: Callable taking a Cursor, returning ParseResult or None
            name: Optional label shown in repr() and log records
        """
        self._match = match
        self._name = name

    @property
    def name(self) -> str | None:
        """Label given at construction, if any."""
        return self._name

    def __repr__(self) -> str:
        if self._name is None:
            return "<Parser>"
        return f"<Parser {self._name}>"

    def __call__(self, cursor: Cursor) -> ParseResult[T] | None:
        return self._match(cursor)

    def named(self, name: str) -> "Parser[T]":
        """Return the same parser under a new label."""
        return Parser(self._match, name)

    # =========================================================================
    # Entry points
    # =========================================================================

    def parse_cursor(self, cursor: Cursor) -> ParseResult[T] | None:
        """Run the parser at an existing cursor, returning the raw result."""
        return self._match(cursor)

    def parse(
        self,
        source: Sequence,
        *,
        max_source_size: int | None = None,
        max_depth: int | None = None,
    ) -> tuple[T, Sequence] | None:
        """Parse from the start of source.

        The parser is not required to consume all of source; the unconsumed
        suffix is returned alongside the value.

        Args:
            source: Input sequence (str, list, tuple, ...)
            max_source_size: Maximum input length (default: MAX_SOURCE_SIZE).
                             0 disables the check.
            max_depth: Maximum Forward recursion depth (default: MAX_DEPTH)

        Returns:
            (value, remainder) on success, None on failure. The remainder has
            the type of source slices (str for str input).

        Raises:
            ValueError: If source exceeds max_source_size
            CombinatorError: On grammar misuse (never on a plain mismatch)
        """
        limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        if limit > 0 and len(source) > limit:
            raise ValueError(str(ErrorTemplate.source_too_large(len(source), limit)))

        guard = root_guard(max_depth)
        result = self._match(Cursor(source, 0, guard))
        if result is None:
            logger.debug("%r did not match input of length %d", self, len(source))
            return None
        return result.value, result.cursor.remainder

    # =========================================================================
    # Transformation
    # =========================================================================

    def map[U](self, func: Callable[[T], U]) -> "Parser[U]":
        """Replace the output with func(output) on success.

        func must be total; to reject a value, use filter().
        """
        match = self._match

        def parse_mapped(cursor: Cursor) -> ParseResult[U] | None:
            result = match(cursor)
            if result is None:
                return None
            return ParseResult(func(result.value), result.cursor)

        return Parser(parse_mapped)

    def filter(self, predicate: Callable[[T], bool]) -> "Parser[T]":
        """Fail when predicate(output) is false, as if nothing had matched."""
        match = self._match

        def parse_filtered(cursor: Cursor) -> ParseResult[T] | None:
            result = match(cursor)
            if result is None or not predicate(result.value):
                return None
            return result

        return Parser(parse_filtered)

    def skip(self) -> "Parser[None]":
        """Discard the output, keeping the consumed input."""
        match = self._match

        def parse_skipped(cursor: Cursor) -> ParseResult[None] | None:
            result = match(cursor)
            if result is None:
                return None
            return ParseResult(None, result.cursor)

        return Parser(parse_skipped)

    def into_string(self) -> "Parser[str]":
        """Flatten character-composed output into a single string.

        See combparse.fold.concat_text for the accepted shapes.

        Example:
            >>> char("a").then_maybe(char("b")).into_string().parse("ab")
            ('ab', '')
        """
        return self.map(concat_text)

    # =========================================================================
    # Sequencing
    # =========================================================================

    def and_[U](self, other: "Parser[U]") -> "Parser[tuple[T, U]]":
        """Match self, then other on the remainder. Output is the pair.

        other is attempted even when self consumed all input.
        """
        first = self._match
        second = other._match

        def parse_both(cursor: Cursor) -> ParseResult[tuple[T, U]] | None:
            left = first(cursor)
            if left is None:
                return None
            right = second(left.cursor)
            if right is None:
                return None
            return ParseResult((left.value, right.value), right.cursor)

        return Parser(parse_both)

    def then_maybe[U](self, other: "Parser[U]") -> "Parser[tuple[T, U | None]]":
        """Match self, then optionally other.

        If other fails the output is (o1, None) and the remainder is the one
        self left; other consumes nothing.
        """
        first = self._match
        second = other._match

        def parse_then_maybe(cursor: Cursor) -> ParseResult[tuple[T, U | None]] | None:
            left = first(cursor)
            if left is None:
                return None
            right = second(left.cursor)
            if right is None:
                return ParseResult((left.value, None), left.cursor)
            return ParseResult((left.value, right.value), right.cursor)

        return Parser(parse_then_maybe)

    def then_left[U](self, other: "Parser[U]") -> "Parser[T]":
        """Match self then other, keeping self's output."""
        return self.and_(other).map(lambda pair: pair[0])

    def then_right[U](self, other: "Parser[U]") -> "Parser[U]":
        """Match self then other, keeping other's output."""
        return self.and_(other).map(lambda pair: pair[1])

    def between(self, left: "Parser[object]", right: "Parser[object]") -> "Parser[T]":
        """Match left, self, right in order, keeping self's output.

        Example:
            >>> digit().many1().into_string().between(char("("), char(")")).parse("(12)")
            ('12', '')
        """
        opening = left._match
        inner = self._match
        closing = right._match

        def parse_between(cursor: Cursor) -> ParseResult[T] | None:
            start = opening(cursor)
            if start is None:
                return None
            body = inner(start.cursor)
            if body is None:
                return None
            end = closing(body.cursor)
            if end is None:
                return None
            return ParseResult(body.value, end.cursor)

        return Parser(parse_between)

    def maybe(self) -> "Parser[T | None]":
        """Never fail: output is the match, or None with nothing consumed."""
        match = self._match

        def parse_maybe(cursor: Cursor) -> ParseResult[T | None]:
            result = match(cursor)
            if result is None:
                return ParseResult(None, cursor)
            return result

        return Parser(parse_maybe)

    # =========================================================================
    # Alternation
    # =========================================================================

    def or_[U](self, other: "Parser[U]") -> "Parser[T | U]":
        """Left-biased choice: other runs only if self fails.

        Both alternatives see the same starting cursor.
        """
        first = self._match
        second = other._match

        def parse_either(cursor: Cursor) -> ParseResult[T | U] | None:
            result = first(cursor)
            if result is not None:
                return result
            return second(cursor)

        return Parser(parse_either)

    def __or__[U](self, other: "Parser[U]") -> "Parser[T | U]":
        return self.or_(other)

    @staticmethod
    def choice[U](parsers: Iterable["Parser[U]"]) -> "Parser[U]":
        """Try parsers in order, returning the first success.

        Raises:
            ValueError: If parsers is empty
        """
        matches = tuple(parser._match for parser in parsers)
        if not matches:
            raise ValueError(str(ErrorTemplate.empty_choice()))

        def parse_choice(cursor: Cursor) -> ParseResult[U] | None:
            for match in matches:
                result = match(cursor)
                if result is not None:
                    return result
            return None

        return Parser(parse_choice)

    # =========================================================================
    # Repetition
    # =========================================================================

    def many(self) -> "Parser[list[T]]":
        """Match self zero or more times. Never fails.

        Iterative, so stack use does not grow with the number of repetitions.

        Raises:
            NoProgressError: If self succeeds without consuming input
        """
        match = self._match

        def parse_many(cursor: Cursor) -> ParseResult[list[T]]:
            values: list[T] = []
            while True:
                result = match(cursor)
                if result is None:
                    return ParseResult(values, cursor)
                if result.cursor.pos <= cursor.pos:
                    raise NoProgressError(ErrorTemplate.no_progress(cursor.pos))
                values.append(result.value)
                cursor = result.cursor

        return Parser(parse_many)

    def many1(self) -> "Parser[list[T]]":
        """Match self one or more times; fail if there is no first match."""
        repeated = self.many()._match

        def parse_many1(cursor: Cursor) -> ParseResult[list[T]] | None:
            result = repeated(cursor)
            if result is None or not result.value:
                return None
            return result

        return Parser(parse_many1)

    def sep_by1(self, separator: "Parser[object]") -> "Parser[list[T]]":
        """One or more matches of self separated by separator.

        Separator outputs are discarded. A trailing separator is left
        unconsumed.
        """
        rest = separator.then_right(self).many()
        return self.and_(rest).map(lambda pair: [pair[0], *pair[1]])

    def sep_by(self, separator: "Parser[object]") -> "Parser[list[T]]":
        """Zero or more matches of self separated by separator. Never fails."""
        return self.sep_by1(separator).maybe().map(lambda items: [] if items is None else items)


def choice[T](*parsers: Parser[T]) -> Parser[T]:
    """Try parsers in order, returning the first success.

    Example:
        >>> sign = choice(char("+"), char("-"))
        >>> sign.parse("-1")
        ('-', '1')
    """
    return Parser.choice(parsers)


def parse[T](
    parser: Parser[T],
    source: Sequence,
    *,
    max_source_size: int | None = None,
    max_depth: int | None = None,
) -> tuple[T, Sequence] | None:
    """Run parser from the start of source.

    Returns:
        (value, remainder) on success, None when the parser does not match
    """
    return parser.parse(source, max_source_size=max_source_size, max_depth=max_depth)
