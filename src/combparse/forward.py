"""Deferred parser handles for recursive grammars.

Combinators capture their children at construction, so a grammar that refers
to itself cannot be built eagerly. A Forward is created first, used inside
the grammar, and bound to its definition afterwards:

    >>> expr = forward("expr")
    >>> group = expr.between(char("("), char(")"))
    >>> expr.define(group | digit())
    <Parser expr>
    >>> expr.parse("((7))")
    ('7', '')

Each entry into a Forward descends the cursor's DepthGuard, so runaway
recursion (deep input, or a left-recursive grammar) raises
DepthLimitExceededError rather than RecursionError.

Python 3.13+. Zero external dependencies.
"""

import logging

from combparse.cursor import Cursor, ParseResult
from combparse.diagnostics import (
    DepthLimitExceededError,
    ErrorTemplate,
    ParserDefinitionError,
    UnboundParserError,
)
from combparse.parser import MatchFn, Parser

__all__ = ["Forward", "forward"]

logger = logging.getLogger(__name__)


class Forward[T](Parser[T]):
    """Parser whose matching function is supplied later via define().

    Binding happens exactly once. After that the handle behaves like the
    parser it was bound to, plus recursion depth tracking.
    """

    __slots__ = ("_target",)

    def __init__(self, name: str = "forward") -> None:
        """Create an unbound handle.

        Args:
            name: Label used in repr() and error messages
        """
        self._target: MatchFn[T] | None = None
        super().__init__(self._enter, name)

    @property
    def is_defined(self) -> bool:
        """True once define() has been called."""
        return self._target is not None

    def define(self, parser: Parser[T]) -> "Forward[T]":
        """Bind the handle to its definition.

        Raises:
            ParserDefinitionError: If already defined
        """
        if self._target is not None:
            raise ParserDefinitionError(ErrorTemplate.forward_already_defined(str(self._name)))
        self._target = parser._match  # noqa: SLF001
        logger.debug("Forward parser %r bound", self._name)
        return self

    def _enter(self, cursor: Cursor) -> ParseResult[T] | None:
        target = self._target
        if target is None:
            raise UnboundParserError(ErrorTemplate.forward_unbound(str(self._name)))
        guard = cursor.guard
        if guard.current_depth > 0:
            result = target(cursor.with_guard(guard.descend()))
        else:
            # Outermost entry: the stack has unwound by the time we get here,
            # so a grammar too frame-hungry for max_depth still fails cleanly
            try:
                result = target(cursor.with_guard(guard.descend()))
            except RecursionError as e:
                logger.debug("Forward parser %r overflowed the interpreter stack", self._name)
                raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(guard.max_depth)) from e
        if result is None:
            return None
        # Restore the caller's depth on the way out
        return ParseResult(result.value, result.cursor.with_guard(guard))


def forward[T](name: str = "forward") -> Forward[T]:
    """Create an unbound Forward handle."""
    return Forward(name)
