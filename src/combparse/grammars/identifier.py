"""Identifier grammar: [A-Za-z_][A-Za-z0-9_]*

ASCII only, matching the identifiers of C-family languages.

Python 3.13+. Zero external dependencies.
"""

from combparse.parser import Parser
from combparse.primitives import satisfy

__all__ = ["identifier", "is_identifier_continue", "is_identifier_start"]


def is_identifier_start(ch: str) -> bool:
    """ASCII letter or underscore."""
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_identifier_continue(ch: str) -> bool:
    """ASCII letter, digit, or underscore."""
    return is_identifier_start(ch) or ("0" <= ch <= "9")


def identifier() -> Parser[str]:
    """Parse an identifier into a string.

    Example:
        >>> identifier().parse("hello_world = 1")
        ('hello_world', ' = 1')
        >>> identifier().parse("9lives") is None
        True
    """
    head = satisfy(is_identifier_start, "identifier_start")
    tail = satisfy(is_identifier_continue, "identifier_continue").many()
    return head.then_maybe(tail).into_string().named("identifier")
