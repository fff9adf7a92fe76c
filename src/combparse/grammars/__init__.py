"""Example grammars built on the combinator core.

These are consumers of combparse, kept small to show typical composition.

Exports:
    identifier - [A-Za-z_][A-Za-z0-9_]*
    integer - -?[0-9]+ as int
    float_literal / float_number - ASCII float syntax
    locale_float - float syntax with CLDR symbols (requires Babel)

Python 3.13+.
"""

from .identifier import identifier, is_identifier_continue, is_identifier_start
from .numbers import float_literal, float_number, integer, locale_float

__all__ = [
    "float_literal",
    "float_number",
    "identifier",
    "integer",
    "is_identifier_continue",
    "is_identifier_start",
    "locale_float",
]
