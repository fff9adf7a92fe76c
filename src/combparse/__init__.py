"""combparse - composable parser combinators over in-memory sequences.

Build recursive-descent parsers from small primitives and combinator methods,
with no grammar compilation step. A parser either succeeds with a value and
the unconsumed remainder, or fails with None.

Public API:
    Parser - Matching function with combinator methods
    parse - Run a parser from the start of an input sequence
    choice - Ordered, left-biased alternation over several parsers
    forward / Forward - Deferred handle for recursive grammars
    satisfy, char, digit, any_element - Single-element primitives
    one_of, none_of, literal, eof, pure - Further primitives
    concat_text - The text fold behind Parser.into_string()
    Cursor, ParseResult - Low-level cursor API

Exceptions:
    CombinatorError - Base class for grammar misuse
    NoProgressError - Repetition over a zero-width parser
    UnboundParserError / ParserDefinitionError - Forward misuse
    DepthLimitExceededError - Recursion guard tripped

Submodules:
    combparse.grammars - Example identifier and number grammars
"""

from .cursor import Cursor, ParseResult
from .diagnostics import (
    CombinatorError,
    DepthLimitExceededError,
    NoProgressError,
    ParserDefinitionError,
    UnboundParserError,
)
from .fold import concat_text
from .forward import Forward, forward
from .parser import Parser, choice, parse
from .primitives import (
    any_element,
    char,
    digit,
    eof,
    literal,
    none_of,
    one_of,
    pure,
    satisfy,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombinatorError",
    "Cursor",
    "DepthLimitExceededError",
    "Forward",
    "NoProgressError",
    "ParseResult",
    "Parser",
    "ParserDefinitionError",
    "UnboundParserError",
    "__version__",
    "any_element",
    "char",
    "choice",
    "concat_text",
    "digit",
    "eof",
    "forward",
    "literal",
    "none_of",
    "one_of",
    "parse",
    "pure",
    "satisfy",
]
