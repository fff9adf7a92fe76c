"""Diagnostic system for combinator usage errors.

Provides structured error diagnostics with codes and hints. Parse failures
themselves carry no diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CombinatorError,
    DepthLimitExceededError,
    NoProgressError,
    ParserDefinitionError,
    UnboundParserError,
)
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "NoProgressError",
    "ParserDefinitionError",
    "UnboundParserError",
]
