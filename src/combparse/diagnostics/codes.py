"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for combinator usage errors.
Parse failures never produce a Diagnostic; they are a plain None.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes for combinator misuse.

    Code ranges:
        1000-1999: Grammar construction errors
        2000-2999: Parse-time guard errors
    """

    # Grammar construction (1000-1999)
    EMPTY_CHOICE = 1001
    FORWARD_ALREADY_DEFINED = 1002
    INVALID_LITERAL = 1003
    UNFOLDABLE_VALUE = 1004

    # Parse-time guards (2000-2999)
    NO_PROGRESS = 2001
    FORWARD_UNBOUND = 2002
    DEPTH_EXCEEDED = 2003
    SOURCE_TOO_LARGE = 2004
    UNEXPECTED_EOF = 2005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        hint: Optional suggestion for fixing the grammar
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def format_error(self) -> str:
        """Format as a single-line error string.

        Example:
            >>> Diagnostic(DiagnosticCode.EMPTY_CHOICE, "choice() needs a parser").format_error()
            'error[EMPTY_CHOICE]: choice() needs a parser'
        """
        text = f"error[{self.code.name}]: {self.message}"
        if self.hint:
            text += f" (hint: {self.hint})"
        return text

    def __str__(self) -> str:
        return self.format_error()
