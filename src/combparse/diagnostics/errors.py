"""Exception hierarchy for combinator usage errors.

A failed match is not an exception: parsers return None. These exceptions
signal a defect in the grammar or its use, and always propagate out of
parse().

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CombinatorError",
    "DepthLimitExceededError",
    "NoProgressError",
    "ParserDefinitionError",
    "UnboundParserError",
]


class CombinatorError(Exception):
    """Base exception for all combparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NoProgressError(CombinatorError):
    """Repetition over a parser that succeeded without consuming input.

    Example:
        digit().many().many()  <- inner many() matches empty input forever
    """


class ParserDefinitionError(CombinatorError):
    """A Forward handle was defined more than once."""


class UnboundParserError(CombinatorError):
    """A Forward handle was invoked before define() was called."""


class DepthLimitExceededError(CombinatorError):
    """Recursion through Forward handles exceeded the configured depth.

    Indicates either adversarial input or a left-recursive grammar.
    """
