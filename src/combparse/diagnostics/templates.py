"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def empty_choice() -> Diagnostic:
        """choice() called with no candidate parsers."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHOICE,
            message="choice() requires at least one parser",
        )

    @staticmethod
    def invalid_literal() -> Diagnostic:
        """literal() called with an empty run."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_LITERAL,
            message="literal() requires a non-empty run of elements",
            hint="Use pure() to succeed without consuming input",
        )

    @staticmethod
    def unfoldable_value(value: object) -> Diagnostic:
        """into_string() met a value outside its four shapes.

        Args:
            value: The offending output value
        """
        msg = f"Cannot fold {type(value).__name__} value {value!r} into text"
        return Diagnostic(
            code=DiagnosticCode.UNFOLDABLE_VALUE,
            message=msg,
            hint="Only str, None, list and tuple outputs can be folded; map() other values first",
        )

    @staticmethod
    def no_progress(position: int) -> Diagnostic:
        """Repetition body succeeded without consuming input.

        Args:
            position: Cursor position where the loop stalled
        """
        msg = f"Repeated parser succeeded without consuming input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.NO_PROGRESS,
            message=msg,
            hint="Parsers passed to many()/many1()/sep_by() must consume at least one element",
        )

    @staticmethod
    def forward_unbound(name: str) -> Diagnostic:
        """Forward handle invoked before being defined.

        Args:
            name: Name given to the Forward handle
        """
        msg = f"Forward parser '{name}' was used before define() was called"
        return Diagnostic(
            code=DiagnosticCode.FORWARD_UNBOUND,
            message=msg,
        )

    @staticmethod
    def forward_already_defined(name: str) -> Diagnostic:
        """Forward handle defined twice.

        Args:
            name: Name given to the Forward handle
        """
        msg = f"Forward parser '{name}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.FORWARD_ALREADY_DEFINED,
            message=msg,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Recursion depth limit exceeded.

        Args:
            max_depth: The configured limit
        """
        msg = f"Maximum recursion depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.DEPTH_EXCEEDED,
            message=msg,
            hint="Check for left recursion, or raise max_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Input length in elements
            max_size: The configured limit
        """
        msg = f"Source size ({size:,} elements) exceeds maximum ({max_size:,} elements)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Pass max_source_size to parse() to increase the limit",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Element access at end of input.

        Args:
            position: The position where EOF was encountered
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before reading cursor.current",
        )
