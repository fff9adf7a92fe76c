"""Tests for combparse.diagnostics: codes, templates, exception hierarchy."""

from __future__ import annotations

import pytest

from combparse.diagnostics import (
    CombinatorError,
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    NoProgressError,
    ParserDefinitionError,
    UnboundParserError,
)


class TestDiagnostic:
    """Test Diagnostic formatting."""

    def test_format_without_hint(self) -> None:
        """Code name prefixes the message."""
        diagnostic = Diagnostic(DiagnosticCode.EMPTY_CHOICE, "no parsers")

        assert diagnostic.format_error() == "error[EMPTY_CHOICE]: no parsers"

    def test_format_with_hint(self) -> None:
        """Hint is appended in parentheses."""
        diagnostic = Diagnostic(DiagnosticCode.NO_PROGRESS, "stalled", hint="consume input")

        assert str(diagnostic) == "error[NO_PROGRESS]: stalled (hint: consume input)"


class TestErrorTemplate:
    """Test template messages carry their context."""

    def test_no_progress_names_position(self) -> None:
        """Position appears in the message."""
        assert "position 7" in ErrorTemplate.no_progress(7).message

    def test_source_too_large_formats_sizes(self) -> None:
        """Sizes are thousands-separated."""
        message = ErrorTemplate.source_too_large(12_000, 10_000).message

        assert "12,000" in message
        assert "10,000" in message

    def test_forward_templates_name_handle(self) -> None:
        """Forward templates quote the handle name."""
        assert "'expr'" in ErrorTemplate.forward_unbound("expr").message
        assert "'expr'" in ErrorTemplate.forward_already_defined("expr").message


class TestExceptionHierarchy:
    """Test exception classes."""

    @pytest.mark.parametrize(
        "error_class",
        [NoProgressError, ParserDefinitionError, UnboundParserError, DepthLimitExceededError],
    )
    def test_all_derive_from_combinator_error(self, error_class: type[CombinatorError]) -> None:
        """Every usage error is a CombinatorError."""
        assert issubclass(error_class, CombinatorError)

    def test_diagnostic_attached(self) -> None:
        """Constructing from a Diagnostic keeps it and formats the message."""
        diagnostic = ErrorTemplate.depth_exceeded(3)
        error = DepthLimitExceededError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_plain_message(self) -> None:
        """Constructing from a string leaves diagnostic unset."""
        error = CombinatorError("plain")

        assert error.diagnostic is None
        assert str(error) == "plain"
