"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that the
combinator core never imports it.

Design Rationale:
    combparse supports two installation modes:
    - Core only: `pip install combparse` (no external dependencies)
    - With locale grammars: `pip install combparse[babel]`

    This module ensures that:
    1. Core-only installations never trigger Babel imports
    2. Locale-aware grammars get a consistent, helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from combparse.core.babel_compat import require_babel

    def my_grammar(locale_code: str) -> Parser[str]:
        require_babel("my_grammar")  # Raises ImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
class BabelNumbersProtocol(Protocol):
    """Protocol for the subset of babel.numbers used by combparse.

    Provides type safety without requiring full Babel type stubs.
    """

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale decimal separator."""
        ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale digit grouping separator."""
        ...

    def get_plus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale plus sign."""
        ...

    def get_minus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale minus sign."""
        ...

    def get_exponential_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale exponent marker."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install combparse[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
