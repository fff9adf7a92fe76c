"""Locale utilities for BCP-47 to POSIX conversion.

Used by the locale-aware grammars; the combinator core never touches locales.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from combparse.core.babel_compat import get_locale_class, require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    return get_locale_class().parse(normalize_locale(locale_code))
