"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code normalization used for Babel lookups and cache keys.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Surrounding whitespace and encoding suffixes (de_DE.UTF-8) are dropped.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        POSIX-formatted locale code

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().split(".")[0].replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
