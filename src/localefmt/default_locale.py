"""Process-wide default locale.

The default is a FormatLocale replaced wholesale by install_default_locale();
it is never mutated in place. Module-level format(), format_prefix() and
format_currency_prefix() read the current default at call time, so
renderers built before a swap keep the locale they were built with.

At import the default is: decimal ".", thousands ",", grouping (3,),
currency ("$", "").

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import RLock

from localefmt.runtime.locale_context import FormatLocale, LocaleDefinition
from localefmt.runtime.renderer import Renderer
from localefmt.syntax.specifier import FormatSpecifier

__all__ = [
    "format",
    "format_currency_prefix",
    "format_locale",
    "format_prefix",
    "get_default_locale",
    "install_default_locale",
]

logger = logging.getLogger(__name__)

_lock = RLock()
_default = FormatLocale()


def format_locale(
    definition: LocaleDefinition | Mapping[str, object] | None = None,
) -> FormatLocale:
    """Build a formatting context without touching the default.

    Args:
        definition: LocaleDefinition, or a mapping with keys decimal,
            thousands, grouping, currency (missing keys use defaults);
            None for the default definition

    Example:
        >>> fmt = format_locale({"decimal": ",", "thousands": "\\xa0"})
        >>> fmt.format(",.1f")(1234567.89)
        '1\\xa0234\\xa0567,9'
    """
    if definition is None:
        return FormatLocale()
    if not isinstance(definition, LocaleDefinition):
        definition = LocaleDefinition.from_mapping(definition)
    return FormatLocale(definition)


def install_default_locale(
    definition: LocaleDefinition | Mapping[str, object] | FormatLocale | None = None,
) -> FormatLocale:
    """Replace the process-wide default locale.

    Renderers already built keep their locale; only later calls to the
    module-level format functions see the new default.

    Args:
        definition: New locale (see format_locale); a FormatLocale is
            installed as is

    Returns:
        The installed FormatLocale

    Example:
        >>> previous = get_default_locale()
        >>> _ = install_default_locale({"currency": ("", " €")})
        >>> format("$.2f")(3.5)
        '3.50 €'
        >>> _ = install_default_locale(previous)
    """
    global _default  # noqa: PLW0603  # pylint: disable=global-statement
    locale = definition if isinstance(definition, FormatLocale) else format_locale(definition)
    with _lock:
        _default = locale
    logger.debug("Installed default locale %r", locale.definition)
    return locale


def get_default_locale() -> FormatLocale:
    """Get the current process-wide default FormatLocale."""
    with _lock:
        return _default


def format(specifier: str | FormatSpecifier) -> Renderer:  # noqa: A001  # pylint: disable=redefined-builtin
    """Build a renderer in the current default locale.

    Examples:
        >>> format(",.2f")(1234.5)
        '1,234.50'
        >>> format("08.2f")(-3.5)
        '-0003.50'
        >>> format("d")(3.5)
        ''
    """
    return get_default_locale().format(specifier)


def format_prefix(specifier: str | FormatSpecifier, value: object) -> Renderer:
    """Build an SI-prefixed renderer in the current default locale."""
    return get_default_locale().format_prefix(specifier, value)


def format_currency_prefix(specifier: str | FormatSpecifier, value: object) -> Renderer:
    """Build an abbreviated currency renderer in the current default locale."""
    return get_default_locale().format_currency_prefix(specifier, value)
