"""localefmt - Locale-aware number formatting from a compact specifier language.

A specifier such as "$,.2f" or "08.3s" describes fill, alignment, sign,
currency or radix symbols, zero padding, width, digit grouping, precision
and notation. Parsing it once yields a renderer that formats any number of
values in a given locale.

Public API:
    format - Build a renderer in the default locale
    format_prefix - Renderer with an SI prefix fixed by a representative value
    format_currency_prefix - Currency renderer with a K/M/B/T abbreviation
    install_default_locale - Replace the process-wide default locale
    format_locale - Build a FormatLocale without touching the default
    FormatLocale - Formatting context bound to one locale definition
    LocaleDefinition - Decimal marker, group separator, grouping, currency
    FormatSpecifier - Parsed specifier
    parse_specifier - Parse a specifier (never raises)
    validate_specifier - Parse a specifier, rejecting unconsumed characters

Exceptions:
    LocaleFormatError - Base exception class
    SpecifierSyntaxError - Raised by validate_specifier
    BabelImportError - CLDR locale requested without Babel installed

Example:
    >>> import localefmt
    >>> localefmt.format(",.2f")(1234.5)
    '1,234.50'
    >>> localefmt.format("+.2%")(0.1234)
    '+12.34%'
"""

from .core import BabelImportError, LocaleFormatError, SpecifierSyntaxError
from .default_locale import (
    format,  # noqa: A004  # pylint: disable=redefined-builtin
    format_currency_prefix,
    format_locale,
    format_prefix,
    get_default_locale,
    install_default_locale,
)
from .enums import Align, NumeralType, Sign, Symbol
from .runtime import FormatLocale, LocaleDefinition, Renderer
from .syntax import FormatSpecifier, parse_specifier, validate_specifier

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localefmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Align",
    "BabelImportError",
    "FormatLocale",
    "FormatSpecifier",
    "LocaleDefinition",
    "LocaleFormatError",
    "NumeralType",
    "Renderer",
    "Sign",
    "SpecifierSyntaxError",
    "Symbol",
    "__version__",
    "format",
    "format_currency_prefix",
    "format_locale",
    "format_prefix",
    "get_default_locale",
    "install_default_locale",
    "parse_specifier",
    "validate_specifier",
]
