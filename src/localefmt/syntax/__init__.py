"""Format specifier syntax.

Parses the specifier mini-language into immutable FormatSpecifier objects.
Depends only on the core package.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .specifier import FormatSpecifier, parse_specifier, validate_specifier

__all__ = ["Cursor", "FormatSpecifier", "parse_specifier", "validate_specifier"]
