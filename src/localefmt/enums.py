"""Enumerations for localefmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
Each member's value is the character it is written as in a format specifier,
so str(Align.LEFT) == "<" and specifiers serialize by concatenation.

Python 3.13+.
"""

from enum import StrEnum


class Align(StrEnum):
    """Placement of padding relative to the rendered value."""

    LEFT = "<"
    """Value first, padding after: 42____"""

    RIGHT = ">"
    """Padding first, value after: ____42 (default)"""

    CENTER = "^"
    """Padding split around the value, the smaller half on the left."""

    SIGN_AWARE = "="
    """Padding between the sign/prefix and the digits: -__42"""


class Sign(StrEnum):
    """How the sign of the value is rendered."""

    MINUS = "-"
    """Minus for negatives, nothing for positives (default)."""

    ALWAYS = "+"
    """Minus for negatives, plus for positives."""

    SPACE = " "
    """Minus for negatives, a space for positives."""

    PARENTHESES = "("
    """Negatives wrapped in parentheses, nothing for positives."""


class Symbol(StrEnum):
    """Symbol pair placed around the digits."""

    NONE = ""
    """No symbol."""

    CURRENCY = "$"
    """Locale currency prefix and suffix."""

    RADIX_PREFIX = "#"
    """0b, 0o or 0x for binary, octal and hexadecimal types."""


class NumeralType(StrEnum):
    """Numeral rendering mode selected by the specifier type letter."""

    BINARY = "b"
    CHARACTER = "c"
    DECIMAL = "d"
    OCTAL = "o"
    HEX = "x"
    HEX_UPPER = "X"
    GENERAL = "g"
    EXPONENT = "e"
    FIXED = "f"
    PERCENT = "%"
    ROUNDED_PERCENT = "p"
    ROUNDED = "r"
    SI = "s"

    @property
    def is_integer(self) -> bool:
        """Type only renders integral values."""
        return self in _INTEGER_TYPES

    @property
    def is_significant(self) -> bool:
        """Precision counts significant digits rather than fraction digits."""
        return self in _SIGNIFICANT_TYPES

    @property
    def may_exponent(self) -> bool:
        """Conversion can produce exponential notation."""
        return self not in _PLAIN_TYPES

    @property
    def has_radix_prefix(self) -> bool:
        """Type takes a 0b/0o/0x prefix under the # symbol."""
        return self in _RADIX_TYPES


_RADIX_TYPES = frozenset({
    NumeralType.BINARY, NumeralType.OCTAL, NumeralType.HEX, NumeralType.HEX_UPPER,
})
_INTEGER_TYPES = _RADIX_TYPES | {NumeralType.CHARACTER, NumeralType.DECIMAL}
_SIGNIFICANT_TYPES = frozenset({
    NumeralType.GENERAL, NumeralType.ROUNDED_PERCENT, NumeralType.ROUNDED, NumeralType.SI,
})
_PLAIN_TYPES = _RADIX_TYPES | {
    NumeralType.CHARACTER, NumeralType.FIXED, NumeralType.PERCENT, NumeralType.ROUNDED_PERCENT,
}


__all__ = [
    "Align",
    "NumeralType",
    "Sign",
    "Symbol",
]
