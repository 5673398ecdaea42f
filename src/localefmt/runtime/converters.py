"""Numeral converters keyed by specifier type.

Each converter maps a non-negative magnitude (or NaN) and an optional
precision to the digit string for one notation. Sign, grouping, symbols,
the locale decimal marker and padding are applied afterwards by the renderer.

    b  binary                  g  significant digits (toPrecision)
    c  character from code     e  exponential (toExponential)
    d  default converter       f  fixed point (toFixed)
    o  octal                   %  percentage, fixed point
    x  hex, lowercase          p  percentage, rounded to significant digits
    X  hex, uppercase          r  rounded to significant digits, positional
                               s  SI-prefixed
    (unset or unknown letter)  default converter

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias, assert_never

from localefmt.constants import (
    EXPONENT_PLAIN_MAX,
    EXPONENT_PLAIN_MIN,
    MAX_FIXED_PRECISION,
    MIN_FIXED_PRECISION,
    MIN_SIGNIFICANT_PRECISION,
    SI_MAX_EXPONENT,
    SI_MIN_EXPONENT,
    SI_PREFIXES,
)
from localefmt.enums import NumeralType

from .numerals import (
    decompose,
    format_exponential,
    format_plain,
    from_char_code,
    to_exponential,
    to_fixed,
    to_precision,
    to_radix,
    to_string,
)

__all__ = [
    "Converter",
    "format_default",
    "format_rounded",
    "format_rounded_percentage",
    "format_si",
    "get_converter",
    "si_prefix_symbol",
]

Converter: TypeAlias = Callable[[float, int | None], str]


def format_default(x: float, precision: int | None) -> str:
    """Plain decimal for unset, unknown and "d" types.

    With a precision, renders that many significant digits and drops
    insignificant trailing fraction zeros; without one, renders the
    shortest round-trip form.

    Examples:
        >>> format_default(1.5, 4)
        '1.5'
        >>> format_default(1234.5, 2)
        '1.2e+3'
        >>> format_default(1.0e21, None)
        '1e+21'
    """
    if precision is None:
        return to_string(x)
    text = to_precision(x, max(MIN_SIGNIFICANT_PRECISION, precision))
    mantissa, marker, exponent = text.partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return mantissa + marker + exponent


def format_rounded(x: float, precision: int | None) -> str:
    """Round to significant digits, then render positionally.

    Exponential notation is used only when the decimal exponent of the
    rounded value falls outside [-6, 20], the same crossover as the
    shortest-form conversion.

    Examples:
        >>> format_rounded(1234.5, 2)
        '1200'
        >>> format_rounded(0.000001234, 3)
        '0.00000123'
        >>> format_rounded(0.0000001234, 3)
        '1.23e-7'
    """
    decomposed = decompose(x, precision)
    if decomposed is None:
        return to_string(x)
    digits, exponent = decomposed
    if EXPONENT_PLAIN_MIN <= exponent <= EXPONENT_PLAIN_MAX:
        return format_plain(digits, exponent)
    return format_exponential(digits, exponent)


def format_rounded_percentage(x: float, precision: int | None) -> str:
    """Multiply by 100, round to significant digits, render fixed point.

    Examples:
        >>> format_rounded_percentage(0.123456, 3)
        '12.3'
        >>> format_rounded_percentage(0.99996, 3)
        '100'
    """
    scaled = x * 100
    decomposed = decompose(scaled, precision)
    if decomposed is None:
        return to_string(scaled)
    digits, exponent = decomposed
    fraction_digits = max(MIN_FIXED_PRECISION, min(MAX_FIXED_PRECISION, len(digits) - 1 - exponent))
    return to_fixed(scaled, fraction_digits)


def si_prefix_symbol(exponent: int) -> str:
    """SI symbol for a multiple of 3 in [-24, 24].

    Examples:
        >>> si_prefix_symbol(3), si_prefix_symbol(-6), si_prefix_symbol(0)
        ('k', 'µ', '')
    """
    return SI_PREFIXES[exponent // 3 + len(SI_PREFIXES) // 2]


def format_si(x: float, precision: int | None) -> str:
    """Scale by the power of 1000 at or below the value and append its SI symbol.

    Values whose power of 1000 lies outside 10^-24 .. 10^24 are rendered
    in exponential notation without a symbol.

    Examples:
        >>> format_si(1500.0, 3)
        '1.50k'
        >>> format_si(0.000042, None)
        '42µ'
        >>> format_si(999.5, 3)
        '1.00k'
        >>> format_si(1e27, 2)
        '1.0e+27'
    """
    decomposed = decompose(x, precision)
    if decomposed is None:
        return to_string(x)
    digits, exponent = decomposed
    prefix_exponent = 3 * (exponent // 3)
    if not SI_MIN_EXPONENT <= prefix_exponent <= SI_MAX_EXPONENT:
        return format_exponential(digits, exponent)
    return format_plain(digits, exponent - prefix_exponent) + si_prefix_symbol(prefix_exponent)


def _binary(x: float, _precision: int | None) -> str:
    return to_radix(x, 2)


def _character(x: float, _precision: int | None) -> str:
    return from_char_code(x)


def _octal(x: float, _precision: int | None) -> str:
    return to_radix(x, 8)


def _hex(x: float, _precision: int | None) -> str:
    return to_radix(x, 16)


def _hex_upper(x: float, _precision: int | None) -> str:
    return to_radix(x, 16).upper()


def _percent(x: float, precision: int | None) -> str:
    return to_fixed(x * 100, precision)


def get_converter(numeral_type: NumeralType | None) -> Converter:
    """Select the converter for a numeral type (None selects the default)."""
    match numeral_type:
        case NumeralType.BINARY:
            return _binary
        case NumeralType.CHARACTER:
            return _character
        case NumeralType.DECIMAL:
            return format_default
        case NumeralType.OCTAL:
            return _octal
        case NumeralType.HEX:
            return _hex
        case NumeralType.HEX_UPPER:
            return _hex_upper
        case NumeralType.GENERAL:
            return to_precision
        case NumeralType.EXPONENT:
            return to_exponential
        case NumeralType.FIXED:
            return to_fixed
        case NumeralType.PERCENT:
            return _percent
        case NumeralType.ROUNDED_PERCENT:
            return format_rounded_percentage
        case NumeralType.ROUNDED:
            return format_rounded
        case NumeralType.SI:
            return format_si
        case None:
            return format_default
        case _ as unreachable:
            assert_never(unreachable)
