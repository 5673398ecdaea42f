"""Number-to-string primitives with ECMAScript Number semantics.

The specifier language is defined in terms of toString, toFixed, toExponential
and toPrecision. Python's float formatting differs from them in two ways that
show up in output: ties round half-even on the binary value instead of half-up,
and str()/repr() switch to exponential notation at different magnitudes. The
functions here reproduce the ECMAScript behavior exactly:

    - Rounding is half-up on the exact binary value of the double
      (Decimal(float) is exact, so 1.005 rounds to "1.00": it is 1.00499...).
    - Shortest round-trip digits come from repr(), which uses the same
      shortest-representation algorithm.
    - Non-finite values render as "NaN", "Infinity", "-Infinity".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from localefmt.constants import EXPONENT_PLAIN_MAX, EXPONENT_PLAIN_MIN, TO_FIXED_LIMIT

__all__ = [
    "decompose",
    "format_exponential",
    "format_plain",
    "from_char_code",
    "to_exponential",
    "to_fixed",
    "to_precision",
    "to_radix",
    "to_string",
]

# Enough digits for any double below TO_FIXED_LIMIT plus 20 fraction digits.
_FIXED_CONTEXT_PRECISION = 64

_RADIX_FORMATS = {2: "b", 8: "o", 16: "x"}


def _sign(x: float) -> str:
    return "-" if x < 0 else ""


def decompose(x: float, precision: int | None = None) -> tuple[str, int] | None:
    """Split |x| into significant digits and the decimal exponent of the first digit.

    Args:
        x: Value to decompose (sign is ignored)
        precision: Number of significant digits to round to (half-up), or
            None for the shortest digits that round-trip

    Returns:
        (digits, exponent) such that |x| ~= 0.d1d2d3... * 10^(exponent + 1),
        or None if x is NaN or infinite. Rounded digits are zero-padded to
        exactly `precision` characters.

    Examples:
        >>> decompose(1234.5)
        ('12345', 3)
        >>> decompose(1234.5, 2)
        ('12', 3)
        >>> decompose(0.000996, 2)
        ('10', -3)
        >>> decompose(0.0, 3)
        ('000', 0)
    """
    if not math.isfinite(x):
        return None
    if x == 0:
        return "0" * (precision or 1), 0

    if precision is None:
        value = Decimal(repr(abs(x))).normalize()
        digits = "".join(map(str, value.as_tuple().digits))
        return digits, value.adjusted()

    with localcontext() as ctx:
        ctx.prec = precision
        ctx.rounding = ROUND_HALF_UP
        value = +Decimal(abs(x))
    digits = "".join(map(str, value.as_tuple().digits))
    return digits.ljust(precision, "0"), value.adjusted()


def format_plain(digits: str, exponent: int) -> str:
    """Lay out decomposed digits in positional notation.

    Examples:
        >>> format_plain("12345", 1)
        '12.345'
        >>> format_plain("12", 4)
        '12000'
        >>> format_plain("5", -3)
        '0.005'
    """
    if exponent < 0:
        return "0." + "0" * (-exponent - 1) + digits
    if len(digits) > exponent + 1:
        return digits[: exponent + 1] + "." + digits[exponent + 1 :]
    return digits + "0" * (exponent + 1 - len(digits))


def format_exponential(digits: str, exponent: int) -> str:
    """Lay out decomposed digits in exponential notation.

    Examples:
        >>> format_exponential("15", 3)
        '1.5e+3'
        >>> format_exponential("1", -7)
        '1e-7'
    """
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def to_string(x: float) -> str:
    """Shortest round-trip representation (Number.prototype.toString).

    Plain notation for decimal exponents in [-6, 20], exponential otherwise.

    Examples:
        >>> to_string(1234.5)
        '1234.5'
        >>> to_string(1e21)
        '1e+21'
        >>> to_string(1e-7)
        '1e-7'
        >>> to_string(0.000001)
        '0.000001'
        >>> to_string(float("nan"))
        'NaN'
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    decomposed = decompose(x)
    assert decomposed is not None  # finite
    digits, exponent = decomposed
    if EXPONENT_PLAIN_MIN <= exponent <= EXPONENT_PLAIN_MAX:
        return _sign(x) + format_plain(digits, exponent)
    return _sign(x) + format_exponential(digits, exponent)


def to_fixed(x: float, fraction_digits: int | None = None) -> str:
    """Fixed-point notation (Number.prototype.toFixed).

    Args:
        x: Value to format
        fraction_digits: Digits after the decimal point (None means 0)

    Returns:
        Fixed-point string. Magnitudes >= 1e21 and non-finite values use
        to_string() instead.

    Examples:
        >>> to_fixed(1234.5, 2)
        '1234.50'
        >>> to_fixed(2.5)
        '3'
        >>> to_fixed(1.005, 2)  # 1.00499999999999989...
        '1.00'
        >>> to_fixed(1e21, 2)
        '1e+21'
    """
    if not math.isfinite(x) or abs(x) >= TO_FIXED_LIMIT:
        return to_string(x)
    with localcontext() as ctx:
        ctx.prec = _FIXED_CONTEXT_PRECISION
        ctx.rounding = ROUND_HALF_UP
        value = Decimal(abs(x)).quantize(Decimal(1).scaleb(-(fraction_digits or 0)))
    return _sign(x) + format(value, "f")


def to_exponential(x: float, fraction_digits: int | None = None) -> str:
    """Exponential notation (Number.prototype.toExponential).

    Args:
        x: Value to format
        fraction_digits: Mantissa digits after the point, None for as many
            as needed to round-trip

    Examples:
        >>> to_exponential(1234.5, 2)
        '1.23e+3'
        >>> to_exponential(1234.5)
        '1.2345e+3'
        >>> to_exponential(0.0, 1)
        '0.0e+0'
    """
    precision = None if fraction_digits is None else fraction_digits + 1
    decomposed = decompose(x, precision)
    if decomposed is None:
        return to_string(x)
    return _sign(x) + format_exponential(*decomposed)


def to_precision(x: float, precision: int | None = None) -> str:
    """Significant-digit notation (Number.prototype.toPrecision).

    Exponential notation is used when the decimal exponent is below -6 or
    not smaller than the precision.

    Examples:
        >>> to_precision(1234.5, 6)
        '1234.50'
        >>> to_precision(1234.5, 2)
        '1.2e+3'
        >>> to_precision(0.00012345, 3)
        '0.000123'
        >>> to_precision(1234.5)
        '1234.5'
    """
    if precision is None:
        return to_string(x)
    decomposed = decompose(x, precision)
    if decomposed is None:
        return to_string(x)
    digits, exponent = decomposed
    if exponent < EXPONENT_PLAIN_MIN or exponent >= precision:
        return _sign(x) + format_exponential(digits, exponent)
    return _sign(x) + format_plain(digits, exponent)


def to_radix(x: float, radix: int) -> str:
    """Integer digits in base 2, 8 or 16 (Number.prototype.toString(radix)).

    Fractional parts are truncated; callers only pass integral values.

    Examples:
        >>> to_radix(255.0, 16)
        'ff'
        >>> to_radix(-5.0, 2)
        '-101'
    """
    if not math.isfinite(x):
        return to_string(x)
    return _sign(x) + format(abs(int(x)), _RADIX_FORMATS[radix])


def from_char_code(x: float) -> str:
    """Single character from a UTF-16 code unit (String.fromCharCode).

    The value is truncated and reduced modulo 2**16; non-finite values map
    to U+0000.

    Examples:
        >>> from_char_code(9731.0)
        '☃'
        >>> from_char_code(65601.0)
        'A'
    """
    if not math.isfinite(x):
        return "\x00"
    return chr(int(x) % 0x10000)
