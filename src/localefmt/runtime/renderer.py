"""Value rendering: specifier + locale -> reusable renderer.

build_renderer() does all per-specifier work once (symbol resolution,
converter selection, grouping setup) and returns a closure that renders
individual values. Renderers hold no mutable state and can be shared
freely between threads.

Rendering never raises. Non-numeric input becomes NaN and renders however
the selected notation renders NaN; integer types return "" for values with
a fractional part.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from localefmt.enums import Align, NumeralType, Sign, Symbol

from .converters import get_converter
from .grouping import create_grouper

if TYPE_CHECKING:
    from localefmt.syntax.specifier import FormatSpecifier

    from .locale_context import LocaleDefinition

__all__ = ["Renderer", "build_renderer", "coerce_number"]

Renderer: TypeAlias = Callable[[object], str]

_PERCENT_TYPES = frozenset({NumeralType.PERCENT, NumeralType.ROUNDED_PERCENT})


# ECMAScript WhiteSpace and LineTerminator code points trimmed from strings.
_STRING_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# StrDecimalLiteral: ASCII digits only, no underscores, "Infinity" as the
# sole non-finite spelling.
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

# NonDecimalIntegerLiteral: unsigned, prefix letter in either case.
_NON_DECIMAL_LITERAL = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def _string_to_number(text: str) -> float:
    text = text.strip(_STRING_WHITESPACE)
    if not text:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    if (matched := _NON_DECIMAL_LITERAL.fullmatch(text)) is not None:
        literal = matched.group(1)
        integer = int(literal[1:], _RADIX_BASES[literal[0].lower()])
        try:
            return float(integer)
        except OverflowError:
            return math.inf
    return math.nan


def coerce_number(value: object) -> float:
    """Convert any input to a float the way unary plus does in ECMAScript.

    Numbers (int, float, Decimal, Fraction, bool) convert directly; integers
    too large for a double become infinities. Strings follow the
    StringNumericLiteral grammar: surrounding whitespace is ignored, the
    blank string means 0, "0x"/"0o"/"0b" prefixes select a radix, and
    "Infinity" is the only non-finite spelling. Python-only spellings such
    as "1_000", "inf" and "nan" are NaN, as is everything else.

    Examples:
        >>> coerce_number(" 42 ")
        42.0
        >>> coerce_number("")
        0.0
        >>> coerce_number("0x10")
        16.0
        >>> coerce_number("1_000")
        nan
        >>> coerce_number(None)
        nan
        >>> coerce_number(10**400)
        inf
    """
    if isinstance(value, str):
        return _string_to_number(value)
    try:
        return float(value)  # type: ignore[arg-type]
    except OverflowError:
        return math.inf if value > 0 else -math.inf  # type: ignore[operator]
    except (TypeError, ValueError):
        return math.nan


def _is_negative(number: float) -> bool:
    # -0.0 < 0 is False; the sign bit still marks it negative.
    return number < 0 or (number == 0 and math.copysign(1.0, number) < 0)


def build_renderer(
    spec: FormatSpecifier,
    locale: LocaleDefinition,
    *,
    scale_symbol: str = "",
) -> Renderer:
    """Build a renderer for one specifier in one locale.

    Args:
        spec: Parsed specifier
        locale: Decimal marker, separator, grouping rule and currency pair
        scale_symbol: Text placed right after the digits and before the
            suffix (SI or currency magnitude symbol); counts towards width

    Returns:
        Function rendering a single value to its display string

    Examples:
        >>> from localefmt.syntax.specifier import parse_specifier
        >>> from localefmt.runtime.locale_context import LocaleDefinition
        >>> render = build_renderer(parse_specifier("$,.2f"), LocaleDefinition())
        >>> render(-1234.5)
        '-$1,234.50'
        >>> render = build_renderer(parse_specifier("010,d"), LocaleDefinition())
        >>> render(1234)
        '00,001,234'
    """
    numeral_type = spec.numeral_type

    if spec.symbol is Symbol.CURRENCY:
        prefix, suffix = locale.currency
    else:
        prefix = ""
        if (
            spec.symbol is Symbol.RADIX_PREFIX
            and numeral_type is not None
            and numeral_type.has_radix_prefix
        ):
            prefix = "0" + numeral_type.value.lower()
        suffix = "%" if numeral_type in _PERCENT_TYPES else ""

    is_integer = numeral_type is not None and numeral_type.is_integer
    # Unset and unrecognized types go through the default converter,
    # which may produce exponential notation.
    may_exponent = numeral_type is None or numeral_type.may_exponent

    convert = get_converter(numeral_type)
    group = create_grouper(locale.grouping, locale.thousands)
    decimal = locale.decimal
    fill = spec.fill
    align = spec.align
    sign = spec.sign
    width = spec.width or 0
    precision = spec.precision
    zero_pad = spec.zero_pad
    grouped = spec.grouped
    zero_grouped = zero_pad and grouped

    def render(value: object) -> str:
        number = coerce_number(value)

        if is_integer and math.isfinite(number) and number % 1:
            return ""

        closing = ""
        if _is_negative(number):
            number = -number
            if sign is Sign.PARENTHESES:
                sign_text, closing = "(", ")"
            else:
                sign_text = "-"
        elif sign is Sign.MINUS or sign is Sign.PARENTHESES:
            sign_text = ""
        else:
            sign_text = sign.value

        text = convert(number, precision)

        # Split into integer part and decimal part (exponent stays with the latter).
        tail = scale_symbol + suffix + closing
        point = text.rfind(".")
        if point < 0:
            marker = text.rfind("e") if may_exponent else -1
            if marker < 0:
                integer, fraction = text, tail
            else:
                integer, fraction = text[:marker], text[marker:] + tail
        else:
            integer, fraction = text[:point], decimal + text[point + 1 :] + tail

        # Without zero padding, group before padding.
        if grouped and not zero_pad:
            integer = group(integer, math.inf)

        length = (
            (0 if zero_grouped else len(sign_text)) + len(prefix) + len(integer) + len(fraction)
        )
        padding = fill * (width - length) if length < width else ""

        # With zero padding, the padding zeros are grouped along with the digits.
        if zero_grouped:
            integer = group(padding + integer, width - len(fraction) if padding else math.inf)

        sign_text += prefix
        body = integer + fraction

        match align:
            case Align.LEFT:
                return sign_text + body + padding
            case Align.CENTER:
                half = len(padding) // 2
                return padding[:half] + sign_text + body + padding[half:]
            case Align.SIGN_AWARE:
                return sign_text + (body if zero_grouped else padding + body)
            case _:
                return padding + sign_text + body

    return render
