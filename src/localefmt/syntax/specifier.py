"""Format specifier mini-language parser.

Grammar (each unit optional, order fixed):

    [[fill]align][sign][symbol][0][width][,][.precision][type]

    fill       any single character, only when followed by an align character
    align      "<" left, ">" right, "^" center, "=" sign-aware
    sign       "-" minus only, "+" always, " " space, "(" parentheses
    symbol     "$" currency, "#" radix prefix (0b, 0o, 0x)
    0          zero padding (implies fill "0" and sign-aware alignment)
    width      one or more digits, saturating at MAX_WIDTH
    ,          digit grouping
    .precision dot, optional "-", one or more digits
    type       one ASCII letter or "%"

Parsing is total: scanning stops at the first character that fits no
remaining unit and the rest of the specifier is ignored. Use
validate_specifier() to reject such input instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from localefmt.constants import (
    MAX_FIXED_PRECISION,
    MAX_SIGNIFICANT_PRECISION,
    MAX_WIDTH,
    MIN_FIXED_PRECISION,
    MIN_SIGNIFICANT_PRECISION,
    SPECIFIER_CACHE_SIZE,
)
from localefmt.core.errors import SpecifierSyntaxError
from localefmt.enums import Align, NumeralType, Sign, Symbol

from .cursor import Cursor

__all__ = ["FormatSpecifier", "parse_specifier", "validate_specifier"]

logger = logging.getLogger(__name__)

_ALIGN_CHARS = "<>=^"
_SIGN_CHARS = "+- ("
_SYMBOL_CHARS = "$#"

# "n" formats like ",g"
_GROUPED_GENERAL_ALIAS = "n"


@dataclass(frozen=True, slots=True)
class FormatSpecifier:
    """Parsed, normalized format specifier.

    Instances are produced by parse_specifier() and are immutable; one
    instance serves every value rendered with the same specifier.

    Attributes:
        fill: Pad character
        align: Padding placement
        sign: Sign rendering mode
        symbol: Symbol pair placed around the digits
        zero_pad: Pad with "0" between sign/prefix and digits
        width: Minimum total output length, None if unset
        grouped: Insert locale group separators
        precision: Significant or fraction digits (clamped), None if unset
        type: Type letter as written, None if unset. Letters outside
            NumeralType are kept and rendered with the default converter.

    Example:
        >>> spec = parse_specifier("$,.2f")
        >>> spec.symbol, spec.grouped, spec.precision, spec.type
        (<Symbol.CURRENCY: '$'>, True, 2, 'f')
        >>> str(spec)
        '$,.2f'
    """

    fill: str = " "
    align: Align = Align.RIGHT
    sign: Sign = Sign.MINUS
    symbol: Symbol = Symbol.NONE
    zero_pad: bool = False
    width: int | None = None
    grouped: bool = False
    precision: int | None = None
    type: str | None = None

    @property
    def numeral_type(self) -> NumeralType | None:
        """NumeralType for the type letter, None if unset or unrecognized."""
        return _lookup_type(self.type)

    def evolve(self, **changes: object) -> FormatSpecifier:
        """Return a copy with fields replaced and normalization reapplied.

        Used by the prefix variants, which force a type or symbol onto a
        user specifier; precision is re-clamped for the new type.

        Example:
            >>> parse_specifier(".21s").evolve(type="f").precision
            20
        """
        fields = {name: getattr(self, name) for name in self.__dataclass_fields__}
        fields.update(changes)
        return _normalize(**fields)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Canonical specifier text; parses back to an equal FormatSpecifier."""
        parts: list[str] = []
        if self.fill != " " or self.align is not Align.RIGHT:
            parts.append(self.fill + self.align)
        if self.sign is not Sign.MINUS:
            parts.append(self.sign)
        parts.append(self.symbol)
        if self.zero_pad:
            parts.append("0")
        if self.width is not None:
            parts.append(str(self.width))
        if self.grouped:
            parts.append(",")
        if self.precision is not None:
            parts.append(f".{self.precision}")
        if self.type is not None:
            parts.append(self.type)
        return "".join(parts)


def _lookup_type(letter: str | None) -> NumeralType | None:
    if letter is None:
        return None
    try:
        return NumeralType(letter)
    except ValueError:
        return None


def _clamp_precision(precision: int, type_: str | None) -> int:
    numeral_type = _lookup_type(type_)
    if numeral_type is not None and numeral_type.is_significant:
        return max(MIN_SIGNIFICANT_PRECISION, min(MAX_SIGNIFICANT_PRECISION, precision))
    return max(MIN_FIXED_PRECISION, min(MAX_FIXED_PRECISION, precision))


def _normalize(
    *,
    fill: str,
    align: Align,
    sign: Sign,
    symbol: Symbol,
    zero_pad: bool,
    width: int | None,
    grouped: bool,
    precision: int | None,
    type: str | None,  # noqa: A002  # pylint: disable=redefined-builtin
) -> FormatSpecifier:
    if type == _GROUPED_GENERAL_ALIAS:
        grouped = True
        type = NumeralType.GENERAL.value

    # Zero fill: padding goes after the sign and before the digits.
    if zero_pad or (fill == "0" and align is Align.SIGN_AWARE):
        zero_pad = True
        fill = "0"
        align = Align.SIGN_AWARE

    if precision is not None:
        precision = _clamp_precision(precision, type)

    return FormatSpecifier(
        fill=fill,
        align=align,
        sign=sign,
        symbol=symbol,
        zero_pad=zero_pad,
        width=width,
        grouped=grouped,
        precision=precision,
        type=type,
    )


def _saturating_int(digits: str, limit: int) -> int:
    """Convert a run of ASCII digits to int, saturating at limit.

    Runs with more significant digits than limit itself are never passed to
    int(), so arbitrarily long input stays below the integer string limit.
    """
    significant = digits.lstrip("0")
    if len(significant) > len(str(limit)):
        return limit
    return min(int(significant or "0"), limit)


def _is_type_char(char: str) -> bool:
    return char == "%" or (char.isascii() and char.isalpha())


@functools.lru_cache(maxsize=SPECIFIER_CACHE_SIZE)
def _scan(specifier: str) -> tuple[FormatSpecifier, int]:
    """Scan specifier left to right. Memoized (pure, immutable result).

    Returns:
        (normalized specifier, offset of the first unconsumed character)
    """
    cursor = Cursor(specifier, 0)

    fill = " "
    align = Align.RIGHT
    second = cursor.peek(1)
    if second is not None and second in _ALIGN_CHARS:
        fill = cursor.current
        align = Align(second)
        cursor = cursor.advance(2)
    elif (matched := cursor.expect_any(_ALIGN_CHARS)) is not None:
        align = Align(matched[0])
        cursor = matched[1]

    sign = Sign.MINUS
    if (matched := cursor.expect_any(_SIGN_CHARS)) is not None:
        sign = Sign(matched[0])
        cursor = matched[1]

    symbol = Symbol.NONE
    if (matched := cursor.expect_any(_SYMBOL_CHARS)) is not None:
        symbol = Symbol(matched[0])
        cursor = matched[1]

    zero_pad = False
    if (advanced := cursor.expect("0")) is not None:
        zero_pad = True
        cursor = advanced

    width: int | None = None
    end = cursor.skip_digits()
    if end.pos > cursor.pos:
        width = _saturating_int(cursor.slice_to(end.pos), MAX_WIDTH)
        cursor = end

    grouped = False
    if (advanced := cursor.expect(",")) is not None:
        grouped = True
        cursor = advanced

    precision: int | None = None
    if (dot := cursor.expect(".")) is not None:
        minus = dot.expect("-")
        digits_start = minus if minus is not None else dot
        end = digits_start.skip_digits()
        if end.pos > digits_start.pos:
            # Saturating at the largest bound leaves clamping unchanged.
            precision = _saturating_int(
                digits_start.slice_to(end.pos), MAX_SIGNIFICANT_PRECISION
            )
            if minus is not None:
                precision = -precision
            cursor = end

    type_: str | None = None
    if not cursor.is_eof and _is_type_char(cursor.current):
        type_ = cursor.current
        cursor = cursor.advance()

    spec = _normalize(
        fill=fill,
        align=align,
        sign=sign,
        symbol=symbol,
        zero_pad=zero_pad,
        width=width,
        grouped=grouped,
        precision=precision,
        type=type_,
    )
    return spec, cursor.pos


def parse_specifier(specifier: str) -> FormatSpecifier:
    """Parse a format specifier. Never raises.

    Unrecognized trailing characters are ignored; input that matches no
    unit at all yields the all-default specifier.

    Thread-safe. Scanning is memoized per distinct text (the returned
    object is immutable); ignored trailing text is logged on every call.

    Args:
        specifier: Specifier text, e.g. "$,.2f" or "08.2f"

    Returns:
        Normalized FormatSpecifier

    Examples:
        >>> spec = parse_specifier("08.2f")
        >>> spec.fill, spec.align, spec.zero_pad, spec.width, spec.precision
        ('0', <Align.SIGN_AWARE: '='>, True, 8, 2)
        >>> parse_specifier(".3n").grouped
        True
        >>> parse_specifier("{garbage}") == FormatSpecifier()
        True
    """
    spec, end = _scan(specifier)
    if end < len(specifier):
        logger.debug(
            "Ignoring %r at position %d of format specifier %r",
            specifier[end:],
            end,
            specifier,
        )
    return spec


def validate_specifier(specifier: str) -> FormatSpecifier:
    """Parse a format specifier, rejecting characters the grammar leaves unconsumed.

    Args:
        specifier: Specifier text

    Returns:
        Normalized FormatSpecifier

    Raises:
        SpecifierSyntaxError: If any character was not consumed by the grammar

    Examples:
        >>> validate_specifier(",.2f").precision
        2
        >>> validate_specifier(".2fx")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        SpecifierSyntaxError: Invalid format specifier '.2fx': unexpected 'x' at position 3
    """
    spec, end = _scan(specifier)
    if end < len(specifier):
        raise SpecifierSyntaxError(specifier, end)
    return spec
