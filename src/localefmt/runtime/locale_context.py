"""Locale definitions and formatting contexts.

Architecture:
    - LocaleDefinition: Immutable locale data (decimal marker, group separator,
      grouping rule, currency prefix/suffix)
    - FormatLocale: Immutable formatting context bound to one LocaleDefinition;
      builds renderers via format(), format_prefix(), format_currency_prefix()
    - Babel-derived contexts are cached per locale code (LRU, RLock-protected)

Design Principles:
    - Explicit over implicit (locale always visible, no hidden global)
    - Immutable by default (frozen dataclasses)
    - Thread-safe (no shared mutable state outside the cache)
    - Locale data either injected directly or taken from CLDR via Babel

Python 3.13+. Babel is optional and only needed for CLDR-derived locales.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from localefmt.constants import (
    CURRENCY_ABBREVIATIONS,
    DEFAULT_CURRENCY,
    DEFAULT_DECIMAL,
    DEFAULT_GROUPING,
    DEFAULT_THOUSANDS,
    FALLBACK_CURRENCY_CODE,
    FALLBACK_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
    SI_PREFIXES,
)
from localefmt.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from localefmt.core.locale_utils import get_babel_locale, normalize_locale
from localefmt.enums import NumeralType, Symbol
from localefmt.syntax.specifier import FormatSpecifier, parse_specifier

from .converters import si_prefix_symbol
from .numerals import decompose
from .renderer import Renderer, build_renderer, coerce_number

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["FormatLocale", "LocaleDefinition"]

logger = logging.getLogger(__name__)

# CLDR patterns give a primary and a secondary group size ("#,##,##0" is 3
# then 2). The grouping rule cycles, so the secondary size is repeated enough
# times to cover every integer part a double renders positionally (21 digits).
_SECONDARY_GROUP_REPEAT = 10

# Babel reports this group size for patterns without a grouping separator.
_BABEL_NO_GROUPING = 1000

_CURRENCY_PLACEHOLDER = "\xa4"


@dataclass(frozen=True, slots=True)
class LocaleDefinition:
    """Locale data consumed by the renderer.

    Attributes:
        decimal: Decimal marker substituted for "."
        thousands: Group separator; empty disables grouping
        grouping: Group sizes from the least significant digit outward,
            cycled; None or empty disables grouping
        currency: (prefix, suffix) placed around currency-formatted values

    Lists are accepted for grouping and currency and stored as tuples.

    Examples:
        >>> LocaleDefinition()
        LocaleDefinition(decimal='.', thousands=',', grouping=(3,), currency=('$', ''))
        >>> LocaleDefinition(decimal=",", thousands=".", currency=["", " €"]).currency
        ('', ' €')
    """

    decimal: str = DEFAULT_DECIMAL
    thousands: str = DEFAULT_THOUSANDS
    grouping: tuple[int, ...] | None = DEFAULT_GROUPING
    currency: tuple[str, str] = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and validate field types.

        Raises:
            ValueError: If a symbol is not a string, a group size is not an
                integer, or currency is not a (prefix, suffix) pair of strings
        """
        if not isinstance(self.decimal, str) or not isinstance(self.thousands, str):
            msg = "decimal and thousands must be strings"
            raise ValueError(msg)

        if self.grouping is not None:
            grouping = tuple(self.grouping)
            for size in grouping:
                if isinstance(size, bool) or not isinstance(size, int):
                    msg = f"grouping sizes must be integers, got {size!r}"
                    raise ValueError(msg)
            object.__setattr__(self, "grouping", grouping)

        currency = tuple(self.currency)
        if len(currency) != 2 or not all(isinstance(part, str) for part in currency):
            msg = f"currency must be a (prefix, suffix) pair of strings, got {self.currency!r}"
            raise ValueError(msg)
        object.__setattr__(self, "currency", currency)

    @classmethod
    def from_mapping(cls, definition: Mapping[str, object]) -> LocaleDefinition:
        """Build from a plain mapping with keys decimal, thousands, grouping, currency.

        Missing keys take the default locale's values; unknown keys are ignored.

        Example:
            >>> LocaleDefinition.from_mapping({"thousands": " ", "grouping": None})
            LocaleDefinition(decimal='.', thousands=' ', grouping=None, currency=('$', ''))
        """
        return cls(
            decimal=definition.get("decimal", DEFAULT_DECIMAL),  # type: ignore[arg-type]
            thousands=definition.get("thousands", DEFAULT_THOUSANDS),  # type: ignore[arg-type]
            grouping=definition.get("grouping", DEFAULT_GROUPING),  # type: ignore[arg-type]
            currency=definition.get("currency", DEFAULT_CURRENCY),  # type: ignore[arg-type]
        )

    @classmethod
    def from_babel_locale(
        cls, babel_locale: Locale, currency: str | None = None
    ) -> LocaleDefinition:
        """Build from a Babel Locale using its CLDR number data.

        Args:
            babel_locale: Parsed Babel locale
            currency: ISO 4217 code; defaults to the territory's current
                currency, or USD when the locale has no territory

        Raises:
            BabelImportError: If Babel is not installed
        """
        numbers = get_babel_numbers()

        pattern = babel_locale.decimal_formats.get(None)
        grouping: tuple[int, ...] | None = DEFAULT_GROUPING
        if pattern is not None:
            grouping = _grouping_from_cldr(*pattern.grouping)

        currency_code = currency or _territory_currency(babel_locale)
        symbol = numbers.get_currency_symbol(currency_code, babel_locale)
        currency_pattern = babel_locale.currency_formats.get("standard")
        if currency_pattern is None:
            currency_pair = (symbol, "")
        else:
            currency_pair = (
                currency_pattern.prefix[0].replace(_CURRENCY_PLACEHOLDER, symbol),
                currency_pattern.suffix[0].replace(_CURRENCY_PLACEHOLDER, symbol),
            )

        return cls(
            decimal=numbers.get_decimal_symbol(babel_locale),
            thousands=numbers.get_group_symbol(babel_locale),
            grouping=grouping,
            currency=currency_pair,
        )

    @classmethod
    def from_babel(cls, locale_code: str, currency: str | None = None) -> LocaleDefinition:
        """Build from CLDR data, falling back to en_US for unknown locales.

        Unknown or malformed locale codes log a warning and use en_US data.
        Use from_babel_or_raise() when silent fallback is not acceptable.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g. 'de-DE')
            currency: ISO 4217 code (see from_babel_locale)

        Raises:
            BabelImportError: If Babel is not installed

        Examples:
            >>> LocaleDefinition.from_babel("de-DE")
            LocaleDefinition(decimal=',', thousands='.', grouping=(3,), currency=('', '\\xa0€'))
        """
        babel_locale, _ = _resolve_babel_locale(locale_code)
        return cls.from_babel_locale(babel_locale, currency)

    @classmethod
    def from_babel_or_raise(
        cls, locale_code: str, currency: str | None = None
    ) -> LocaleDefinition:
        """Build from CLDR data or raise on unknown locales.

        Raises:
            ValueError: If locale code is invalid or unknown
            BabelImportError: If Babel is not installed
        """
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = get_babel_locale(locale_code)
        except unknown_locale_error as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls.from_babel_locale(babel_locale, currency)


def _grouping_from_cldr(primary: int, secondary: int) -> tuple[int, ...] | None:
    if primary >= _BABEL_NO_GROUPING or primary <= 0:
        return None
    if secondary in (primary, _BABEL_NO_GROUPING) or secondary <= 0:
        return (primary,)
    return (primary,) + (secondary,) * _SECONDARY_GROUP_REPEAT


def _territory_currency(babel_locale: Locale) -> str:
    if babel_locale.territory:
        currencies = get_babel_numbers().get_territory_currencies(babel_locale.territory)
        if currencies:
            return str(currencies[0])
    return FALLBACK_CURRENCY_CODE


def _resolve_babel_locale(locale_code: str) -> tuple[Locale, bool]:
    """Parse a locale code, falling back to en_US with a warning.

    Returns:
        (Babel locale, whether the fallback was used)
    """
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(locale_code), False
    except unknown_locale_error as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    return get_babel_locale(FALLBACK_LOCALE), True


def _scale_exponent(value: object, lowest: int, highest: int) -> int:
    """Multiple of 3 at or below the decimal exponent of |value|, clamped to [lowest, highest]."""
    decomposed = decompose(coerce_number(value))
    exponent = 0 if decomposed is None else decomposed[1]
    return max(lowest, min(highest, exponent // 3)) * 3


def _as_specifier(specifier: str | FormatSpecifier) -> FormatSpecifier:
    if isinstance(specifier, FormatSpecifier):
        return specifier
    return parse_specifier(specifier)


@dataclass(frozen=True, slots=True)
class FormatLocale:
    """Formatting context for one locale definition.

    Build renderers with format(); render values by calling them. A context
    is immutable, so it and every renderer it builds can be shared between
    threads.

    Cache Management:
        Contexts built from Babel locale codes via for_locale() are cached
        per normalized code:
        - FormatLocale.clear_cache(): Clear all cached instances
        - FormatLocale.cache_size(): Get current cache size
        - FormatLocale.cache_info(): Get detailed cache statistics

    Attributes:
        definition: Locale data used by every renderer of this context
        locale_code: Locale code the context was built from, None for
            injected definitions
        is_fallback: True when locale_code was unknown and en_US data is used

    Examples:
        >>> fmt = FormatLocale(LocaleDefinition(decimal=",", thousands="."))
        >>> fmt.format(",.2f")(1234.5)
        '1.234,50'
        >>> fmt.format_prefix(",.0", 1e6)(1e6)
        '1M'

        >>> ctx = FormatLocale.for_locale("invalid-locale")
        >>> ctx.is_fallback
        True
    """

    # Class-level cache for Babel-derived instances (identity caching)
    # OrderedDict provides LRU semantics with O(1) operations
    # Note: ClassVar is excluded from dataclass fields
    _cache: ClassVar[OrderedDict[str, FormatLocale]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    definition: LocaleDefinition = field(default_factory=LocaleDefinition)
    locale_code: str | None = None
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the Babel-derived context cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached FormatLocale instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale keys (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def for_locale(cls, locale_code: str) -> FormatLocale:
        """Get the cached context for a CLDR locale, falling back to en_US.

        Thread Safety:
            Uses OrderedDict with RLock for thread-safe LRU caching.
            Concurrent calls with same locale_code return the same instance.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            FormatLocale with CLDR data. For unknown/invalid locales, en_US
            data with is_fallback=True (a warning is logged).

        Raises:
            BabelImportError: If Babel is not installed
        """
        # "en-US", "en_US" and "en_US.UTF-8" share one cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        babel_locale, used_fallback = _resolve_babel_locale(locale_code)
        ctx = cls(
            definition=LocaleDefinition.from_babel_locale(babel_locale),
            locale_code=locale_code,
            is_fallback=used_fallback,
        )

        # Double-check: another thread may have stored the key meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def for_locale_or_raise(cls, locale_code: str) -> FormatLocale:
        """Build an uncached context for a CLDR locale, raising on unknown codes.

        Raises:
            ValueError: If locale code is invalid or unknown
            BabelImportError: If Babel is not installed
        """
        definition = LocaleDefinition.from_babel_or_raise(locale_code)
        return cls(definition=definition, locale_code=locale_code)

    def format(self, specifier: str | FormatSpecifier) -> Renderer:
        """Build a renderer for a specifier.

        Examples:
            >>> fmt = FormatLocale()
            >>> fmt.format("+.2%")(0.1234)
            '+12.34%'
            >>> fmt.format("^9")(42)
            '   42    '
        """
        return build_renderer(_as_specifier(specifier), self.definition)

    def format_prefix(self, specifier: str | FormatSpecifier, value: object) -> Renderer:
        """Build a renderer using the SI prefix chosen for a representative value.

        The prefix is resolved once from `value` (10^-24 .. 10^24) and applied
        to every rendered value, so a column of numbers shares one unit. The
        specifier's type is forced to fixed point; its precision counts
        fraction digits of the scaled value.

        Examples:
            >>> fmt = FormatLocale()
            >>> render = fmt.format_prefix(".1", 1.3e3)
            >>> render(1500), render(2e5)
            ('1.5k', '200.0k')
            >>> fmt.format_prefix("6.1", 4.2e-6)(4.2e-6)
            '  4.2µ'
        """
        spec = _as_specifier(specifier).evolve(type=NumeralType.FIXED.value)
        exponent = _scale_exponent(value, -(len(SI_PREFIXES) // 2), len(SI_PREFIXES) // 2)
        return _scaled(
            build_renderer(spec, self.definition, scale_symbol=si_prefix_symbol(exponent)),
            exponent,
        )

    def format_currency_prefix(
        self, specifier: str | FormatSpecifier, value: object
    ) -> Renderer:
        """Build a currency renderer using the magnitude abbreviation of a value.

        Like format_prefix(), but with the locale currency symbols forced on
        and short-scale abbreviations (K, M, B, T) in place of SI symbols.
        Values below one thousand use no abbreviation.

        Examples:
            >>> fmt = FormatLocale()
            >>> fmt.format_currency_prefix(".1", 2.5e6)(2.5e6)
            '$2.5M'
            >>> fmt.format_currency_prefix(".2", 999)(-999)
            '-$999.00'
        """
        spec = _as_specifier(specifier).evolve(
            type=NumeralType.FIXED.value, symbol=Symbol.CURRENCY
        )
        exponent = _scale_exponent(value, 0, len(CURRENCY_ABBREVIATIONS) - 1)
        return _scaled(
            build_renderer(
                spec, self.definition, scale_symbol=CURRENCY_ABBREVIATIONS[exponent // 3]
            ),
            exponent,
        )


def _scaled(render: Renderer, exponent: int) -> Renderer:
    """Wrap a renderer so values are divided by 10**exponent first."""
    if exponent == 0:
        return render
    factor = float(Decimal(1).scaleb(-exponent))

    def render_scaled(value: object) -> str:
        return render(coerce_number(value) * factor)

    return render_scaled
