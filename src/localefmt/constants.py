"""Shared constants for localefmt.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Field bounds: Clamping ranges for the specifier precision and width fields
- Notation thresholds: Exponent limits for plain vs exponential output
- Prefix tables: SI and short-scale currency magnitude symbols
- Default locale: Values installed as the process-wide default
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Field bounds
    "MIN_SIGNIFICANT_PRECISION",
    "MAX_SIGNIFICANT_PRECISION",
    "MIN_FIXED_PRECISION",
    "MAX_FIXED_PRECISION",
    "MAX_WIDTH",
    # Notation thresholds
    "EXPONENT_PLAIN_MIN",
    "EXPONENT_PLAIN_MAX",
    "TO_FIXED_LIMIT",
    # Prefix tables
    "SI_PREFIXES",
    "SI_MIN_EXPONENT",
    "SI_MAX_EXPONENT",
    "CURRENCY_ABBREVIATIONS",
    # Default locale
    "DEFAULT_DECIMAL",
    "DEFAULT_THOUSANDS",
    "DEFAULT_GROUPING",
    "DEFAULT_CURRENCY",
    "FALLBACK_LOCALE",
    "FALLBACK_CURRENCY_CODE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "SPECIFIER_CACHE_SIZE",
]

# ============================================================================
# FIELD BOUNDS
# ============================================================================

# Significant-digit types (g, p, r, s) accept 1..21 digits, the range of
# Number.prototype.toPrecision.
MIN_SIGNIFICANT_PRECISION: int = 1
MAX_SIGNIFICANT_PRECISION: int = 21

# Every other type counts fraction digits: 0..20, the range of toFixed.
MIN_FIXED_PRECISION: int = 0
MAX_FIXED_PRECISION: int = 20

# Widths saturate here. Longer digit runs are never converted with int(),
# which keeps parsing clear of the interpreter's integer string limit.
MAX_WIDTH: int = 1_000_000

# ============================================================================
# NOTATION THRESHOLDS
# ============================================================================

# Decimal exponents rendered in plain notation by shortest-form conversion
# and by the rounded ("r") type. Outside [EXPONENT_PLAIN_MIN, EXPONENT_PLAIN_MAX]
# the output switches to exponential notation (1e+21, 1e-7).
EXPONENT_PLAIN_MIN: int = -6
EXPONENT_PLAIN_MAX: int = 20

# Magnitudes at or above this are not expanded by fixed-point conversion;
# the shortest form is returned instead.
TO_FIXED_LIMIT: float = 1e21

# ============================================================================
# PREFIX TABLES
# ============================================================================

# SI prefix symbols indexed by (exponent // 3) + 8, for 10^-24 .. 10^24.
# Micro uses U+00B5 MICRO SIGN.
SI_PREFIXES: tuple[str, ...] = (
    "y", "z", "a", "f", "p", "n", "µ", "m",
    "",
    "k", "M", "G", "T", "P", "E", "Z", "Y",
)
SI_MIN_EXPONENT: int = -24
SI_MAX_EXPONENT: int = 24

# Short-scale abbreviations for currency amounts, indexed by exponent // 3.
CURRENCY_ABBREVIATIONS: tuple[str, ...] = ("", "K", "M", "B", "T")

# ============================================================================
# DEFAULT LOCALE
# ============================================================================

DEFAULT_DECIMAL: str = "."
DEFAULT_THOUSANDS: str = ","
DEFAULT_GROUPING: tuple[int, ...] = (3,)
DEFAULT_CURRENCY: tuple[str, str] = ("$", "")

# Used when a Babel locale code cannot be resolved.
FALLBACK_LOCALE: str = "en_US"
FALLBACK_CURRENCY_CODE: str = "USD"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached FormatLocale instances built from Babel locale codes.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized specifier parses. Applications use a small, fixed set of
# specifiers, so this bound is rarely reached.
SPECIFIER_CACHE_SIZE: int = 512
