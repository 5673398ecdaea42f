"""Quickstart example for localefmt.

This example demonstrates building renderers from format specifiers,
locale-aware formatting, and SI/currency prefix scaling.

Note: Locale examples that use CLDR data require Babel
(pip install localefmt[babel]).
"""

from localefmt import (
    FormatLocale,
    SpecifierSyntaxError,
    format,  # noqa: A004  # pylint: disable=redefined-builtin
    format_currency_prefix,
    format_locale,
    format_prefix,
    validate_specifier,
)

# Example 1: Fixed point with grouping
print("=" * 50)
print("Example 1: Fixed Point")
print("=" * 50)

render = format(",.2f")
print(render(1234.5))
# Output: 1,234.50
print(render(-0.004))
# Output: -0.00

# Example 2: Signs, currency and percentages
print("\n" + "=" * 50)
print("Example 2: Signs, Currency, Percent")
print("=" * 50)

print(format("+.2%")(0.1234))
# Output: +12.34%
print(format("$,.2f")(-1234.5))
# Output: -$1,234.50
print(format("(,.0f")(-42))
# Output: (42)

# Example 3: Width, fill and alignment
print("\n" + "=" * 50)
print("Example 3: Padding")
print("=" * 50)

print(format("08.3f")(-3.14159))
# Output: -003.142
print(format("*^9d")(42))
# Output: ***42****
print(format("#x")(255))
# Output: 0xff

# Example 4: SI prefixes
print("\n" + "=" * 50)
print("Example 4: SI Prefixes")
print("=" * 50)

print(format(".3s")(1500))
# Output: 1.50k
scaled = format_prefix(".1", 1e6)
print(scaled(1234567), scaled(250000))
# Output: 1.2M 0.3M
print(format_currency_prefix(".1", 2.5e6)(2.5e6))
# Output: $2.5M

# Example 5: Custom locale definitions
print("\n" + "=" * 50)
print("Example 5: Custom Locale")
print("=" * 50)

swiss = format_locale({"decimal": ".", "thousands": "'", "currency": ("CHF ", "")})
print(swiss.format("$,.2f")(1234567.891))
# Output: CHF 1'234'567.89

# Example 6: CLDR locales via Babel
print("\n" + "=" * 50)
print("Example 6: CLDR Locales")
print("=" * 50)

print(FormatLocale.for_locale("de-DE").format(",.2f")(1234.5))
# Output: 1.234,50
print(FormatLocale.for_locale("en-IN").format(",d")(123456789))
# Output: 12,34,56,789

# Example 7: Strict validation
print("\n" + "=" * 50)
print("Example 7: Validation")
print("=" * 50)

try:
    validate_specifier(".2fx")
except SpecifierSyntaxError as e:
    print(f"Rejected: {e}")
# Output: Rejected: Invalid format specifier '.2fx': unexpected 'x' at position 3
