"""Tests for the per-type numeral converters.

Python 3.13+.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localefmt.constants import SI_PREFIXES
from localefmt.enums import NumeralType
from localefmt.runtime.converters import (
    format_default,
    format_rounded,
    format_rounded_percentage,
    format_si,
    get_converter,
    si_prefix_symbol,
)
from tests.strategies import floats_by_magnitude


class TestFormatDefault:
    """Test the converter for unset, unknown and "d" types."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (1234.5, None, "1234.5"),
            (1.5, 4, "1.5"),
            (100.0, 3, "100"),
            (1234.5, 2, "1.2e+3"),
            (0.0, 3, "0"),
            (1e-7, 2, "1e-7"),
            (1e21, None, "1e+21"),
            (2.5, 0, "3"),
        ],
    )
    def test_format_default(self, value: float, precision: int | None, expected: str) -> None:
        """Significant digits with insignificant trailing zeros dropped."""
        assert format_default(value, precision) == expected


class TestFormatRounded:
    """Test the "r" converter and its exponential boundaries."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (1234.5, 2, "1200"),
            (123456789.0, 2, "120000000"),
            (0.000001234, 3, "0.00000123"),
            (1.23e20, 3, "123000000000000000000"),
        ],
    )
    def test_positional_inside_boundaries(
        self, value: float, precision: int, expected: str
    ) -> None:
        """Exponents in [-6, 20] render positionally."""
        assert format_rounded(value, precision) == expected

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (1.23e21, 3, "1.23e+21"),
            (1e21, 2, "1.0e+21"),
            (0.0000001234, 3, "1.23e-7"),
        ],
    )
    def test_exponential_outside_boundaries(
        self, value: float, precision: int, expected: str
    ) -> None:
        """Exponents outside [-6, 20] render exponentially."""
        assert format_rounded(value, precision) == expected

    def test_rounding_crosses_boundary(self) -> None:
        """The boundary applies to the rounded exponent."""
        assert format_rounded(9.9999e20, 2) == "1.0e+21"

    def test_non_finite(self) -> None:
        """NaN passes through toString()."""
        assert format_rounded(math.nan, 3) == "NaN"


class TestFormatRoundedPercentage:
    """Test the "p" converter."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (0.123456, 3, "12.3"),
            (0.99996, 3, "100"),
            (0.0123, 2, "1.2"),
            (12.5, 2, "1250"),
        ],
    )
    def test_format_rounded_percentage(
        self, value: float, precision: int, expected: str
    ) -> None:
        """Scaled by 100, rounded to significant digits, fixed point."""
        assert format_rounded_percentage(value, precision) == expected


class TestFormatSI:
    """Test the "s" converter and its prefix range."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (1500.0, 3, "1.50k"),
            (42e6, None, "42M"),
            (0.000042, None, "42µ"),
            (999.5, 3, "1.00k"),
            (999999.5, 3, "1.00M"),
            (0.0, None, "0"),
            (1.0, 3, "1.00"),
        ],
    )
    def test_prefixed(self, value: float, precision: int | None, expected: str) -> None:
        """The prefix is chosen after rounding."""
        assert format_si(value, precision) == expected

    def test_largest_prefix(self) -> None:
        """10^24 is the largest prefixed magnitude."""
        assert format_si(1e24, 3) == "1.00Y"

    def test_smallest_prefix(self) -> None:
        """10^-24 is the smallest prefixed magnitude."""
        assert format_si(1e-24, 3) == "1.00y"

    def test_above_range_is_exponential(self) -> None:
        """Beyond yotta, no symbol and exponential notation."""
        assert format_si(1e27, 2) == "1.0e+27"

    def test_below_range_is_exponential(self) -> None:
        """Below yocto, no symbol and exponential notation."""
        assert format_si(1e-27, 3) == "1.00e-27"

    @given(value=floats_by_magnitude(), precision=st.integers(min_value=1, max_value=21))
    def test_prefix_symbol_matches_scaled_digits(self, value: float, precision: int) -> None:
        """Inside the range the mantissa is in [1, 1000)."""
        text = format_si(value, precision)
        if "e" in text:
            event("outcome=exponential")
            return
        event("outcome=prefixed")
        mantissa = text.rstrip("".join(SI_PREFIXES))

        assert 1 <= float(mantissa) < 1000


class TestSIPrefixSymbol:
    """Test SI symbol lookup."""

    @pytest.mark.parametrize(
        ("exponent", "symbol"),
        [(-24, "y"), (-6, "µ"), (-3, "m"), (0, ""), (3, "k"), (9, "G"), (24, "Y")],
    )
    def test_si_prefix_symbol(self, exponent: int, symbol: str) -> None:
        """Each multiple of 3 maps to its symbol."""
        assert si_prefix_symbol(exponent) == symbol

    def test_micro_is_micro_sign(self) -> None:
        """Micro uses U+00B5 MICRO SIGN."""
        assert si_prefix_symbol(-6) == "µ"


class TestGetConverter:
    """Test converter dispatch."""

    @pytest.mark.parametrize("numeral_type", list(NumeralType))
    def test_every_type_has_converter(self, numeral_type: NumeralType) -> None:
        """Dispatch is exhaustive over NumeralType."""
        convert = get_converter(numeral_type)

        assert isinstance(convert(42.0, None), str)

    def test_unset_type_uses_default(self) -> None:
        """None selects the default converter."""
        assert get_converter(None) is format_default

    @pytest.mark.parametrize(
        ("numeral_type", "expected"),
        [
            (NumeralType.BINARY, "101010"),
            (NumeralType.CHARACTER, "*"),
            (NumeralType.DECIMAL, "42"),
            (NumeralType.OCTAL, "52"),
            (NumeralType.HEX, "2a"),
            (NumeralType.HEX_UPPER, "2A"),
            (NumeralType.GENERAL, "42"),
            (NumeralType.EXPONENT, "4.2e+1"),
            (NumeralType.FIXED, "42"),
            (NumeralType.PERCENT, "4200"),
            (NumeralType.SI, "42"),
        ],
    )
    def test_converter_output(self, numeral_type: NumeralType, expected: str) -> None:
        """Each type renders 42 without precision."""
        assert get_converter(numeral_type)(42.0, None) == expected
