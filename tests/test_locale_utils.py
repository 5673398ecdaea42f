"""Tests for locale code normalization and Babel locale caching.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localefmt.core.locale_utils import clear_locale_cache, get_babel_locale, normalize_locale


class TestNormalizeLocale:
    """Test BCP 47 to POSIX normalization."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("en_US", "en_US"),
            ("en", "en"),
            ("de_DE.UTF-8", "de_DE"),
            (" fr-FR ", "fr_FR"),
            ("zh-Hant-TW", "zh_Hant_TW"),
        ],
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        """Hyphens become underscores; encodings and whitespace are dropped."""
        assert normalize_locale(code) == expected

    @given(code=st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_", max_size=12))
    def test_normalize_is_idempotent(self, code: str) -> None:
        """Normalizing twice changes nothing."""
        assert normalize_locale(normalize_locale(code)) == normalize_locale(code)


class TestGetBabelLocale:
    """Test cached Babel locale lookup."""

    def test_parses_bcp47(self) -> None:
        """BCP 47 codes are accepted."""
        locale = get_babel_locale("de-DE")

        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_cached(self) -> None:
        """Same code returns the same Locale object."""
        clear_locale_cache()

        assert get_babel_locale("en-US") is get_babel_locale("en-US")

    def test_unknown_locale_raises(self) -> None:
        """Unknown locales propagate Babel's error."""
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz_ZZ")
