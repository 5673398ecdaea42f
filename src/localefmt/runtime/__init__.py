"""Rendering runtime.

Provides numeral conversion, digit grouping, renderer construction and
locale contexts. Depends on the syntax package for specifier parsing.

Python 3.13+.
"""

from .grouping import create_grouper
from .locale_context import FormatLocale, LocaleDefinition
from .renderer import Renderer, build_renderer, coerce_number

__all__ = [
    "FormatLocale",
    "LocaleDefinition",
    "Renderer",
    "build_renderer",
    "coerce_number",
    "create_grouper",
]
