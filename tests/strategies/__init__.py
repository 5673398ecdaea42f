"""Hypothesis strategies for localefmt property-based testing.

Strategies are organized by domain:

- specifiers: specifier text, well-formed and arbitrary
- numbers: values accepted by renderers

Usage:
    from tests.strategies import format_specifiers, finite_floats

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - format_specifiers, floats_by_magnitude
"""

from .numbers import (
    finite_floats,
    floats_by_magnitude,
    renderable_values,
)
from .specifiers import (
    ALIGN_CHARS,
    SIGN_CHARS,
    TYPE_CHARS,
    format_specifiers,
    specifier_text,
)

__all__ = [
    "ALIGN_CHARS",
    "SIGN_CHARS",
    "TYPE_CHARS",
    "finite_floats",
    "floats_by_magnitude",
    "format_specifiers",
    "renderable_values",
    "specifier_text",
]
