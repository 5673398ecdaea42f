"""Digit grouping driven by a locale grouping rule.

A grouping rule is a sequence of group sizes applied from the least
significant digit outward, cycling through the sequence: (3,) separates
thousands; (3, 2) alternates groups of three and two digits.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import TypeAlias

__all__ = ["GroupFunction", "create_grouper", "identity_group"]

GroupFunction: TypeAlias = Callable[[str, float], str]


def identity_group(digits: str, width: float = math.inf) -> str:  # noqa: ARG001
    """Grouping function for locales without a separator or rule."""
    return digits


def create_grouper(grouping: Sequence[int] | None, thousands: str) -> GroupFunction:
    """Build the grouping function for a locale.

    The returned function takes an integer digit string and a width bound.
    It inserts `thousands` between groups scanning right to left and stops
    once the grouped text would exceed the bound; the last group is then
    shortened to fit. Each separator counts as one character towards the
    bound regardless of its length. Zero-padded rendering relies on the
    bound to interleave padding zeros with separators. A non-positive size
    ends grouping: the remaining digits form one group.

    Args:
        grouping: Group sizes, least significant first; None or empty disables grouping
        thousands: Separator; empty disables grouping

    Returns:
        Grouping function, or identity_group when grouping is disabled

    Examples:
        >>> group = create_grouper((3,), ",")
        >>> group("1234567", math.inf)
        '1,234,567'
        >>> group("0000001234", 10)
        '00,001,234'
        >>> create_grouper((3, 2), ",")("123456789", math.inf)
        '1,234,56,789'
    """
    if not grouping or not thousands:
        return identity_group

    sizes = tuple(grouping)

    def group(digits: str, width: float = math.inf) -> str:
        end = len(digits)
        parts: list[str] = []
        index = 0
        size = sizes[0]
        length = 0
        while end > 0:
            if size <= 0:
                size = end
            if length + size + 1 > width:
                size = max(1, int(width - length))
            parts.append(digits[max(0, end - size) : end])
            end -= size
            length += size + 1
            if length > width:
                break
            index = (index + 1) % len(sizes)
            size = sizes[index]
        return thousands.join(reversed(parts))

    return group
