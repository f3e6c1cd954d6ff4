"""Searches over a stack's values."""

from __future__ import annotations

from collections.abc import Sequence


def nth_smallest(values: Sequence[int], n: int) -> int:
    """Return the value with exactly ``n - 1`` smaller values.

    ``n`` is clamped into ``1..len(values)``, so asking for more than there
    are gives the largest value.
    """
    if not values:
        raise ValueError("nth_smallest() of an empty sequence")
    rank = min(max(n, 1), len(values)) - 1
    for candidate in values:
        if sum(other < candidate for other in values) == rank:
            return candidate
    return max(values)


def min_index(values: Sequence[int]) -> int:
    """Return the index of the first smallest value."""
    if not values:
        raise ValueError("min_index() of an empty sequence")
    return min(range(len(values)), key=values.__getitem__)


def max_index(values: Sequence[int]) -> int:
    """Return the index of the first largest value."""
    if not values:
        raise ValueError("max_index() of an empty sequence")
    return max(range(len(values)), key=values.__getitem__)