"""Everyday operations on lists of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def average(values: Sequence[int]) -> int:
    """Return the integer mean of ``values``, truncated toward zero."""
    if not values:
        raise ValueError("cannot average an empty sequence")
    return _truncating_div(sum(values), len(values))


def insert_at(values: Sequence[int], position: int, value: int) -> list[int]:
    """Return a copy of ``values`` with ``value`` inserted at 1-based ``position``."""
    if not 1 <= position <= len(values) + 1:
        raise IndexError(
            f"position {position} is outside 1..{len(values) + 1}"
        )
    result = list(values)
    result.insert(position - 1, value)
    return result


def largest_two(values: Sequence[int]) -> tuple[int, int]:
    """Return the largest value and the largest value distinct from it.

    The scan starts from the first two elements, so when every element is
    equal both results are that value.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    large, second = values[0], values[1]
    for item in values:
        if item > large:
            second, large = large, item
        elif item > second and item != large:
            second = item
    return large, second


def max_min(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(maximum, minimum)`` of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the extremes of an empty sequence")
    return max(items), min(items)


def remove_adjacent_duplicates(values: Iterable[int]) -> list[int]:
    """Collapse every run of equal neighbouring values into one value."""
    return [key for key, _ in groupby(values)]


def reverse_values(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def sort_descending(values: Iterable[int]) -> list[int]:
    """Return the values sorted from largest to smallest."""
    return sorted(values, reverse=True)


def second_largest_and_smallest(values: Sequence[int]) -> tuple[int, int]:
    """Return the second element from each end of the descending order.

    Duplicates are kept, so in ``[5, 5, 1]`` the second largest is ``5``.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    ordered = sort_descending(values)
    return ordered[1], ordered[-2]


def total(values: Iterable[int]) -> int:
    """Return the sum of the values."""
    return sum(values)