"""Linear and binary search over lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search_recursive(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return None


def linear_search(values: Sequence[int], target: int) -> list[int]:
    """Return every index at which ``target`` occurs, in order."""
    return [index for index, item in enumerate(values) if item == target]