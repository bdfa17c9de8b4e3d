"""Linear and binary search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_search(values: Sequence[int], target: int) -> bool:
    """Whether target occurs in values, which must be sorted ascending."""
    low, high = 0, len(values)
    while low < high:
        middle = (low + high) // 2
        if values[middle] == target:
            return True
        if target < values[middle]:
            high = middle
        else:
            low = middle + 1
    return False


def linear_search(values: Iterable[int], target: int) -> bool:
    """Whether target occurs anywhere in values."""
    return any(value == target for value in values)