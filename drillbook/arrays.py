"""Small exercises that transform or query a list of integers."""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Sequence
from itertools import zip_longest


def double_and_compact(values: Iterable[int]) -> list[int]:
    """Double each non-zero value equal to its successor, then push zeros to the end.

    When a value is doubled its successor becomes zero, so it takes no part
    in the next comparison.
    """
    items = list(values)
    merged: list[int] = []
    consumed = False
    for current, following in zip_longest(items, items[1:]):
        if consumed:
            consumed = False
            continue
        if current == 0:
            continue
        if current == following:
            merged.append(current * 2)
            consumed = True
        else:
            merged.append(current)
    return merged + [0] * (len(items) - len(merged))


def second_largest(values: Iterable[int]) -> int:
    """Return the second largest value found in a single scan.

    Raises ValueError when a value neither raises the maximum nor the
    runner-up, and when fewer than two distinct values were seen.
    """
    first: int | None = None
    second: int | None = None
    for value in values:
        if first is None or value > first:
            second, first = first, value
        elif (second is None or value > second) and value != first:
            second = value
        else:
            raise ValueError(f"no strict second largest: {value} breaks the scan")
    if second is None:
        raise ValueError("at least two distinct values are required")
    return second


def move_zeroes_to_end(values: Iterable[int]) -> list[int]:
    """Keep the non-zero values in order and append the zeros."""
    items = list(values)
    kept = [value for value in items if value != 0]
    return kept + [0] * (len(items) - len(kept))


def mean(values: Iterable[int]) -> float:
    """Arithmetic mean as a float; raises ValueError for no values."""
    items = list(values)
    if not items:
        raise ValueError("mean of an empty sequence")
    return statistics.fmean(items)


def median(values: Iterable[int]) -> float:
    """Middle value of the sorted data, or the mean of the two middle values."""
    items = list(values)
    if not items:
        raise ValueError("median of an empty sequence")
    return statistics.median(items)


def largest(values: Iterable[int]) -> int:
    """Largest value; raises ValueError for no values."""
    items = list(values)
    if not items:
        raise ValueError("largest of an empty sequence")
    return max(items)


def place_at_index(values: Iterable[int]) -> list[int]:
    """Put every value i with 0 <= i < n at position i and -1 where i is absent."""
    items = list(values)
    present = set(items)
    return [position if position in present else -1 for position in range(len(items))]


def alternate_min_max(values: Iterable[int]) -> list[int]:
    """Interleave the smallest and largest remaining values, smallest first."""
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    result: list[int] = []
    for position in range(len(ordered)):
        if position % 2 == 0:
            result.append(ordered[low])
            low += 1
        else:
            result.append(ordered[high])
            high -= 1
    return result


def zigzag_arrange(values: Iterable[int]) -> list[int]:
    """Arrange so each even position exceeds all before it and each odd one is below them.

    Positions are counted from one, so the first element sits at an odd
    position. The smaller half fills the other slots from the back.
    """
    ordered = sorted(values)
    small_count = (len(ordered) + 1) // 2
    result = [0] * len(ordered)
    result[0::2] = ordered[:small_count][::-1]
    result[1::2] = ordered[small_count:]
    return result


def reorder_by_index(values: Sequence[int], indexes: Sequence[int]) -> list[int]:
    """Place values[i] at position indexes[i]."""
    if len(values) != len(indexes):
        raise ValueError("values and indexes must have the same length")
    if sorted(indexes) != list(range(len(indexes))):
        raise ValueError("indexes must be a permutation of 0..n-1")
    result = [0] * len(values)
    for value, target in zip(values, indexes):
        result[target] = value
    return result


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, counting from one."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def reversed_list(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]