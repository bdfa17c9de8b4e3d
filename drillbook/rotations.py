"""Exercises on rotated lists: rotating, counting rotations and searching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def rotate_range_right(values: Sequence[int], left: int, right: int) -> list[int]:
    """Rotate values[left..right] (inclusive) right by one place."""
    items = list(values)
    if not 0 <= left <= right < len(items):
        raise ValueError(f"invalid range [{left}, {right}] for {len(items)} values")
    segment = items[left : right + 1]
    items[left : right + 1] = segment[-1:] + segment[:-1]
    return items


def index_after_rotations(
    values: Sequence[int], ranges: Iterable[tuple[int, int]], element: int
) -> int:
    """Apply each right rotation in turn, then return the first index of element."""
    items = list(values)
    for left, right in ranges:
        items = rotate_range_right(items, left, right)
    try:
        return items.index(element)
    except ValueError:
        raise ValueError(f"{element} is not among the values") from None


def rotation_sums(values: Sequence[int]) -> list[int]:
    """Sum of i * value[i] for each successive left rotation, starting unrotated."""
    items = list(values)
    sums = []
    for shift in range(len(items)):
        rotated = items[shift:] + items[:shift]
        sums.append(sum(position * value for position, value in enumerate(rotated)))
    return sums


def max_rotation_sum(values: Sequence[int]) -> int:
    """Largest of the rotation sums."""
    sums = rotation_sums(values)
    if not sums:
        raise ValueError("no rotations of an empty sequence")
    return max(sums)


def rotation_count(values: Sequence[int]) -> int:
    """How many times a sorted list of distinct values was rotated clockwise."""
    return next(
        (
            position
            for position, (previous, current) in enumerate(zip(values, values[1:]), 1)
            if current < previous
        ),
        0,
    )


def minimum(values: Iterable[int]) -> int:
    """Smallest value; raises ValueError for no values."""
    items = list(values)
    if not items:
        raise ValueError("minimum of an empty sequence")
    return min(items)


def rotate_right_by_one(values: Sequence[int]) -> list[int]:
    """Rotate clockwise by one place."""
    items = list(values)
    return items[-1:] + items[:-1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Rotate right by k places, 0 <= k <= len(values)."""
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    split = len(items) - k
    return items[split:] + items[:split]


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Rotate left by d places, 0 <= d <= len(values)."""
    items = list(values)
    if not 0 <= d <= len(items):
        raise ValueError(f"d must be between 0 and {len(items)}, got {d}")
    return items[d:] + items[:d]


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Find target in a rotated ascending list; return its index or None.

    The middle element is checked first, then whichever of the two sorted
    runs could hold the target is scanned.
    """
    items = list(values)
    if not items:
        return None
    first_run_end = next(
        (
            position
            for position, (previous, current) in enumerate(zip(items, items[1:]))
            if current < previous
        ),
        0,
    )
    middle = len(items) // 2
    if items[middle] == target:
        return middle
    if items[0] <= target <= items[first_run_end]:
        start, stop = 0, first_run_end + 1
    else:
        start, stop = first_run_end + 1, len(items)
    return next(
        (
            position
            for position, value in enumerate(items[start:stop], start)
            if value == target
        ),
        None,
    )