"""Textbook sorting algorithms and a halving 'Thanos' sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy produced by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for position in range(end):
            if items[position] > items[position + 1]:
                items[position], items[position + 1] = items[position + 1], items[position]
    return items


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy produced by building a max-heap and extracting its root."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy produced by inserting each value into the sorted prefix."""
    items = list(values)
    for position in range(1, len(items)):
        current = items[position]
        slot = position
        while slot > 0 and items[slot - 1] > current:
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = current
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy produced by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def is_power_of_two(n: int) -> bool:
    """Whether n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _is_sorted(items: Sequence[int]) -> bool:
    return all(previous <= current for previous, current in zip(items, items[1:]))


def thanos_sort_length(values: Sequence[int]) -> int:
    """Length of the sorted prefix left after repeatedly discarding the back half.

    The number of values must be a power of two (or zero).
    """
    items = list(values)
    if items and not is_power_of_two(len(items)):
        raise ValueError(f"length must be a power of two, got {len(items)}")
    size = len(items)
    while not _is_sorted(items[:size]):
        size -= size // 2
    return size