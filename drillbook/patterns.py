"""Text patterns of digits, letters and stars, one line per row."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def _require_rows(rows: int) -> None:
    if rows < 0:
        raise ValueError(f"rows must not be negative, got {rows}")


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def counting_rows(rows: int, width: int) -> str:
    """Rows that each count 1..width."""
    _require_rows(rows)
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    line = "".join(str(number) for number in range(1, width + 1))
    return _join(line for _ in range(rows))


def star_staircase(rows: int) -> str:
    """Row i holds i stars."""
    _require_rows(rows)
    return _join("*" * size for size in range(1, rows + 1))


def digit_staircase(rows: int) -> str:
    """Row i repeats the number i, i times."""
    _require_rows(rows)
    return _join(str(size) * size for size in range(1, rows + 1))


def floyd_triangle(rows: int) -> str:
    """Consecutive numbers from zero, row i holding i of them."""
    _require_rows(rows)
    counter = count()
    return _join(
        "".join(str(next(counter)) for _ in range(size)) for size in range(1, rows + 1)
    )


def letter_staircase(rows: int) -> str:
    """Row i holds the first i characters starting from 'A'."""
    _require_rows(rows)
    return _join(
        "".join(chr(ord("A") + offset) for offset in range(size))
        for size in range(1, rows + 1)
    )


def right_aligned_numbers(rows: int) -> str:
    """Row i counts 1..i, padded on the left with spaces to the full width."""
    _require_rows(rows)
    return _join(
        " " * (rows - size) + "".join(str(number) for number in range(1, size + 1))
        for size in range(1, rows + 1)
    )


def star_pyramid(rows: int) -> str:
    """Centred pyramid: row i has 2*i-1 stars after two spaces per missing row."""
    _require_rows(rows)
    return _join(
        "  " * (rows - size) + "*" * (2 * size - 1) for size in range(1, rows + 1)
    )


def number_pyramid(rows: int) -> str:
    """Tab-aligned pyramid where each row steps down its column of numbers."""
    _require_rows(rows)
    lines = []
    for size in range(1, rows + 1):
        cells = []
        value = size
        for step in range(1, size + 1):
            cells.append(f"{value}\t\t")
            value += rows - step
        lines.append("\t" * (rows - size) + "".join(cells))
    return _join(lines)