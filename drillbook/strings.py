"""Small exercises on strings: counting, case changes and duplicate removal."""

from __future__ import annotations

import string

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def substring_count(text: str) -> int:
    """Number of non-empty contiguous substrings, counted by position."""
    size = len(text)
    return size * (size + 1) // 2


def sorted_unique_chars(text: str) -> str:
    """The distinct characters of text in sorted order."""
    return "".join(sorted(set(text)))


def length(text: str) -> int:
    """Number of characters in text."""
    return sum(1 for _ in text)


def to_upper(text: str) -> str:
    """Turn the ASCII letters a-z into A-Z and leave everything else alone."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Turn the ASCII letters A-Z into a-z and leave everything else alone."""
    return text.translate(_TO_LOWER)


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character, in original order."""
    return "".join(dict.fromkeys(text))


def substrings(text: str) -> list[str]:
    """Every contiguous substring, shortest first, then by starting position."""
    size = len(text)
    return [
        text[start : start + span]
        for span in range(1, size + 1)
        for start in range(size - span + 1)
    ]


def concatenate(first: str, second: str) -> str:
    """The characters of first followed by those of second."""
    return "".join(char for part in (first, second) for char in part)