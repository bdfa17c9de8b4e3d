"""Factorials and the decimal digits of large numbers."""

from __future__ import annotations


def factorial(n: int) -> int:
    """n! for n >= 0."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def digit_count(n: int) -> int:
    """Number of decimal digits of n; zero has none."""
    if n < 0:
        raise ValueError(f"digit count needs a non-negative number, got {n}")
    return len(str(n)) if n else 0


def trailing_zeros(n: int) -> int:
    """Number of zeros at the end of the decimal form of a positive n."""
    if n < 1:
        raise ValueError(f"trailing zeros need a positive number, got {n}")
    count = 0
    while n % 10 == 0:
        n //= 10
        count += 1
    return count