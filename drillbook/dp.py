"""Classic dynamic-programming counting problems."""

from __future__ import annotations

from collections.abc import Iterable


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def friend_pairings(n: int) -> int:
    """Ways for n friends to stay single or pair up, each pair counted once."""
    _require_non_negative("n", n)
    if n <= 2:
        return n
    two_back, one_back = 1, 2
    for size in range(3, n + 1):
        two_back, one_back = one_back, one_back + (size - 1) * two_back
    return one_back


def catalan(n: int) -> int:
    """The n-th Catalan number, built bottom up."""
    _require_non_negative("n", n)
    table = [1]
    for size in range(1, n + 1):
        table.append(sum(table[left] * table[size - 1 - left] for left in range(size)))
    return table[n]


def coin_change_ways(amount: int, coins: Iterable[int]) -> int:
    """Number of unordered ways to make amount from unlimited coins of the given values."""
    _require_non_negative("amount", amount)
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest trials that always find the critical floor with the given eggs."""
    if eggs < 1:
        raise ValueError(f"at least one egg is required, got {eggs}")
    _require_non_negative("floors", floors)
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        for height in range(1, floors + 1):
            current[height] = 1 + min(
                max(previous[drop - 1], current[height - drop])
                for drop in range(1, height + 1)
            )
        previous = current
    return previous[floors]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current