from math import comb

import pytest

from drillbook.dp import (
    catalan,
    coin_change_ways,
    egg_drop,
    fibonacci,
    friend_pairings,
)


def test_fibonacci_base_values():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(20))
def test_fibonacci_recurrence(n):
    assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("n", range(15))
def test_catalan_matches_binomial_formula(n):
    assert catalan(n) == comb(2 * n, n) // (n + 1)


def test_catalan_rejects_negative():
    with pytest.raises(ValueError):
        catalan(-3)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_friend_pairings_small_sizes(n):
    assert friend_pairings(n) == n


@pytest.mark.parametrize("n", range(3, 15))
def test_friend_pairings_recurrence(n):
    assert friend_pairings(n) == friend_pairings(n - 1) + (n - 1) * friend_pairings(n - 2)


def test_friend_pairings_rejects_negative():
    with pytest.raises(ValueError):
        friend_pairings(-1)


def test_coin_change_zero_amount_has_one_way():
    assert coin_change_ways(0, [3, 7]) == 1


@pytest.mark.parametrize("amount", range(10))
def test_coin_change_single_unit_coin(amount):
    assert coin_change_ways(amount, [1]) == 1


def test_coin_change_order_of_coins_does_not_matter():
    assert coin_change_ways(37, [1, 5, 10, 25]) == coin_change_ways(37, [25, 10, 5, 1])


@pytest.mark.parametrize("amount", [1, 3, 9, 15])
def test_coin_change_impossible_amount(amount):
    assert coin_change_ways(amount, [2]) == 0


@pytest.mark.parametrize("amount", range(1, 20))
def test_coin_change_more_coins_never_fewer_ways(amount):
    assert coin_change_ways(amount, [1, 2]) >= coin_change_ways(amount, [1])


def test_coin_change_known_example():
    assert coin_change_ways(4, [1, 2, 3]) == 4


def test_coin_change_rejects_non_positive_coin():
    with pytest.raises(ValueError):
        coin_change_ways(5, [1, 0])


def test_coin_change_rejects_negative_amount():
    with pytest.raises(ValueError):
        coin_change_ways(-1, [1])


@pytest.mark.parametrize("floors", range(12))
def test_egg_drop_one_egg_tries_every_floor(floors):
    assert egg_drop(1, floors) == floors


def test_egg_drop_no_floors_needs_no_trials():
    assert egg_drop(3, 0) == 0


@pytest.mark.parametrize("floors", range(1, 20))
def test_egg_drop_plenty_of_eggs_is_binary_search(floors):
    assert egg_drop(floors, floors) == floors.bit_length()


@pytest.mark.parametrize("floors", range(1, 25))
def test_egg_drop_more_eggs_never_worse(floors):
    assert egg_drop(3, floors) <= egg_drop(2, floors) <= egg_drop(1, floors)


def test_egg_drop_monotonic_in_floors():
    trials = [egg_drop(2, floors) for floors in range(30)]
    assert trials == sorted(trials)


def test_egg_drop_rejects_no_eggs():
    with pytest.raises(ValueError):
        egg_drop(0, 10)