import math

import pytest

from drillbook.factorials import digit_count, factorial, trailing_zeros


def test_factorial_base_values():
    assert factorial(0) == 1
    assert factorial(1) == 1


@pytest.mark.parametrize("n", range(30))
def test_factorial_matches_standard_library(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(1, 25))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("k", range(15))
def test_digit_count_of_powers_of_ten(k):
    assert digit_count(10**k) == k + 1


@pytest.mark.parametrize("k", range(1, 15))
def test_digit_count_of_largest_k_digit_number(k):
    assert digit_count(10**k - 1) == k


def test_digit_count_of_zero():
    assert digit_count(0) == 0


def test_digit_count_rejects_negative():
    with pytest.raises(ValueError):
        digit_count(-5)


@pytest.mark.parametrize("k", range(12))
def test_trailing_zeros_of_scaled_seven(k):
    assert trailing_zeros(7 * 10**k) == k


@pytest.mark.parametrize("n", [1, 3, 45, 101, 120, 2000])
def test_trailing_zeros_grows_by_one_per_factor_of_ten(n):
    assert trailing_zeros(n * 10) == trailing_zeros(n) + 1


@pytest.mark.parametrize("n", range(5, 25))
def test_factorials_from_five_end_in_zero(n):
    assert trailing_zeros(factorial(n)) >= 1
    assert trailing_zeros(factorial(n)) < digit_count(factorial(n))


@pytest.mark.parametrize("n", [0, -10])
def test_trailing_zeros_rejects_non_positive(n):
    with pytest.raises(ValueError):
        trailing_zeros(n)