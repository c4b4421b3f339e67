import math

import pytest

from algostudy.recursion import factorial, fibonacci, step_up


def test_factorial_pinned():
    assert factorial(3) == 6


@pytest.mark.parametrize("n", range(1, 20))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_factorial_small_returns_n(n):
    assert factorial(n) == n


def test_fibonacci_pinned():
    assert fibonacci(7) == 13


def test_fibonacci_base():
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


@pytest.mark.parametrize("n", range(3, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_step_up_pinned():
    assert step_up(4) == 5


@pytest.mark.parametrize("n", [1, 2, 3])
def test_step_up_base(n):
    assert step_up(n) == n


@pytest.mark.parametrize("n", range(4, 30))
def test_step_up_recurrence(n):
    assert step_up(n) == step_up(n - 1) + step_up(n - 2)


@pytest.mark.parametrize("n", range(2, 25))
def test_step_up_is_shifted_fibonacci(n):
    assert step_up(n) == fibonacci(n + 1)