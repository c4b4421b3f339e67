"""Small recurrences: factorial, Fibonacci and counting stair climbs."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n! for n >= 1; values of n up to 2 are returned as they are."""
    if n <= 2:
        return n
    result = 2
    for factor in range(3, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the n-th term of 1, 1, 2, 3, 5, ...; terms up to n=2 are 1."""
    if n <= 2:
        return 1
    prev, cur = 1, 1
    for _ in range(n - 2):
        prev, cur = cur, prev + cur
    return cur


def step_up(n: int) -> int:
    """Count the ways to climb n steps taking one or two at a time (n up to 3 gives n)."""
    if n <= 3:
        return n
    prev, cur = 2, 3
    for _ in range(n - 3):
        prev, cur = cur, prev + cur
    return cur