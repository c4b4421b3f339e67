"""Dynamic programming and backtracking exercises."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def _check_coins(coins: Sequence[int]) -> None:
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def _fewest(coins: Sequence[int], amount: int, memo: Optional[dict[int, int]]) -> int:
    if amount == 0:
        return 0
    if amount < 0:
        return -1
    if memo is not None and amount in memo:
        return memo[amount]
    best: Optional[int] = None
    for coin in coins:
        sub = _fewest(coins, amount - coin, memo)
        if sub == -1:
            continue
        best = sub + 1 if best is None else min(best, sub + 1)
    result = -1 if best is None else best
    if memo is not None:
        memo[amount] = result
    return result


def coin_change_recursive(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to amount by plain recursion; -1 if impossible."""
    _check_coins(coins)
    return _fewest(coins, amount, None)


def coin_change_memo(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to amount by memoised recursion; -1 if impossible."""
    _check_coins(coins)
    return _fewest(coins, amount, {})


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to amount by a bottom-up table; -1 if impossible."""
    _check_coins(coins)
    if amount < 0:
        return -1
    unreachable = amount + 1
    table = [unreachable] * (amount + 1)
    table[0] = 0
    for total in range(amount + 1):
        for coin in coins:
            if total - coin >= 0:
                table[total] = min(table[total], table[total - coin] + 1)
    return -1 if table[amount] == unreachable else table[amount]


def fib_memo(n: int) -> int:
    """Return the n-th Fibonacci number (fib(0)=0, fib(1)=1) by memoised recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    memo: dict[int, int] = {0: 0, 1: 1}

    def helper(k: int) -> int:
        if k not in memo:
            memo[k] = helper(k - 1) + helper(k - 2)
        return memo[k]

    return helper(n)


def fib_dp(n: int) -> int:
    """Return the n-th Fibonacci number from a full table; 0 for n < 1."""
    if n < 1:
        return 0
    table = [0, 1]
    for idx in range(2, n + 1):
        table.append(table[idx - 1] + table[idx - 2])
    return table[n]


def fib(n: int) -> int:
    """Return the n-th Fibonacci number keeping only the last two terms; 0 for n < 1."""
    if n < 1:
        return 0
    prev, cur = 0, 1
    for _ in range(2, n + 1):
        prev, cur = cur, prev + cur
    return cur


def permutations(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of nums by backtracking.

    A value already on the current track is skipped, so repeated values yield
    no complete orderings.
    """
    values = list(nums)
    result: list[list[Any]] = []
    track: list[Any] = []

    def backtrack() -> None:
        if len(track) == len(values):
            result.append(list(track))
            return
        for value in values:
            if value in track:
                continue
            track.append(value)
            backtrack()
            track.pop()

    backtrack()
    return result


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths = [1] * len(nums)
    for idx in range(len(nums) - 1, -1, -1):
        for later in range(idx + 1, len(nums)):
            if nums[later] > nums[idx]:
                lengths[idx] = max(lengths[idx], lengths[later] + 1)
    return max(lengths, default=0)


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run. Raises ValueError if empty."""
    if not nums:
        raise ValueError("sequence is empty")
    best = running = nums[-1]
    for value in reversed(nums[:-1]):
        running = max(value, running + value)
        best = max(best, running)
    return best


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to amount. Raises ValueError if it cannot be made."""
    _check_coins(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    table: list[Optional[int]] = [None] * (amount + 1)
    table[0] = 0
    for total in range(1, amount + 1):
        for coin in coins:
            if coin > total:
                continue
            previous = table[total - coin]
            if previous is not None:
                current = table[total]
                table[total] = previous + 1 if current is None else min(current, previous + 1)
    result = table[amount]
    if result is None:
        raise ValueError(f"amount {amount} cannot be made from the given coins")
    return result