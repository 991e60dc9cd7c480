"""Three ways of computing Fibonacci numbers, with fib(1) == fib(2) == 1."""

from __future__ import annotations


def simple(n: int) -> int:
    """Plain top-down recursion; exponential time."""
    if n <= 2:
        return 1
    return simple(n - 1) + simple(n - 2)


def cached(n: int) -> int:
    """Top-down recursion with memoisation; linear time, limited by recursion depth."""
    if n < 1:
        raise ValueError("n must be at least 1")
    cache: dict[int, int] = {1: 1, 2: 1}

    def _fib(k: int) -> int:
        try:
            return cache[k]
        except KeyError:
            result = _fib(k - 1) + _fib(k - 2)
            cache[k] = result
            return result

    return _fib(n)


def tabulated(n: int) -> int:
    """Bottom-up tabulation; linear time and no recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    nums = [0, 1, 1]
    for _ in range(3, n + 1):
        nums.append(nums[-1] + nums[-2])
    return nums[n]