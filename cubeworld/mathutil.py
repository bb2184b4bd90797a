"""Small combinatorics helpers."""

import math


def _check(*values: int) -> None:
    if any(v < 0 for v in values):
        raise ValueError("arguments must be non-negative")


def factorial(n: int) -> int:
    """Return n!."""
    _check(n)
    return math.factorial(n)


def pick(n: int, k: int) -> int:
    """Return nPk, the number of ordered selections: n!/(n-k)!."""
    _check(n, k)
    if k > n:
        raise ValueError("k must not exceed n")
    return factorial(n) // factorial(n - k)


def choose(n: int, k: int) -> int:
    """Return nCk: n!/((n-k)!*k!), or 0 when n < k."""
    _check(n, k)
    if n < k:
        return 0
    return factorial(n) // (factorial(n - k) * factorial(k))