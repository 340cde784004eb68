"""Naive recursive Fibonacci.

Deliberately exponential: the point is to exercise function-call overhead,
so there is no memoization and no iterative fallback.
"""

from __future__ import annotations


def fib(n: int) -> int:
    """Compute the n-th Fibonacci number by double recursion.

    Args:
        n: Position in the sequence (n >= 0, not checked here).

    Returns:
        fib(n), with fib(0) = 0 and fib(1) = 1.
    """
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)
