"""Factorials, arrangements, combinations and Fibonacci numbers."""

from math import prod

__all__ = ["arrangements", "combinations", "factorial", "fibonacci"]


def arrangements(n: int, m: int) -> int:
    """Return the number of ordered arrangements A(n, m) = n! / (n - m)!.

    Computed as the product n * (n - 1) * ... * (n - m + 1), without
    going through full factorials.
    """
    return prod(range(n - m + 1, n + 1))


def factorial(n: int) -> int:
    """Return n! for a natural number n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n ({n})")
    return prod(range(2, n + 1))


def combinations(n: int, m: int) -> int:
    """Return the number of combinations C(n, m) = A(n, m) / m!."""
    return arrangements(n, m) // factorial(m)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative ({n})")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous