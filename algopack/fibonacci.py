"""Several ways of computing Fibonacci numbers.

:func:`fibonacci` and :func:`recursive_fibonacci` use F(0) = F(1) = 1; the
others use the classical F(0) = 0, F(1) = 1.
"""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number with F(0) = F(1) = 1, iteratively."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return b


def _tail_fibonacci(n: int, previous: int, current: int) -> int:
    if n == 0:
        return current
    return _tail_fibonacci(n - 1, current, current + previous)


def recursive_fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number with F(0) = F(1) = 1, recursively."""
    _check(n)
    return _tail_fibonacci(n, 0, 1)


def _classical(n: int) -> int:
    if n < 2:
        return n
    k = n // 2
    f1 = _classical(k)
    f2 = _classical(k - 1)
    remainder = n % 4
    if remainder in (0, 2):
        return f1 * (f1 + 2 * f2)
    product = (2 * f1 + f2) * (2 * f1 - f2)
    return product + 2 if remainder == 1 else product - 2


def classical_fibonacci(n: int) -> int:
    """Return the classical ``n``-th Fibonacci number by index-halving identities."""
    _check(n)
    return _classical(n)


def _fib_pair(n: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1
    current, following = _fib_pair(n // 2)
    c = current * (following * 2 - current)
    d = current * current + following * following
    return (c, d) if n % 2 == 0 else (d, c + d)


def logarithmic_fibonacci(n: int) -> int:
    """Return the classical ``n``-th Fibonacci number by fast doubling."""
    _check(n)
    return _fib_pair(n)[0]


def memoized_fibonacci(n: int) -> int:
    """Return the classical ``n``-th Fibonacci number by memoized recursion."""
    _check(n)
    cache: dict[int, int] = {}

    def fib(k: int) -> int:
        if k < 2:
            return k
        if k not in cache:
            cache[k] = fib(k - 1) + fib(k - 2)
        return cache[k]

    return fib(n)