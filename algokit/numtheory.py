"""Elementary number-theory routines."""

from __future__ import annotations

from math import comb, isqrt, prod


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return prod(range(2, n + 1))


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign.
    """
    digits = str(abs(n))
    count = len(digits)
    total = sum(int(d) ** count for d in digits)
    if n < 0:
        total *= (-1) ** count
    return total == n


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("fibonacci of a negative index")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def is_even(n: int) -> bool:
    """Tell whether ``n`` is even."""
    return n % 2 == 0


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("row count must not be negative")
    triangle: list[list[int]] = []
    for size in range(1, rows + 1):
        if triangle:
            prev = triangle[-1]
            row = [1, *(a + b for a, b in zip(prev, prev[1:])), 1]
        else:
            row = [1]
        triangle.append(row[:size])
    return triangle


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    reversed_abs = int(str(abs(n))[::-1])
    return -reversed_abs if n < 0 else reversed_abs


def sieve(n: int) -> list[int]:
    """Return the numbers from 1 to ``n`` left unmarked by the sieve of Eratosthenes.

    This is 1 followed by every prime not greater than ``n``.
    """
    if n < 1:
        return []
    composite = bytearray(n + 1)
    for i in range(2, isqrt(n) + 1):
        if not composite[i]:
            marks = range(i * i, n + 1, i)
            composite[i * i :: i] = b"\x01" * len(marks)
    return [k for k in range(1, n + 1) if not composite[k]]


__all__ = [
    "comb",
    "factorial",
    "fibonacci",
    "is_armstrong",
    "is_even",
    "is_prime",
    "pascal_triangle",
    "reverse_number",
    "sieve",
]