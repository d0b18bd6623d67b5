"""Searches over sequences, returning an index or ``None`` when absent."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def binary_search(values: Sequence, target: object) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Sequence, target: object) -> Optional[int]:
    """Return the index of the first occurrence of ``target``, or ``None``."""
    return next((i for i, value in enumerate(values) if value == target), None)


def ternary_search(values: Sequence, key: object) -> Optional[int]:
    """Return an index of ``key`` in the ascending ``values`` by splitting in thirds."""
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        mid1, mid2 = low + third, high - third
        if values[mid1] == key:
            return mid1
        if values[mid2] == key:
            return mid2
        if key < values[mid1]:
            high = mid1 - 1
        elif key > values[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return None


def _bounded_binary_search(
    values: Sequence, low: int, high: int, target: object
) -> Optional[int]:
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def exponential_search(values: Sequence, target: object) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``values``, or ``None``.

    The range is found by repeated doubling, then searched by bisection.
    """
    if not values:
        return None
    if values[0] == target:
        return 0
    n = len(values)
    bound = 1
    while bound < n and values[bound] <= target:
        bound *= 2
    return _bounded_binary_search(values, bound // 2, min(bound, n - 1), target)


__all__ = ["binary_search", "exponential_search", "linear_search", "ternary_search"]