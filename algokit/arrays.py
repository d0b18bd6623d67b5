"""Small algorithms over lists and grids of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations_with_replacement
from typing import TypeVar

T = TypeVar("T")


def swap_pair(first: T, second: T) -> tuple[T, T]:
    """Return the two values in swapped order."""
    return second, first


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of ``values``."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


def special_sum(values: Sequence[int], index: int) -> int:
    """Return ``values[index]`` plus every second element after it."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range")
    return values[index] + sum(values[index + 2 :: 2])


def largest_special_sum(values: Sequence[int]) -> tuple[int, int] | None:
    """Return ``(sum, index)`` of the largest positive special sum.

    The first index wins on ties. ``None`` is returned when no special sum
    is greater than zero.
    """
    best: tuple[int, int] | None = None
    for index in range(len(values)):
        total = special_sum(values, index)
        if total > (best[0] if best else 0):
            best = (total, index)
    return best


def window_maxima(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of size ``k``."""
    if k <= 0:
        raise ValueError("window size must be positive")
    return [max(values[start : start + k]) for start in range(len(values) - k + 1)]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted iterables into one sorted list."""
    left, right = list(first), list(second)
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def flood_fill(screen: list[list[int]], x: int, y: int, new_color: int) -> None:
    """Repaint, in place, the 4-connected region of ``screen`` containing ``(x, y)``."""
    if not (0 <= x < len(screen) and 0 <= y < len(screen[x])):
        raise IndexError(f"position ({x}, {y}) is outside the screen")
    previous = screen[x][y]
    if previous == new_color:
        return
    pending = [(x, y)]
    while pending:
        row, col = pending.pop()
        if not (0 <= row < len(screen) and 0 <= col < len(screen[row])):
            continue
        if screen[row][col] != previous:
            continue
        screen[row][col] = new_color
        pending.extend(((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)))


def kadane(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("kadane of an empty sequence")
    return best


def find_peak(values: Sequence[int]) -> int:
    """Return the index of an element not smaller than its neighbours."""
    n = len(values)
    if n == 0:
        raise ValueError("no peak in an empty sequence")
    if n == 1 or values[0] >= values[1]:
        return 0
    if values[-1] >= values[-2]:
        return n - 1
    for index, (before, current, after) in enumerate(
        zip(values, values[1:], values[2:]), start=1
    ):
        if current >= before and current >= after:
            return index
    raise AssertionError("unreachable: a peak always exists")


def reverse_range(values: list[T], start: int, end: int) -> None:
    """Reverse ``values[start..end]`` (both inclusive) in place."""
    if start < end:
        values[start : end + 1] = values[start : end + 1][::-1]


def rotate_square(matrix: list[list[T]]) -> None:
    """Rotate a square matrix in place by 90 degrees clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(column)[::-1] for column in zip(*matrix)]


def two_sum_pairs(nums: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every index pair ``(i, j)`` with ``i <= j`` whose values sum to ``target``.

    An index may be paired with itself.
    """
    return [
        (i, j)
        for (i, a), (j, b) in combinations_with_replacement(enumerate(nums), 2)
        if a + b == target
    ]