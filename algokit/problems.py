"""Solutions to assorted interview-style problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from math import inf


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    window: deque[str] = deque()
    seen: set[str] = set()
    best = 0
    for ch in s:
        while ch in seen:
            seen.remove(window.popleft())
        window.append(ch)
        seen.add(ch)
        best = max(best, len(window))
    return best


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` holds."""
    if not heights:
        return 0
    left_max, right_max = heights[0], heights[-1]
    left, right = 1, len(heights) - 2
    water = 0
    while left <= right:
        if heights[left] >= left_max:
            left_max = heights[left]
            left += 1
        elif heights[right] >= right_max:
            right_max = heights[right]
            right -= 1
        elif left_max <= right_max:
            water += left_max - heights[left]
            left += 1
        else:
            water += right_max - heights[right]
            right -= 1
    return water


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``, the leftmost on ties."""
    best = ""
    for i in range(len(s)):
        for j in range(i + len(best), len(s)):
            candidate = s[i : j + 1]
            if len(candidate) > len(best) and candidate == candidate[::-1]:
                best = candidate
    return best


def _nearest_smaller(heights: Sequence[int], order: Iterable[int], default: int) -> list[int]:
    bounds = [default] * len(heights)
    stack: list[int] = []
    for i in order:
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        bounds[i] = stack[-1] if stack else default
        stack.append(i)
    return bounds


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in the histogram ``heights``.

    An empty histogram has area 0.
    """
    n = len(heights)
    if n == 0:
        return 0
    following = _nearest_smaller(heights, reversed(range(n)), n)
    preceding = _nearest_smaller(heights, range(n), -1)
    return max(
        h * (after - before - 1)
        for h, after, before in zip(heights, following, preceding)
    )


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health needed to cross ``dungeon`` to its far corner.

    Moves go right or down; health must stay at least 1 throughout.
    """
    if not dungeon or not dungeon[0]:
        raise ValueError("dungeon must have at least one cell")
    cols = len(dungeon[0])
    if any(len(row) != cols for row in dungeon):
        raise ValueError("dungeon rows must have equal length")
    below: list[float] = [inf] * (cols + 1)
    below[cols - 1] = 1
    for index, row in enumerate(reversed(dungeon)):
        current: list[float] = [inf] * (cols + 1)
        if index == 0:
            current[cols] = 1
        for j in reversed(range(cols)):
            need = min(below[j], current[j + 1]) - row[j]
            current[j] = max(1, need)
        below = current
    return int(below[0])


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run, using prefix sums."""
    best: int | None = None
    prefix = 0
    lowest_prefix = 0
    for value in nums:
        prefix += value
        candidate = prefix - lowest_prefix
        best = candidate if best is None else max(best, candidate)
        lowest_prefix = min(lowest_prefix, prefix)
    if best is None:
        raise ValueError("maximum subarray sum of an empty sequence")
    return best


def rot_oranges(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until every orange is rotten, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); rot spreads to the four
    neighbours each minute. The grid is not modified.
    """
    cells = [list(row) for row in grid]
    if any(value not in (0, 1, 2) for row in cells for value in row):
        raise ValueError("grid cells must be 0, 1 or 2")
    frontier = [(r, c) for r, row in enumerate(cells) for c, v in enumerate(row) if v == 2]
    minutes = 0
    while True:
        spread = []
        for r, c in frontier:
            for nr, nc in ((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)):
                if 0 <= nr < len(cells) and 0 <= nc < len(cells[nr]) and cells[nr][nc] == 1:
                    cells[nr][nc] = 2
                    spread.append((nr, nc))
        if not spread:
            break
        frontier = spread
        minutes += 1
    if any(1 in row for row in cells):
        return -1
    return minutes


def find_median_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of two ascending sequences taken together."""
    a, b = (second, first) if len(first) > len(second) else (first, second)
    na, nb = len(a), len(b)
    if na + nb == 0:
        raise ValueError("median of two empty sequences")
    low, high = 0, na
    while low <= high:
        cut_a = (low + high) // 2
        cut_b = (na + nb + 1) // 2 - cut_a
        max_left_a = a[cut_a - 1] if cut_a > 0 else -inf
        min_right_a = a[cut_a] if cut_a < na else inf
        max_left_b = b[cut_b - 1] if cut_b > 0 else -inf
        min_right_b = b[cut_b] if cut_b < nb else inf
        if max_left_a <= min_right_b and max_left_b <= min_right_a:
            left = max(max_left_a, max_left_b)
            if (na + nb) % 2 == 0:
                return (left + min(min_right_a, min_right_b)) / 2.0
            return float(left)
        if max_left_a > min_right_b:
            high = cut_a - 1
        else:
            low = cut_a + 1
    raise ValueError("inputs must be sorted in ascending order")


__all__ = [
    "calculate_minimum_hp",
    "find_median_sorted_arrays",
    "largest_rectangle_area",
    "length_of_longest_substring",
    "longest_palindrome",
    "max_subarray_sum",
    "rot_oranges",
    "trap",
]