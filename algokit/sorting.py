"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list in ascending
order; the input is left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


def bead_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by letting beads fall down their posts."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("bead sort needs non-negative integers")
    if not items:
        return []
    n = len(items)
    tallest = max(items)
    # Beads resting on each post once gravity has acted.
    posts = [sum(1 for v in items if v > level) for level in range(tallest)]
    # Row ``row`` holds a bead on every post whose pile reaches it.
    return [sum(1 for height in posts if height >= n - row) for row in range(n)]


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per value."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    result: list[float] = []
    for bucket in buckets:
        result.extend(sorted(bucket))
    return result


def _sift_down(heap: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort with a binary max-heap built in place."""
    heap = list(values)
    n = len(heap)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(heap, n, root)
    for end in range(n - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def _merge(left: list, right: list) -> list:
    merged = []
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


def merge_sort(values: Iterable) -> list:
    """Sort by recursively splitting in half and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def selection_sort(values: Iterable) -> list:
    """Sort by repeatedly moving the smallest remaining element forward."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


@dataclass
class _Node:
    key: object
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _in_order(root: Optional[_Node]) -> Iterator:
    stack: list[_Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def tree_sort(values: Iterable) -> list:
    """Sort by in-order traversal of a binary search tree.

    The tree keeps each key once, so duplicate values appear only once in
    the result.
    """
    root: Optional[_Node] = None
    for key in values:
        if root is None:
            root = _Node(key)
            continue
        node = root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
            else:
                break
    return list(_in_order(root))


def bubble_sort(values: Iterable) -> list:
    """Sort by swapping adjacent pairs, stopping early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def cycle_sort(values: Iterable) -> list:
    """Sort by rotating each cycle of the permutation into place."""
    items = list(values)
    n = len(items)

    def position(start: int, item: object) -> int:
        return start + sum(1 for other in items[start + 1 :] if other < item)

    for start in range(n - 1):
        item = items[start]
        pos = position(start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = position(start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    pivot_index = start + sum(1 for v in items[start + 1 : end + 1] if v <= pivot)
    items[pivot_index], items[start] = items[start], items[pivot_index]
    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable) -> list:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        ranges.append((start, pivot - 1))
        ranges.append((pivot + 1, end))
    return items


def shell_sort(values: Iterable) -> list:
    """Sort with gapped insertion sorts, halving the gap down to one."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = items[i]
            j = i
            while j >= gap and items[j - gap] > temp:
                items[j] = items[j - gap]
                j -= gap
            items[j] = temp
        gap //= 2
    return items


__all__ = [
    "bead_sort",
    "bubble_sort",
    "bucket_sort",
    "cycle_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "shell_sort",
    "tree_sort",
]