"""In-place comparison and distribution sorts for mutable sequences."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from itertools import accumulate
from typing import Any

_MIN_MERGE = 32


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent pairs."""
    n = len(items)
    for i in range(n):
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)


def _sift_down(items: MutableSequence[Any], root: int, size: int) -> None:
    while True:
        left = 2 * root + 1
        if left >= size:
            return
        right = left + 1
        child = right if right < size and items[right] > items[left] else left
        if items[child] <= items[root]:
            return
        _swap(items, root, child)
        root = child


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place using a binary max-heap."""
    n = len(items)
    if n <= 1:
        return
    for root in reversed(range((n - 2) // 2 + 1)):
        _sift_down(items, root, n)
    for end in reversed(range(1, n)):
        _swap(items, 0, end)
        _sift_down(items, 0, end)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by insertion."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            _swap(items, j, j - 1)
            j -= 1


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by top-down merge sort."""
    if len(items) <= 1:
        return
    mid = len(items) // 2
    left = list(items[:mid])
    right = list(items[mid:])
    merge_sort(left)
    merge_sort(right)
    items[:] = _merge(left, right)


def odd_even_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by alternating odd and even transposition passes."""
    n = len(items)
    if n == 0:
        return
    done = False
    while not done:
        done = True
        for start in (1, 0):
            for i in range(start, n - 1, 2):
                if items[i] > items[i + 1]:
                    _swap(items, i, i + 1)
                    done = False


def pancake_sort(items: MutableSequence[Any]) -> list[Any]:
    """Sort ``items`` in place by prefix reversals and return a sorted copy."""
    for size in range(len(items), 1, -1):
        # On ties the last maximal element is chosen.
        max_index = max(range(size), key=lambda k: (items[k], k))
        if max_index != size - 1:
            items[: max_index + 1] = items[max_index::-1]
            items[:size] = items[size - 1 :: -1]
    return list(items)


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low - 1
    last = high
    while True:
        store += 1
        while items[store] < pivot:
            store += 1
        last -= 1
        while last >= 0 and items[last] > pivot:
            last -= 1
        if store >= last:
            break
        _swap(items, store, last)
    _swap(items, store, high)
    return store


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by quicksort with the last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))


def radix_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place by least-significant-digit radix sort.

    The radix is the smallest power of two not below the number of items.
    """
    if any(x < 0 for x in items):
        raise ValueError("radix_sort accepts only non-negative integers")
    n = len(items)
    if n <= 1:
        return
    biggest = max(items)
    radix = 1 << (n - 1).bit_length()
    place = 1
    while place <= biggest:
        counts = [0] * radix
        for x in items:
            counts[x // place % radix] += 1
        counts = list(accumulate(counts))
        for x in reversed(list(items)):
            digit = x // place % radix
            counts[digit] -= 1
            items[counts[digit]] = x
        place *= radix


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remainder."""
    n = len(items)
    for left in range(n):
        smallest = min(range(left, n), key=items.__getitem__)
        _swap(items, smallest, left)


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with Shell's halving gap sequence."""
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            value = items[i]
            j = i
            while j >= gap and items[j - gap] > value:
                items[j] = items[j - gap]
                j -= gap
            items[j] = value
        gap //= 2


def _min_run_length(n: int) -> int:
    r = 0
    while n >= _MIN_MERGE:
        r |= n & 1
        n >>= 1
    return n + r


def _insertion_sort_range(items: MutableSequence[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        value = items[i]
        j = i - 1
        while j >= left and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value


def _merge_runs(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    first = list(items[left : mid + 1])
    second = list(items[mid + 1 : right + 1])
    items[left : right + 1] = list(heapq.merge(first, second))


def tim_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place: insertion-sorted runs merged pairwise."""
    n = len(items)
    min_run = _min_run_length(_MIN_MERGE)
    for start in range(0, n, min_run):
        _insertion_sort_range(items, start, min(start + _MIN_MERGE - 1, n - 1))
    size = min_run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                _merge_runs(items, left, mid, right)
        size *= 2