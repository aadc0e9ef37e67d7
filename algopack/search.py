"""Searching sorted (and unsorted) sequences for a value's index."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in ascending ``items``, or ``None``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_rec(
    items: Sequence[Any], target: Any, left: int, right: int
) -> int | None:
    """Search ``items[left:right]`` for ``target`` by bisection.

    The direction of the ordering is taken from the first and last elements
    of ``items``: ascending if the first is smaller, descending otherwise.
    """
    if left >= right:
        return None
    ascending = items[0] < items[-1]
    middle = left + (right - left) // 2
    value = items[middle]
    if target == value:
        return middle
    if (target < value) == ascending:
        return binary_search_rec(items, target, left, middle)
    return binary_search_rec(items, target, middle + 1, right)


def exponential_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of ``item`` in ascending ``items``, or ``None``.

    The search range is found by doubling, then narrowed by bisection.
    """
    length = len(items)
    if length == 0:
        return None
    upper = 1
    while upper < length and items[upper] <= item:
        upper *= 2
    upper = min(upper, length)

    lower = upper // 2
    while lower < upper:
        mid = lower + (upper - lower) // 2
        value = items[mid]
        if item < value:
            upper = mid
        elif item == value:
            return mid
        else:
            lower = mid + 1
    return None


def fibonacci_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of ``item`` in ascending ``items``, or ``None``.

    The range is split at Fibonacci numbers instead of halves.
    """
    length = len(items)
    if length == 0:
        return None
    start = -1
    f0, f1, f2 = 0, 1, 1
    while f2 < length:
        f0, f1, f2 = f1, f2, f1 + f2

    while f2 > 1:
        position = f0 + start
        index = length - 1 if position < 0 else min(position, length - 1)
        value = items[index]
        if item < value:
            f2 = f0
            f1 -= f0
            f0 = f2 - f1
        elif item == value:
            return index
        else:
            f2 = f1
            f1 = f0
            f0 = f2 - f1
            start = index

    if f1 != 0 and items[length - 1] == item:
        return length - 1
    return None


def interpolation_search(nums: Sequence[int], item: int) -> int | None:
    """Return the index of ``item`` in ascending integers ``nums``, or ``None``.

    Probe positions are estimated from the values at the ends of the range.
    """
    if not nums:
        return None
    low, high = 0, len(nums) - 1
    while low <= high:
        if item < nums[low] or item > nums[high]:
            break
        spread = nums[high] - nums[low]
        if spread == 0:
            return low
        offset = low + ((high - low) // spread) * (item - nums[low])
        value = nums[offset]
        if value == item:
            return offset
        if value < item:
            low = offset + 1
        else:
            high = offset - 1
    return None


def jump_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of ``item`` in ascending ``items``, or ``None``.

    Blocks of about the square root of the length are skipped, then the
    block that may hold ``item`` is scanned.
    """
    length = len(items)
    if length == 0:
        return None
    jump = isqrt(length)
    step = jump
    prev = 0
    while items[min(length, step) - 1] < item:
        prev = step
        step += jump
        if prev >= length:
            return None
    while items[prev] < item:
        prev += 1
        if prev == min(step, length):
            return None
    if items[prev] == item:
        return prev
    return None


def linear_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of the first element equal to ``item``, or ``None``."""
    return next((i for i, value in enumerate(items) if value == item), None)