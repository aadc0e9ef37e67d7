"""Ternary search over an inclusive index range of an ascending sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def ternary_search(target: Any, items: Sequence[Any], start: int, end: int) -> int | None:
    """Return the index of ``target`` within ``items[start..=end]``, or ``None``.

    The range is split into thirds at each step.
    """
    if not items:
        return None
    while start <= end:
        third = (end - start) // 3
        mid1, mid2 = start + third, end - third
        if target < items[mid1]:
            end = mid1 - 1
        elif target == items[mid1]:
            return mid1
        elif target > items[mid2]:
            start = mid2 + 1
        elif target == items[mid2]:
            return mid2
        else:
            start, end = mid1 + 1, mid2 - 1
    return None


def ternary_search_rec(
    target: Any, items: Sequence[Any], start: int, end: int
) -> int | None:
    """Recursive form of :func:`ternary_search` with the same results."""
    if not items or end < start:
        return None
    third = (end - start) // 3
    mid1, mid2 = start + third, end - third
    if target < items[mid1]:
        return ternary_search_rec(target, items, start, mid1 - 1)
    if target == items[mid1]:
        return mid1
    if target > items[mid2]:
        return ternary_search_rec(target, items, mid2 + 1, end)
    if target == items[mid2]:
        return mid2
    return ternary_search_rec(target, items, mid1 + 1, mid2 - 1)