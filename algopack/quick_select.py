"""Selection of the element at a given sorted position by quickselect."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _partition(items: MutableSequence[Any], left: int, right: int, pivot_index: int) -> int:
    pivot = items[pivot_index]
    items[pivot_index], items[right] = items[right], items[pivot_index]
    store = left
    for i in range(left, right + 1):
        if items[i] < pivot:
            items[store], items[i] = items[i], items[store]
            store += 1
        items[right], items[store] = items[store], items[right]
    return store


def quick_select(items: MutableSequence[Any], left: int, right: int, index: int) -> Any:
    """Return the element that belongs at ``index`` within ``items[left..=right]``.

    ``items`` is reordered in place while partitioning.
    """
    while left != right:
        pivot_index = _partition(items, left, right, (left + right) // 2 + 1)
        if index == pivot_index:
            return items[index]
        if index < pivot_index:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
    return items[left]