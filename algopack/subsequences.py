"""Subsequence and substring problems over strings and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any


def is_subsequence(str1: str, str2: str) -> bool:
    """Return whether ``str1`` can be obtained from ``str2`` by deleting characters.

    The comparison is made over the UTF-8 bytes of both strings.
    """
    remaining = iter(str2.encode("utf-8"))
    return all(byte in remaining for byte in str1.encode("utf-8"))


def longest_common_subsequence(a: str, b: str) -> str:
    """Return a longest common subsequence of the characters of ``a`` and ``b``."""
    lengths = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a):
        for j, cb in enumerate(b):
            if ca == cb:
                lengths[i + 1][j + 1] = lengths[i][j] + 1
            else:
                lengths[i + 1][j + 1] = max(lengths[i][j + 1], lengths[i + 1][j])

    result: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))


def longest_common_substring(text1: str, text2: str) -> int:
    """Return the length of the longest common contiguous run of UTF-8 bytes."""
    t1 = text1.encode("utf-8")
    t2 = text2.encode("utf-8")
    best = 0
    previous = [0] * (len(t2) + 1)
    for byte_a in t1:
        current = [0] * (len(t2) + 1)
        for j, byte_b in enumerate(t2, start=1):
            if byte_a == byte_b:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_continuous_increasing_subsequence(items: Sequence[Any]) -> list[Any]:
    """Return the first longest strictly increasing contiguous run of ``items``."""
    n = len(items)
    if n <= 1:
        return list(items)

    run = [1] * n
    for i in range(n - 2, -1, -1):
        if items[i] < items[i + 1]:
            run[i] = run[i + 1] + 1

    start = max(range(n), key=lambda k: (run[k], -k))
    return list(items[start : start + run[start]])


def longest_increasing_subsequence(items: Sequence[Any]) -> list[Any]:
    """Return a longest strictly increasing subsequence of ``items``.

    Among subsequences of the greatest length, the one ending with the
    smallest possible tails (built by patience sorting) is returned.
    """
    n = len(items)
    if n <= 1:
        return list(items)

    tail_values = [items[0]]
    tail_indices = [0]
    previous = list(range(n))

    for i in range(1, n):
        value = items[i]
        if value > tail_values[-1]:
            previous[i] = tail_indices[-1]
            tail_values.append(value)
            tail_indices.append(i)
            continue
        position = bisect_left(tail_values, value)
        tail_values[position] = value
        tail_indices[position] = i
        previous[i] = i if position == 0 else tail_indices[position - 1]

    current = tail_indices[-1]
    result = [items[current]]
    while previous[current] != current:
        current = previous[current]
        result.append(items[current])
    result.reverse()
    return result