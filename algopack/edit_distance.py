"""Levenshtein edit distance between two strings, measured over UTF-8 bytes."""

from __future__ import annotations


def edit_distance(str_a: str, str_b: str) -> int:
    """Return the number of insertions, deletions and substitutions turning one string into the other.

    The strings are compared byte by byte in their UTF-8 encoding, so a
    non-ASCII character may count as several edits.
    """
    a = str_a.encode("utf-8")
    b = str_b.encode("utf-8")
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    table[0] = list(range(len(b) + 1))
    for i, row in enumerate(table):
        row[0] = i
    for i, byte_a in enumerate(a, start=1):
        for j, byte_b in enumerate(b, start=1):
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + (byte_a != byte_b),
            )
    return table[len(a)][len(b)]


def edit_distance_se(str_a: str, str_b: str) -> int:
    """Same result as :func:`edit_distance`, keeping only one row of the table."""
    a = str_a.encode("utf-8")
    b = str_b.encode("utf-8")
    row = list(range(len(b) + 1))
    for i, byte_a in enumerate(a, start=1):
        diagonal = i - 1
        current = i
        for j, byte_b in enumerate(b, start=1):
            current = min(diagonal + (byte_a != byte_b), current + 1, row[j] + 1)
            diagonal = row[j]
            row[j] = current
        row[0] = i
    return row[len(b)]