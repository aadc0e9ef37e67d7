"""The 0/1 knapsack problem and the rod-cutting problem."""

from __future__ import annotations

from collections.abc import Sequence


def _knapsack_table(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> list[list[int]]:
    # table[i][j]: best value using the first i items within weight j.
    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        above = table[-1]
        row = [
            max(value + above[j - weight], above[j]) if 0 < j and weight <= j else above[j]
            for j in range(capacity + 1)
        ]
        row[0] = 0
        table.append(row)
    return table


def _knapsack_items(
    weights: Sequence[int], table: list[list[int]], capacity: int
) -> list[int]:
    chosen: list[int] = []
    j = capacity
    for i in range(len(weights), 0, -1):
        if table[i][j] > table[i - 1][j]:
            chosen.append(i)
            j -= weights[i - 1]
    chosen.reverse()
    return chosen


def knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> tuple[int, int, list[int]]:
    """Solve the 0/1 knapsack problem.

    Returns ``(best_value, total_weight, items)`` where ``items`` are the
    1-based indices of the chosen items in ascending order. Raises
    ``ValueError`` if ``weights`` and ``values`` differ in length.
    """
    if len(weights) != len(values):
        raise ValueError(
            "Number of items in the list of weights doesn't match "
            "the number of items in the list of values!"
        )
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    table = _knapsack_table(capacity, weights, values)
    items = _knapsack_items(weights, table, capacity)
    total_weight = sum(weights[i - 1] for i in items)
    return table[len(weights)][capacity], total_weight, items


def rod_cut(prices: Sequence[int]) -> int:
    """Return the best total price for a rod of length ``len(prices)``.

    ``prices[l - 1]`` is the price of a piece of length ``l``.
    """
    best: list[int] = []
    for i, price in enumerate(prices):
        candidates = (prices[j - 1] + best[i - j] for j in range(1, i + 1))
        best.append(max(price, *candidates) if i else price)
    return best[-1] if best else 0