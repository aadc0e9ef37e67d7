"""Fewest coins needed to make up an amount."""

from __future__ import annotations

from collections.abc import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Return the fewest coins from ``coins`` that sum to ``amount``.

    Each denomination may be used any number of times. Returns ``None`` when
    no combination of the coins makes up the amount.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    best: list[int | None] = [None] * (amount + 1)
    best[0] = 0
    for total in range(amount + 1):
        for coin in coins:
            if coin > total:
                continue
            previous = best[total - coin]
            if previous is None:
                continue
            current = best[total]
            best[total] = previous + 1 if current is None else min(current, previous + 1)
    return best[amount]