"""The egg dropping puzzle."""

from __future__ import annotations


def egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that always find the highest safe floor.

    Raises ``ValueError`` unless there is at least one egg and the number of
    floors is non-negative.
    """
    if eggs < 1:
        raise ValueError("at least one egg is required")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    if eggs == 1 or floors <= 1:
        return floors

    # fewer[j]: answer with one egg fewer and j floors.
    fewer = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0, 1]
        for j in range(2, floors + 1):
            current.append(
                1 + min(max(fewer[k - 1], current[j - k]) for k in range(1, j + 1))
            )
        fewer = current
    return fewer[floors]