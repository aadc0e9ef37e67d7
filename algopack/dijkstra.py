"""Single-source shortest paths on a positively weighted graph."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from typing import Any


def dijkstra(
    graph: Mapping[Any, Mapping[Any, Any]], start: Any
) -> dict[Any, tuple[Any, Any] | None]:
    """Run Dijkstra's algorithm from ``start``.

    ``graph`` maps every vertex to a mapping of neighbour to edge weight.
    The result maps each reachable vertex to ``(predecessor, distance)``;
    ``start`` itself maps to ``None``. Raises ``KeyError`` if a reached
    vertex is not a key of ``graph``.
    """
    result: dict[Any, tuple[Any, Any] | None] = {start: None}
    queue: list[tuple[Any, Any, Any]] = []

    for node, weight in graph[start].items():
        result[node] = (start, weight)
        heapq.heappush(queue, (weight, node, start))

    while queue:
        dist, node, prev = heapq.heappop(queue)
        if result.get(node) != (prev, dist):
            continue
        for nxt, weight in graph[node].items():
            if nxt in result:
                known = result[nxt]
                if known is None or dist + weight >= known[1]:
                    continue
            candidate = weight + dist
            result[nxt] = (node, candidate)
            heapq.heappush(queue, (candidate, nxt, node))

    return result