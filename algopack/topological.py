"""Topological ordering of a directed graph by Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping
from typing import Any


def topological_sort(graph: Mapping[Any, Iterable[tuple[Any, Any]]]) -> list[Any]:
    """Return the vertices of ``graph`` in a topological order.

    ``graph`` maps each vertex to a sequence of ``(target, weight)`` edges;
    weights are ignored. Vertices that appear only as targets are included.
    Vertices of indegree zero are taken in sorted order first. Vertices on or
    behind a cycle never reach indegree zero and are left out of the result.
    """
    indegree: dict[Hashable, int] = {}
    for node in sorted(graph):
        indegree.setdefault(node, 0)
        for target, _ in graph[node]:
            indegree[target] = indegree.get(target, 0) + 1

    queue = deque(node for node in sorted(indegree) if indegree[node] == 0)
    order: list[Any] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target, _ in graph.get(node, ()):
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order