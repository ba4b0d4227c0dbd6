"""
Shortest-Path Solver (Dijkstra)
===============================

Single-source Dijkstra with a **linear-scan** minimum selection instead of
a heap.  Ties go to the first node in graph insertion order.

Termination
-----------
The loop stops as soon as the target is selected, or when every remaining
unvisited node is at +inf (nothing else is reachable).

Complexity: O(V^2 + E), fine for the small campus graphs built by
``graph.build_proximity_graph``.

An unreachable target is a normal result (``distance == inf``), never an
exception.
"""

from __future__ import annotations

import math
from typing import Optional

from .entities import Graph, PathResult


def dijkstra(graph: Graph, start: int, end: int) -> PathResult:
    if start not in graph or end not in graph:
        return PathResult(distance=math.inf, path=[])

    distances: dict[int, float] = {node: math.inf for node in graph}
    previous: dict[int, Optional[int]] = {node: None for node in graph}
    unvisited: dict[int, None] = dict.fromkeys(graph)  # ordered set
    distances[start] = 0.0

    while unvisited:
        current = _closest_unvisited(unvisited, distances)
        if current is None or current == end:
            break
        del unvisited[current]

        for edge in graph[current].edges:
            alt = distances[current] + edge.weight
            if alt < distances[edge.to]:
                distances[edge.to] = alt
                previous[edge.to] = current

    return PathResult(distance=distances[end], path=_walk_back(previous, end))


def _closest_unvisited(
    unvisited: dict[int, None], distances: dict[int, float]
) -> Optional[int]:
    best, best_d = None, math.inf
    for node in unvisited:
        if distances[node] < best_d:
            best, best_d = node, distances[node]
    return best


def _walk_back(previous: dict[int, Optional[int]], end: int) -> list[int]:
    path: list[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        current = previous[current]
    path.reverse()
    return path
