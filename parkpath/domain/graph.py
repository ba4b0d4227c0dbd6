"""
Proximity Graph Builder
=======================

Turns a flat list of campus points into an undirected weighted graph.

1. **Pairwise pass**   -- every pair closer than ``max_edge_km`` gets an
   edge weighted by its haversine distance.
2. **Isolation pass**  -- every node still without edges is joined to its
   globally nearest neighbour, whatever the distance.
3. **Completion pass** (opt-in) -- remaining components are joined to the
   source's component through their shortest crossing edge.

Connectivity caveat
-------------------
Step 2 alone does not guarantee a connected graph: two isolated points that
are each other's nearest neighbour end up joined only to one another.
Dijkstra then reports them unreachable and the caller falls back to the
direct distance.  Step 3 removes that case when enabled.

Complexity
----------
* Pairwise pass:   O(N^2) haversine evaluations
* Isolation pass:  O(N^2) worst case (every node isolated)
* Completion pass: O(C x N^2) for C components

Campus-scale N (tens to low hundreds) keeps this cheap; thousands of points
would call for a spatial index instead of the full scan.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

import networkx as nx

from .distance import haversine_km
from .entities import Edge, Graph, Node, read_coordinates

DEFAULT_MAX_EDGE_KM = 5.0


def build_proximity_graph(
    locations: Sequence[Mapping[str, Any]],
    max_edge_km: float = DEFAULT_MAX_EDGE_KM,
    complete_components: bool = False,
) -> Graph:
    """Build the graph over *locations*; node ``i`` is ``locations[i]``."""
    points = [read_coordinates(loc) for loc in locations]
    graph: Graph = {i: Node() for i in range(len(points))}

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            d = _distance(points, i, j)
            if d <= max_edge_km:
                _connect(graph, i, j, d)

    if len(points) > 1:
        # isolation is judged on the pairwise result only
        for i in isolated_nodes(graph):
            nearest, d = _nearest_neighbour(points, i)
            if nearest is not None and not _adjacent(graph, i, nearest):
                _connect(graph, i, nearest, d)

    if complete_components:
        _join_components(graph, points)

    return graph


def isolated_nodes(graph: Graph) -> list[int]:
    return [key for key, node in graph.items() if not node.edges]


def connected_components(graph: Graph) -> list[set[int]]:
    """Components in order of their lowest node key."""
    components = nx.connected_components(to_networkx(graph))
    return sorted((set(c) for c in components), key=min)


def to_networkx(graph: Graph) -> nx.Graph:
    """Undirected ``networkx`` view of *graph*, weights in km."""
    g = nx.Graph()
    g.add_nodes_from(graph)
    for key, node in graph.items():
        for edge in node.edges:
            g.add_edge(key, edge.to, weight=edge.weight)
    return g


# ── Internals ─────────────────────────────────────────────────────────


def _distance(points: list[tuple[float, float]], i: int, j: int) -> float:
    return haversine_km(points[i][0], points[i][1], points[j][0], points[j][1])


def _connect(graph: Graph, a: int, b: int, weight: float) -> None:
    graph[a].edges.append(Edge(to=b, weight=weight))
    graph[b].edges.append(Edge(to=a, weight=weight))


def _adjacent(graph: Graph, a: int, b: int) -> bool:
    return any(edge.to == b for edge in graph[a].edges)


def _nearest_neighbour(
    points: list[tuple[float, float]], i: int
) -> tuple[int | None, float]:
    best, best_d = None, math.inf
    for j in range(len(points)):
        if j == i:
            continue
        d = _distance(points, i, j)
        if d < best_d:
            best, best_d = j, d
    return best, best_d


def _join_components(graph: Graph, points: list[tuple[float, float]]) -> None:
    """
    Grow the component that holds node 0 until it covers every node.

    Each round adds the single shortest edge leaving the grown component
    (Prim-style over components).  Nodes with ``NaN`` coordinates have no
    finite crossing edge and are left where they are.
    """
    if not graph:
        return
    components = connected_components(graph)
    grown = set(components[0])
    rest = list(components[1:])

    while rest:
        best: tuple[int, int, float] | None = None
        for component in rest:
            for a in grown:
                for b in component:
                    d = _distance(points, a, b)
                    if best is None or d < best[2]:
                        best = (a, b, d)
        if best is None or not math.isfinite(best[2]):
            return
        a, b, d = best
        _connect(graph, a, b, d)
        joined = next(c for c in rest if b in c)
        rest.remove(joined)
        grown |= joined
