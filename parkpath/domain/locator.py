"""
Path-Distance Locator
=====================

Entry point used by the parking search: annotate each candidate lot with
the walking-distance estimate from a source point.

Per destination
---------------
1. Dijkstra from node 0 (the source) to node ``i + 1``.
2. Finite result  -> ``calculatedDistance`` = path km,
   ``distance`` = ``"X.X miles"``.
3. Infinite result or any error -> straight-line haversine km,
   ``distance`` = ``"X.X miles (direct)"``.

The graph and all scratch state live inside one call, so concurrent
callers share nothing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from parkpath.config import settings

from .distance import format_miles, haversine_km
from .entities import Graph, read_coordinates
from .graph import build_proximity_graph
from .pathfinding import dijkstra

logger = logging.getLogger(__name__)

SOURCE_NODE = 0


def calculate_path_distances(
    source: Optional[Sequence[float]],
    destinations: Optional[Sequence[Mapping[str, Any]]],
    max_edge_km: Optional[float] = None,
    complete_components: Optional[bool] = None,
) -> Any:
    """
    Return a copy of *destinations* with ``calculatedDistance`` (km) and
    ``distance`` (formatted miles) added to every element.

    A missing source or an empty destination list returns *destinations*
    as given.
    """
    if not source or not destinations:
        return destinations

    if max_edge_km is None:
        max_edge_km = settings.max_edge_distance_km
    if complete_components is None:
        complete_components = settings.complete_components

    origin = {"coordinates": source}
    try:
        graph: Optional[Graph] = build_proximity_graph(
            [origin, *destinations],
            max_edge_km=max_edge_km,
            complete_components=complete_components,
        )
    except Exception:
        logger.exception("Could not build proximity graph; using direct distances")
        graph = None

    return [
        _annotate(graph, origin, destination, index + 1)
        for index, destination in enumerate(destinations)
    ]


def rank_by_distance(annotated: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Stable sort by ``calculatedDistance``; NaN or missing values go last."""

    def key(item: Mapping[str, Any]) -> tuple[bool, float]:
        value = item.get("calculatedDistance")
        if value is None or math.isnan(value):
            return (True, 0.0)
        return (False, value)

    return [dict(item) for item in sorted(annotated, key=key)]


def nearest_destinations(
    source: Optional[Sequence[float]],
    destinations: Optional[Sequence[Mapping[str, Any]]],
    limit: Optional[int] = None,
    **options: Any,
) -> list[dict[str, Any]]:
    """Annotate, rank closest first, and keep at most *limit* entries."""
    annotated = calculate_path_distances(source, destinations, **options)
    ranked = rank_by_distance(annotated or [])
    return ranked if limit is None else ranked[:limit]


# ── Internals ─────────────────────────────────────────────────────────


def _annotate(
    graph: Optional[Graph],
    origin: Mapping[str, Any],
    destination: Mapping[str, Any],
    node: int,
) -> dict[str, Any]:
    try:
        if graph is not None:
            result = dijkstra(graph, SOURCE_NODE, node)
            if result.found:
                return {
                    **destination,
                    "calculatedDistance": result.distance,
                    "distance": format_miles(result.distance),
                }
        logger.debug("No path to node %d; using direct distance", node)
    except Exception:
        logger.exception("Error calculating path to node %d", node)

    direct = _direct_km(origin, destination)
    return {
        **destination,
        "calculatedDistance": direct,
        "distance": format_miles(direct, direct=True),
    }


def _direct_km(origin: Mapping[str, Any], destination: Mapping[str, Any]) -> float:
    lat1, lng1 = read_coordinates(origin)
    lat2, lng2 = read_coordinates(destination)
    return haversine_km(lat1, lng1, lat2, lng2)
