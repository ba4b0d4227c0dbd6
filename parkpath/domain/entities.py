"""
Graph value objects shared by the builder and the solver.

Node keys are plain ``int`` indices: 0 is the synthetic source and
``i + 1`` is destination ``i``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


class BuildingNotFound(LookupError):
    """Raised when a building name or alias matches nothing in the catalogue."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Edge:
    to: int
    weight: float  # km


@dataclass
class Node:
    edges: list[Edge] = field(default_factory=list)


Graph = dict[int, Node]


@dataclass
class PathResult:
    distance: float
    path: list[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return math.isfinite(self.distance)


@dataclass(frozen=True)
class Building:
    key: str
    name: str
    latitude: float
    longitude: float
    aliases: tuple[str, ...] = ()

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


# ── Helpers ───────────────────────────────────────────────────────────


def read_coordinates(location: Optional[Mapping[str, Any]]) -> tuple[float, float]:
    """
    Return ``(lat, lng)`` from a location's ``coordinates`` entry.

    Anything unreadable becomes ``(nan, nan)`` so the bad value surfaces as
    a ``NaN`` distance instead of an exception.
    """
    try:
        coords = location["coordinates"]
        return float(coords[0]), float(coords[1])
    except (KeyError, IndexError, TypeError, ValueError):
        logger.warning("Unreadable coordinates on location %r", location)
        return math.nan, math.nan
