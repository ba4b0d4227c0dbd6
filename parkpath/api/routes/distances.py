"""
Distance endpoints
==================

POST /api/v1/distances          -- annotate lots with path distances
POST /api/v1/distances/nearest  -- same, ranked closest first
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from parkpath.api.dependencies import get_settings
from parkpath.api.middleware import limiter
from parkpath.api.schemas import AnnotatedLocation, DistanceRequest
from parkpath.config import Settings, settings
from parkpath.domain.locator import calculate_path_distances, nearest_destinations

router = APIRouter(prefix="/distances", tags=["distances"])


@router.post(
    "",
    response_model=list[AnnotatedLocation],
    summary="Estimate walking distance from a source to each destination",
    description=(
        "Destinations keep their input order.  Distances that could not be "
        "routed through the proximity graph are marked ``(direct)``."
    ),
)
@limiter.limit(settings.rate_limit)
def annotate_distances(
    request: Request,
    body: DistanceRequest,
    cfg: Settings = Depends(get_settings),
):
    destinations = [d.model_dump() for d in body.destinations]
    return calculate_path_distances(
        body.source,
        destinations,
        max_edge_km=cfg.max_edge_distance_km,
        complete_components=cfg.complete_components,
    )


@router.post(
    "/nearest",
    response_model=list[AnnotatedLocation],
    summary="Destinations ranked by estimated walking distance",
)
@limiter.limit(settings.rate_limit)
def nearest(
    request: Request,
    body: DistanceRequest,
    limit: Optional[int] = Query(None, ge=1),
    cfg: Settings = Depends(get_settings),
):
    destinations = [d.model_dump() for d in body.destinations]
    return nearest_destinations(
        body.source,
        destinations,
        limit=limit,
        max_edge_km=cfg.max_edge_distance_km,
        complete_components=cfg.complete_components,
    )
