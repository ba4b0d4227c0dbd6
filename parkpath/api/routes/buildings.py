"""
Building endpoints
==================

GET  /api/v1/buildings                       -- list the campus catalogue
GET  /api/v1/buildings/lookup?q=...          -- resolve a name or a question
POST /api/v1/buildings/{name}/closest-lots   -- rank lots near a building
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from parkpath.api.dependencies import get_directory, get_settings
from parkpath.api.middleware import limiter
from parkpath.api.schemas import (
    BuildingResponse,
    ClosestLotsRequest,
    ClosestLotsResponse,
    ErrorResponse,
)
from parkpath.config import Settings, settings
from parkpath.domain.buildings import BuildingDirectory
from parkpath.domain.entities import BuildingNotFound

router = APIRouter(prefix="/buildings", tags=["buildings"])


@router.get("", response_model=list[BuildingResponse], summary="List buildings")
def list_buildings(directory: BuildingDirectory = Depends(get_directory)):
    return [BuildingResponse.model_validate(b) for b in directory.list_buildings()]


@router.get(
    "/lookup",
    response_model=BuildingResponse,
    summary="Resolve a building name, alias, or free-text question",
    responses={404: {"model": ErrorResponse, "description": "No building matches"}},
)
@limiter.limit(settings.rate_limit)
def lookup_building(
    request: Request,
    q: str = Query(..., min_length=1),
    directory: BuildingDirectory = Depends(get_directory),
):
    building = directory.find_building(q) or directory.extract_building_from_message(q)
    if building is None:
        raise HTTPException(status_code=404, detail=f"No building matches {q!r}")
    return BuildingResponse.model_validate(building)


@router.post(
    "/{name}/closest-lots",
    response_model=ClosestLotsResponse,
    summary="Rank parking lots by walking distance from a building",
    responses={404: {"model": ErrorResponse, "description": "Unknown building"}},
)
@limiter.limit(settings.rate_limit)
def closest_lots(
    request: Request,
    name: str,
    body: ClosestLotsRequest,
    max_results: Optional[int] = Query(None, ge=1),
    directory: BuildingDirectory = Depends(get_directory),
    cfg: Settings = Depends(get_settings),
):
    try:
        building, lots = directory.closest_lots(
            name,
            [lot.model_dump() for lot in body.lots],
            max_results=max_results or cfg.closest_lots_default,
            meters_per_minute=cfg.walking_speed_m_per_min,
            max_edge_km=cfg.max_edge_distance_km,
            complete_components=cfg.complete_components,
        )
    except BuildingNotFound:
        raise HTTPException(status_code=404, detail=f"Building {name!r} not found")

    return ClosestLotsResponse(
        building=BuildingResponse.model_validate(building),
        closest_lots=lots,
    )
