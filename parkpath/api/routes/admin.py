"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health  -- simple health check
GET /api/v1/admin/config  -- effective path-distance settings
"""

from fastapi import APIRouter, Depends

from parkpath.api.dependencies import get_settings
from parkpath.api.schemas import HealthResponse
from parkpath.config import Settings

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get("/config", summary="Effective path-distance settings")
async def config(cfg: Settings = Depends(get_settings)):
    return {
        "max_edge_distance_km": cfg.max_edge_distance_km,
        "complete_components": cfg.complete_components,
        "walking_speed_m_per_min": cfg.walking_speed_m_per_min,
        "closest_lots_default": cfg.closest_lots_default,
    }
