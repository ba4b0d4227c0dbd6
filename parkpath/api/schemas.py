"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class LocationIn(BaseModel):
    """A destination; any keys besides ``coordinates`` are passed through."""

    coordinates: list[float] = Field(
        ..., min_length=2, max_length=2, description="[latitude, longitude]"
    )

    model_config = {"extra": "allow"}


class DistanceRequest(BaseModel):
    source: Optional[list[float]] = Field(
        None, min_length=2, max_length=2, description="[latitude, longitude]"
    )
    destinations: list[LocationIn] = []


class ClosestLotsRequest(BaseModel):
    lots: list[LocationIn]


# ── Responses ─────────────────────────────────────────────────────────


class AnnotatedLocation(LocationIn):
    calculatedDistance: Optional[float] = Field(
        None, description="Estimated walking distance in km."
    )
    distance: Optional[str] = Field(
        None, description='"X.X miles", or "X.X miles (direct)" for a fallback.'
    )


class AnnotatedLot(AnnotatedLocation):
    walkingTimeMinutes: Optional[int] = None
    metricDistance: Optional[str] = None


class BuildingResponse(BaseModel):
    key: str
    name: str
    latitude: float
    longitude: float
    aliases: list[str] = []

    model_config = {"from_attributes": True}


class ClosestLotsResponse(BaseModel):
    building: BuildingResponse
    closest_lots: list[AnnotatedLot]


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
