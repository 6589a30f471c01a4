"""FastAPI app exposing sun position and lighting endpoints."""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from sunlight_simulator.astro.solar import DEFAULT_DISTANCE, calculate_sun_position
from sunlight_simulator.contracts import (
    LocationKey,
    UnknownLocationError,
    UnknownSeasonError,
)
from sunlight_simulator.lighting.conditions import get_light_condition
from sunlight_simulator.lighting.intensity import calculate_intensity
from sunlight_simulator.lighting.shadow import calculate_shadow_length
from sunlight_simulator.presets import DEFAULT_LOCATION, JAPAN_LOCATIONS, SEASONS, resolve_location
from sunlight_simulator.report import compute_sun_report
from sunlight_simulator.state import SimulatorState

logger = logging.getLogger(__name__)


class SunPositionRequest(BaseModel):
    """Request schema for one sun position."""

    model_config = ConfigDict(allow_inf_nan=False)

    time: float = Field(ge=0.0, le=24.0)
    season: str
    latitude: float = Field(ge=-90.0, le=90.0)
    distance: float | None = Field(default=None, gt=0.0)


class SunPositionResponse(BaseModel):
    """Response schema aligned with the SunPosition contract."""

    x: float
    y: float
    z: float
    elevation: float
    azimuth: float
    shadow_length: float | None
    intensity: float


class ReportRequest(BaseModel):
    """Request schema for a full data-panel report; missing fields use defaults."""

    model_config = ConfigDict(allow_inf_nan=False)

    time: float | None = Field(default=None, ge=0.0, le=24.0)
    season: str | None = None
    location: str | None = None


class LightConditionResponse(BaseModel):
    """Response schema aligned with the LightConditionInfo contract."""

    type: str
    name: str
    color: str
    description: str


def _resolve_distance(distance: float | None) -> float:
    """Resolve scene distance from argument or environment with validation."""
    if distance is not None:
        return distance
    value = float(os.getenv("SUNLIGHT_SUN_DISTANCE", str(DEFAULT_DISTANCE)))
    if value <= 0.0:
        raise ValueError("SUNLIGHT_SUN_DISTANCE must be positive")
    return value


def _resolve_default_location(location: str | None) -> LocationKey:
    """Resolve default location from argument or environment with validation."""
    raw = location or os.getenv("SUNLIGHT_DEFAULT_LOCATION", DEFAULT_LOCATION.value)
    try:
        return LocationKey.parse(raw.strip().lower())
    except UnknownLocationError as exc:
        raise ValueError(
            "SUNLIGHT_DEFAULT_LOCATION must be one of: "
            + ", ".join(key.value for key in LocationKey)
        ) from exc


def create_app(distance: float | None = None, default_location: str | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sunlight Simulator API", version="0.1.0")

    scene_distance = _resolve_distance(distance)
    fallback_location = _resolve_default_location(default_location)
    app.state.distance = scene_distance
    app.state.default_location = fallback_location
    logger.info(
        "Sunlight simulator API configured distance=%s default_location=%s",
        scene_distance,
        fallback_location.value,
    )

    @app.get("/presets")
    def get_presets() -> dict[str, Any]:
        """List season and location presets."""
        return {
            "seasons": {key.value: season.to_dict() for key, season in SEASONS.items()},
            "locations": {key.value: loc.to_dict() for key, loc in JAPAN_LOCATIONS.items()},
            "default_location": fallback_location.value,
        }

    @app.post("/sun-position", response_model=SunPositionResponse)
    def post_sun_position(payload: SunPositionRequest) -> SunPositionResponse:
        """Compute sun position and direct-light metrics for a latitude."""
        try:
            position = calculate_sun_position(
                payload.time,
                payload.season,
                payload.latitude,
                payload.distance or scene_distance,
            )
        except UnknownSeasonError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return SunPositionResponse(
            **position.to_dict(),
            shadow_length=calculate_shadow_length(position.elevation),
            intensity=calculate_intensity(position.elevation),
        )

    @app.post("/report")
    def post_report(payload: ReportRequest) -> dict[str, Any]:
        """Compute the full data-panel report for a simulator state."""
        location = payload.location
        if location is None:
            location, _ = resolve_location(None, default=fallback_location)
        try:
            state = SimulatorState.create(
                time=payload.time,
                season=payload.season,
                location=location,
            )
        except (UnknownSeasonError, UnknownLocationError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return compute_sun_report(state, distance=scene_distance).to_dict()

    @app.get("/light-condition", response_model=LightConditionResponse)
    def get_condition(elevation: float = Query(ge=-90.0, le=90.0)) -> LightConditionResponse:
        """Classify a solar elevation into a lighting band."""
        return LightConditionResponse(**get_light_condition(elevation).to_dict())

    return app
