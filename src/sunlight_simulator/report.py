"""Per-state sun data snapshot and its display formatting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sunlight_simulator.astro.solar import DEFAULT_DISTANCE, calculate_sun_position, is_sun_visible
from sunlight_simulator.contracts import LightConditionInfo, Location, Season, SunPosition
from sunlight_simulator.lighting.conditions import get_light_condition
from sunlight_simulator.lighting.intensity import calculate_intensity
from sunlight_simulator.lighting.shadow import calculate_shadow_length
from sunlight_simulator.presets import get_location, get_season
from sunlight_simulator.state import SimulatorState

logger = logging.getLogger(__name__)

BELOW_HORIZON_LABEL = "地平線下"
NO_SHADOW_LABEL = "--"
LONG_SHADOW_LABEL = "∞"
MAX_DISPLAY_SHADOW = 20.0


@dataclass(frozen=True, slots=True)
class SunReport:
    """Everything the data panel shows for one simulator state."""

    state: SimulatorState
    location: Location
    season: Season
    position: SunPosition
    shadow_length: float | None
    intensity: float
    light_condition: LightConditionInfo
    sun_visible: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report, including formatted display strings."""
        return {
            "state": self.state.to_dict(),
            "location": self.location.to_dict(),
            "season": self.season.to_dict(),
            "position": self.position.to_dict(),
            "shadow_length": self.shadow_length,
            "intensity": self.intensity,
            "light_condition": self.light_condition.to_dict(),
            "sun_visible": self.sun_visible,
            "display": {
                "elevation": format_elevation(self.position.elevation),
                "azimuth": f"{self.position.azimuth:.1f}°",
                "shadow_length": format_shadow_length(self.shadow_length),
                "intensity": format_intensity(self.intensity),
            },
        }


def compute_sun_report(state: SimulatorState, distance: float = DEFAULT_DISTANCE) -> SunReport:
    """Run the full position and lighting pipeline for a state."""
    location = get_location(state.location)
    season = get_season(state.season)
    position = calculate_sun_position(state.time, state.season, location.latitude, distance)
    report = SunReport(
        state=state,
        location=location,
        season=season,
        position=position,
        shadow_length=calculate_shadow_length(position.elevation),
        intensity=calculate_intensity(position.elevation),
        light_condition=get_light_condition(position.elevation),
        sun_visible=is_sun_visible(position.elevation),
    )
    logger.debug("report %s -> %s", state.to_dict(), report.light_condition.type.value)
    return report


def format_elevation(elevation: float) -> str:
    """Format elevation in degrees, collapsing full night to a label."""
    if elevation < -18.0:
        return BELOW_HORIZON_LABEL
    return f"{elevation:.1f}°"


def format_shadow_length(length: float | None) -> str:
    """Format shadow ratio, capping very long shadows at MAX_DISPLAY_SHADOW."""
    if length is None:
        return NO_SHADOW_LABEL
    if length > MAX_DISPLAY_SHADOW:
        return LONG_SHADOW_LABEL
    return f"{length:.1f}倍"


def format_intensity(intensity: float) -> str:
    """Format intensity as a whole percentage."""
    return f"{intensity * 100:.0f}%"
