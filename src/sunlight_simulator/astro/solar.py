"""Solar position helpers.

Simplified hour-angle model driven by a fixed seasonal declination. The sun
crosses the local meridian at clock time 12:00; longitude offsets and the
equation of time are not modelled.
"""

from __future__ import annotations

import logging
from math import asin, atan2, cos, sin

from sunlight_simulator.astro.angles import (
    degrees_to_radians,
    normalize_degrees,
    radians_to_degrees,
)
from sunlight_simulator.contracts import SeasonKey, SunPosition
from sunlight_simulator.presets import get_season

logger = logging.getLogger(__name__)

DEFAULT_DISTANCE = 80.0
MIN_SCENE_HEIGHT = -10.0
VISIBLE_ELEVATION_DEG = -6.0


def clamp_unit(value: float) -> float:
    """Clamp to [-1, 1] so asin stays defined under floating-point drift."""
    return min(1.0, max(-1.0, value))


def tan_safe(value_rad: float) -> float:
    """Return tangent using sine/cosine ratio for numerical stability."""
    cos_v = cos(value_rad)
    if abs(cos_v) < 1e-12:
        return sin(value_rad) / 1e-12
    return sin(value_rad) / cos_v


def solar_angles(time: float, declination_deg: float, lat_deg: float) -> tuple[float, float]:
    """Compute solar elevation and azimuth in radians.

    Args:
        time: Clock hour, nominally in [0, 24]. Not clamped.
        declination_deg: Solar declination in degrees.
        lat_deg: Observer latitude in degrees. Not clamped.

    Returns:
        Tuple of `(elevation_rad, azimuth_rad)` where the azimuth is the raw
        `atan2` value in [-pi, pi], measured from the meridian.
    """
    decl_rad = degrees_to_radians(declination_deg)
    lat_rad = degrees_to_radians(lat_deg)
    hour_angle_rad = degrees_to_radians((time - 12.0) * 15.0)

    sin_elev = sin(decl_rad) * sin(lat_rad) + cos(decl_rad) * cos(lat_rad) * cos(hour_angle_rad)
    elevation_rad = asin(clamp_unit(sin_elev))

    azimuth_rad = atan2(
        sin(hour_angle_rad),
        cos(hour_angle_rad) * sin(lat_rad) - tan_safe(decl_rad) * cos(lat_rad),
    )
    return (elevation_rad, azimuth_rad)


def calculate_sun_position(
    time: float,
    season: SeasonKey | str,
    latitude: float,
    distance: float = DEFAULT_DISTANCE,
) -> SunPosition:
    """Compute the sun's scene position and angles for a preset season.

    Args:
        time: Clock hour, nominally in [0, 24].
        season: Season key; unknown keys raise UnknownSeasonError.
        latitude: Observer latitude in degrees.
        distance: Scene radius the direction vector is scaled to.

    Returns:
        SunPosition with elevation in degrees, azimuth in [0, 360) and a
        direction vector whose height is floored at -10.
    """
    if not distance > 0.0:
        raise ValueError("distance must be positive.")

    declination = get_season(season).declination
    elevation_rad, azimuth_rad = solar_angles(time, declination, latitude)

    horizontal = cos(elevation_rad) * distance
    x = sin(azimuth_rad) * horizontal
    y = sin(elevation_rad) * distance
    z = -cos(azimuth_rad) * horizontal

    position = SunPosition(
        x=x,
        y=max(MIN_SCENE_HEIGHT, y),
        z=z,
        elevation=min(90.0, max(-90.0, radians_to_degrees(elevation_rad))),
        azimuth=normalize_degrees(radians_to_degrees(azimuth_rad) + 360.0),
    )
    logger.debug(
        "sun position time=%s season=%s lat=%s -> elev=%.3f az=%.3f",
        time,
        season,
        latitude,
        position.elevation,
        position.azimuth,
    )
    return position


def is_sun_visible(elevation: float) -> bool:
    """Return True when the sun disc should be drawn (above civil-twilight depth)."""
    return elevation > VISIBLE_ELEVATION_DEG
