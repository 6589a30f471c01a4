"""Normalized direct-light intensity from solar elevation."""

from __future__ import annotations

from math import sin

from sunlight_simulator.astro.angles import degrees_to_radians

MIN_DAYLIGHT_INTENSITY = 0.3


def calculate_intensity(elevation: float) -> float:
    """Return exposure intensity in [0, 1] following the sine law.

    Any sun above the horizon gets at least MIN_DAYLIGHT_INTENSITY to account
    for diffuse skylight at grazing angles.
    """
    if elevation <= 0.0:
        return 0.0
    return min(1.0, max(MIN_DAYLIGHT_INTENSITY, sin(degrees_to_radians(elevation))))
