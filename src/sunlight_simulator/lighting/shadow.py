"""Shadow length estimation for a vertical object."""

from __future__ import annotations

from math import tan

from sunlight_simulator.astro.angles import degrees_to_radians


def calculate_shadow_length(elevation: float) -> float | None:
    """Return shadow length as a multiple of object height.

    Returns None when the sun is at or below the horizon. The ratio grows
    without bound as elevation approaches 0 and is not capped here.
    """
    if elevation <= 0.0:
        return None
    return 1.0 / tan(degrees_to_radians(elevation))
