"""Degree/radian conversion helpers."""

from __future__ import annotations

from math import pi


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / pi


def normalize_degrees(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    out = angle_deg % 360.0
    # -1e-17 % 360.0 rounds up to exactly 360.0
    if out >= 360.0:
        return 0.0
    return out
