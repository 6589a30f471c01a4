"""Classification of solar elevation into named lighting bands."""

from __future__ import annotations

from math import inf, isnan

from sunlight_simulator.contracts import LightCondition, LightConditionInfo

# (exclusive upper bound in degrees, band), ascending.
_BANDS: tuple[tuple[float, LightConditionInfo], ...] = (
    (
        -18.0,
        LightConditionInfo(LightCondition.NIGHT, "夜間", "#1a1a2e", "完全な夜"),
    ),
    (
        -12.0,
        LightConditionInfo(LightCondition.ASTRONOMICAL, "天体薄明", "#16213e", "星が見え始める"),
    ),
    (
        -6.0,
        LightConditionInfo(LightCondition.NAUTICAL, "航海薄明", "#1e3a5f", "水平線が見え始める"),
    ),
    (
        -4.0,
        LightConditionInfo(LightCondition.CIVIL_DEEP, "ブルーアワー（濃）", "#16537e", "深い青色の空"),
    ),
    (
        0.0,
        LightConditionInfo(LightCondition.CIVIL, "ブルーアワー", "#2874a6", "美しい青色の空"),
    ),
    (
        6.0,
        LightConditionInfo(LightCondition.GOLDEN_LOW, "ゴールデンアワー", "#ffa500", "黄金の光"),
    ),
    (
        25.0,
        LightConditionInfo(LightCondition.GOLDEN_HIGH, "柔らかい光", "#ffcc66", "ポートレート撮影に最適"),
    ),
    (
        inf,
        LightConditionInfo(LightCondition.NORMAL, "通常の日中", "#87ceeb", "通常の太陽光"),
    ),
)


def get_light_condition(elevation: float) -> LightConditionInfo:
    """Return the lighting band whose half-open interval contains `elevation`."""
    if isnan(elevation):
        raise ValueError("elevation must not be NaN.")
    for upper, info in _BANDS:
        if elevation < upper:
            return info
    return _BANDS[-1][1]


def light_condition_bands() -> list[tuple[float, LightConditionInfo]]:
    """Return (lower bound, band) pairs in ascending order, for legends."""
    lowers = [-inf] + [upper for upper, _ in _BANDS[:-1]]
    return [(lower, info) for lower, (_, info) in zip(lowers, _BANDS)]
