"""Core data contracts for the sunlight simulator."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum
from math import isfinite
from typing import Any


class UnknownSeasonError(KeyError, ValueError):
    """Raised when a season key is not part of the preset table."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown season: {self.key!r}"


class UnknownLocationError(KeyError, ValueError):
    """Raised when a location key is not part of the preset table."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown location: {self.key!r}"


class SeasonKey(StrEnum):
    """Closed set of preset seasons."""

    SUMMER = "summer"
    WINTER = "winter"
    SPRING = "spring"
    AUTUMN = "autumn"

    @classmethod
    def parse(cls, value: SeasonKey | str) -> SeasonKey:
        """Return the member for `value`, raising UnknownSeasonError otherwise."""
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownSeasonError(value) from exc


class LocationKey(StrEnum):
    """Closed set of preset locations."""

    TOKYO = "tokyo"
    OSAKA = "osaka"
    FUKUOKA = "fukuoka"
    SAPPORO = "sapporo"
    NAHA = "naha"

    @classmethod
    def parse(cls, value: LocationKey | str) -> LocationKey:
        """Return the member for `value`, raising UnknownLocationError otherwise."""
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownLocationError(value) from exc


class LightCondition(StrEnum):
    """Named lighting bands ordered from darkest to brightest."""

    NIGHT = "night"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"
    CIVIL_DEEP = "civil-deep"
    CIVIL = "civil"
    GOLDEN_LOW = "golden-low"
    GOLDEN_HIGH = "golden-high"
    NORMAL = "normal"


@dataclass(frozen=True, slots=True)
class Season:
    """Preset season with its fixed solar declination."""

    name: str
    declination: float  # degrees, north positive

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Location:
    """Preset observer location. Longitude is carried for display only."""

    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SunPosition:
    """Sun direction scaled to a scene distance, plus its horizontal angles.

    `x` points east, `z` points north (south is negative) and `y` is up.
    `y` is floored at -10 so a sun just below the horizon stays in view.
    """

    x: float
    y: float
    z: float
    elevation: float
    azimuth: float

    def __post_init__(self) -> None:
        """Validate angle ranges."""
        if not (isfinite(self.elevation) and -90.0 <= self.elevation <= 90.0):
            raise ValueError("elevation must be within [-90, 90].")
        if not (isfinite(self.azimuth) and 0.0 <= self.azimuth < 360.0):
            raise ValueError("azimuth must be within [0, 360).")

    def to_dict(self) -> dict[str, float]:
        """Serialize the sun position to a JSON-compatible dictionary."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class LightConditionInfo:
    """Lighting band with its display metadata."""

    type: LightCondition
    name: str
    color: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "name": self.name,
            "color": self.color,
            "description": self.description,
        }
