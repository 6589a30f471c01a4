"""Immutable simulator selection state (time, season, location)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from math import isnan
from typing import Any

from sunlight_simulator.contracts import LocationKey, SeasonKey

MIN_TIME = 0.0
MAX_TIME = 24.0


def clamp_time(time: float) -> float:
    """Clamp a clock hour to [0, 24]; NaN is rejected."""
    if isnan(time):
        raise ValueError("time must not be NaN.")
    return max(MIN_TIME, min(MAX_TIME, float(time)))


@dataclass(frozen=True, slots=True)
class SimulatorState:
    """Caller-facing selection consumed by the report builder."""

    time: float = 12.0
    season: SeasonKey = SeasonKey.SUMMER
    location: LocationKey = LocationKey.TOKYO

    def __post_init__(self) -> None:
        """Clamp time and coerce string keys to enum members, rejecting unknown ones."""
        object.__setattr__(self, "time", clamp_time(self.time))
        object.__setattr__(self, "season", SeasonKey.parse(self.season))
        object.__setattr__(self, "location", LocationKey.parse(self.location))

    @classmethod
    def create(
        cls,
        time: float | None = None,
        season: SeasonKey | str | None = None,
        location: LocationKey | str | None = None,
    ) -> SimulatorState:
        """Build a state from partial overrides merged onto the defaults."""
        state = DEFAULT_STATE
        if time is not None:
            state = state.with_time(time)
        if season is not None:
            state = state.with_season(season)
        if location is not None:
            state = state.with_location(location)
        return state

    def with_time(self, time: float) -> SimulatorState:
        """Return a copy with time clamped to [0, 24]."""
        return replace(self, time=clamp_time(time))

    def with_season(self, season: SeasonKey | str) -> SimulatorState:
        return replace(self, season=SeasonKey.parse(season))

    def with_location(self, location: LocationKey | str) -> SimulatorState:
        return replace(self, location=LocationKey.parse(location))

    def reset(self) -> SimulatorState:
        """Return the default state."""
        return DEFAULT_STATE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "time": self.time,
            "season": self.season.value,
            "location": self.location.value,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> SimulatorState:
        """Restore a state, filling missing fields from the defaults.

        Unknown season or location keys raise instead of being kept.
        """
        if not isinstance(payload, dict):
            raise TypeError("state payload must be a dictionary.")
        return cls.create(
            time=payload.get("time"),
            season=payload.get("season"),
            location=payload.get("location"),
        )


DEFAULT_STATE = SimulatorState()
