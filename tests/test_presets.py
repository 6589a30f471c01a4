"""Tests for the season and location reference tables."""

from __future__ import annotations

import pytest

from sunlight_simulator.contracts import LocationKey, SeasonKey, UnknownLocationError, UnknownSeasonError
from sunlight_simulator.presets import (
    DEFAULT_LOCATION,
    JAPAN_LOCATIONS,
    SEASONS,
    get_location,
    get_season,
    resolve_location,
)


def test_season_declinations() -> None:
    """Solstices sit at +/-23.5 degrees, equinoxes at zero."""
    assert SEASONS[SeasonKey.SUMMER].declination == 23.5
    assert SEASONS[SeasonKey.WINTER].declination == -23.5
    assert SEASONS[SeasonKey.SPRING].declination == 0.0
    assert SEASONS[SeasonKey.AUTUMN].declination == 0.0


def test_location_coordinates() -> None:
    """Preset cities carry their reference coordinates."""
    assert JAPAN_LOCATIONS[LocationKey.TOKYO].latitude == pytest.approx(35.6762, abs=1e-3)
    assert JAPAN_LOCATIONS[LocationKey.OSAKA].latitude == pytest.approx(34.6937, abs=1e-3)
    assert JAPAN_LOCATIONS[LocationKey.SAPPORO].latitude == pytest.approx(43.0642, abs=1e-3)
    assert JAPAN_LOCATIONS[LocationKey.NAHA].longitude == pytest.approx(127.6792, abs=1e-3)
    assert set(JAPAN_LOCATIONS) == set(LocationKey)


def test_tables_are_read_only() -> None:
    """Preset tables cannot be mutated at runtime."""
    with pytest.raises(TypeError):
        SEASONS[SeasonKey.SUMMER] = SEASONS[SeasonKey.WINTER]  # type: ignore[index]
    with pytest.raises(TypeError):
        del JAPAN_LOCATIONS[LocationKey.TOKYO]  # type: ignore[attr-defined]


def test_strict_lookups_accept_strings_and_members() -> None:
    """Both enum members and their string values resolve."""
    assert get_season("winter") is SEASONS[SeasonKey.WINTER]
    assert get_location(LocationKey.FUKUOKA).name == "福岡"


def test_strict_lookups_reject_unknown_keys() -> None:
    """Unknown keys raise domain errors that are also KeyError/ValueError."""
    with pytest.raises(UnknownSeasonError):
        get_season("monsoon")
    with pytest.raises(KeyError):
        get_location("kyoto")
    with pytest.raises(ValueError, match="unknown location: 'kyoto'"):
        get_location("kyoto")


def test_resolve_location_falls_back_to_default() -> None:
    """Lenient lookup returns the default location for unknown or missing keys."""
    key, location = resolve_location("kyoto")
    assert key is DEFAULT_LOCATION
    assert location is JAPAN_LOCATIONS[DEFAULT_LOCATION]

    key, _ = resolve_location(None, default="naha")
    assert key is LocationKey.NAHA

    key, location = resolve_location("sapporo")
    assert key is LocationKey.SAPPORO
    assert location.name == "札幌"


def test_resolve_location_rejects_unknown_default() -> None:
    """The fallback itself must be a preset key."""
    with pytest.raises(UnknownLocationError):
        resolve_location("kyoto", default="atlantis")
