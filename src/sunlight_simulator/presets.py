"""Static season and location reference tables."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from sunlight_simulator.contracts import (
    Location,
    LocationKey,
    Season,
    SeasonKey,
    UnknownLocationError,
)

logger = logging.getLogger(__name__)

SEASONS: Mapping[SeasonKey, Season] = MappingProxyType(
    {
        SeasonKey.SUMMER: Season(name="夏至", declination=23.5),
        SeasonKey.WINTER: Season(name="冬至", declination=-23.5),
        SeasonKey.SPRING: Season(name="春分", declination=0.0),
        SeasonKey.AUTUMN: Season(name="秋分", declination=0.0),
    }
)

JAPAN_LOCATIONS: Mapping[LocationKey, Location] = MappingProxyType(
    {
        LocationKey.TOKYO: Location(name="東京", latitude=35.6762, longitude=139.6503),
        LocationKey.OSAKA: Location(name="大阪", latitude=34.6937, longitude=135.5023),
        LocationKey.FUKUOKA: Location(name="福岡", latitude=33.5904, longitude=130.4017),
        LocationKey.SAPPORO: Location(name="札幌", latitude=43.0642, longitude=141.3469),
        LocationKey.NAHA: Location(name="那覇", latitude=26.2124, longitude=127.6792),
    }
)

DEFAULT_LOCATION = LocationKey.TOKYO


def get_season(key: SeasonKey | str) -> Season:
    """Return the preset season for `key`, raising UnknownSeasonError otherwise."""
    return SEASONS[SeasonKey.parse(key)]


def get_location(key: LocationKey | str) -> Location:
    """Return the preset location for `key`, raising UnknownLocationError otherwise."""
    return JAPAN_LOCATIONS[LocationKey.parse(key)]


def resolve_location(
    key: LocationKey | str | None,
    default: LocationKey | str = DEFAULT_LOCATION,
) -> tuple[LocationKey, Location]:
    """Resolve a location key, falling back to `default` for missing or unknown keys.

    This is the lenient lookup used by display code that must always show
    some location. The fallback itself must be a valid preset key.
    """
    fallback = LocationKey.parse(default)
    if key is None:
        return fallback, JAPAN_LOCATIONS[fallback]
    try:
        resolved = LocationKey.parse(key)
    except UnknownLocationError:
        logger.debug("Unknown location %r; using default %s", key, fallback.value)
        resolved = fallback
    return resolved, JAPAN_LOCATIONS[resolved]
