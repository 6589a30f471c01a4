"""Tests for the combined data-panel report."""

from __future__ import annotations

import pytest

from sunlight_simulator.contracts import LightCondition
from sunlight_simulator.report import (
    compute_sun_report,
    format_elevation,
    format_intensity,
    format_shadow_length,
)
from sunlight_simulator.state import SimulatorState


def test_summer_noon_report() -> None:
    """Summer noon in Tokyo is normal daylight with a short shadow."""
    report = compute_sun_report(SimulatorState.create())

    assert report.location.name == "東京"
    assert report.season.name == "夏至"
    assert report.light_condition.type is LightCondition.NORMAL
    assert report.shadow_length == pytest.approx(0.2158, abs=1e-3)
    assert report.intensity == pytest.approx(0.9775, abs=1e-3)
    assert report.sun_visible

    display = report.to_dict()["display"]
    assert display == {
        "elevation": "77.8°",
        "azimuth": "0.0°",
        "shadow_length": "0.2倍",
        "intensity": "98%",
    }


def test_winter_midnight_report() -> None:
    """Winter midnight has no shadow, no light and a hidden sun."""
    report = compute_sun_report(SimulatorState.create(time=0, season="winter"))

    assert report.shadow_length is None
    assert report.intensity == 0.0
    assert report.light_condition.type is LightCondition.NIGHT
    assert not report.sun_visible
    assert report.position.y == -10.0

    display = report.to_dict()["display"]
    assert display["elevation"] == "地平線下"
    assert display["shadow_length"] == "--"
    assert display["intensity"] == "0%"


def test_report_serializes_nested_contracts() -> None:
    """The payload embeds state, presets and position as plain values."""
    payload = compute_sun_report(
        SimulatorState.create(time=9, season="autumn", location="fukuoka"),
        distance=50.0,
    ).to_dict()

    assert payload["state"] == {"time": 9.0, "season": "autumn", "location": "fukuoka"}
    assert payload["location"]["latitude"] == pytest.approx(33.5904)
    assert payload["season"]["declination"] == 0.0
    assert set(payload["position"]) == {"x", "y", "z", "elevation", "azimuth"}
    assert isinstance(payload["light_condition"]["type"], str)


def test_format_helpers() -> None:
    """Display helpers mirror the data panel's labels."""
    assert format_elevation(-18.5) == "地平線下"
    assert format_elevation(-18.0) == "-18.0°"
    assert format_shadow_length(None) == "--"
    assert format_shadow_length(20.5) == "∞"
    assert format_shadow_length(20.0) == "20.0倍"
    assert format_shadow_length(1.04) == "1.0倍"
    assert format_intensity(0.3) == "30%"
