"""Demo: sweep one day in half-hour steps and print the lighting timeline."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sunlight_simulator.report import compute_sun_report, format_elevation, format_shadow_length  # noqa: E402
from sunlight_simulator.presets import resolve_location  # noqa: E402
from sunlight_simulator.state import SimulatorState  # noqa: E402


def main() -> int:
    """Print elevation, azimuth, shadow and light condition every 30 minutes."""
    season = sys.argv[1] if len(sys.argv) > 1 else "summer"
    location, _ = resolve_location(sys.argv[2] if len(sys.argv) > 2 else None)
    state = SimulatorState.create(season=season, location=location)

    print(f"=== Sunlight timeline: {season} / {location.value} ===")
    for step in range(49):
        report = compute_sun_report(state.with_time(step / 2))
        print(
            f"{report.state.time:5.1f}h "
            f"elev={format_elevation(report.position.elevation):>8} "
            f"az={report.position.azimuth:6.1f} "
            f"shadow={format_shadow_length(report.shadow_length):>7} "
            f"{report.light_condition.type.value}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
