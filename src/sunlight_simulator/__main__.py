"""Command-line entrypoint for sunlight_simulator."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from sunlight_simulator.contracts import LocationKey, SeasonKey
from sunlight_simulator.presets import JAPAN_LOCATIONS, SEASONS
from sunlight_simulator.report import compute_sun_report
from sunlight_simulator.state import SimulatorState


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunlight_simulator",
        description="Sunlight simulator command-line interface.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    subparsers = parser.add_subparsers(dest="command")
    report = subparsers.add_parser(
        "report",
        help="Print sun position and lighting data for one time/season/location as JSON.",
    )
    report.add_argument("--time", type=float, default=None)
    report.add_argument("--season", choices=[key.value for key in SeasonKey], default=None)
    report.add_argument("--location", choices=[key.value for key in LocationKey], default=None)
    report.add_argument("--distance", type=float, default=80.0)

    subparsers.add_parser("presets", help="List season and location presets as JSON.")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "report":
        if args.distance <= 0.0:
            parser.error("--distance must be positive")
        state = SimulatorState.create(time=args.time, season=args.season, location=args.location)
        report = compute_sun_report(state, distance=args.distance)
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if args.command == "presets":
        payload = {
            "seasons": {key.value: season.to_dict() for key, season in SEASONS.items()},
            "locations": {key.value: loc.to_dict() for key, loc in JAPAN_LOCATIONS.items()},
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
