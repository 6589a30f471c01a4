"""Smoke tests for the package CLI."""

from __future__ import annotations

import json

import pytest

from sunlight_simulator.__main__ import main


def test_cli_import_smoke() -> None:
    """Ensure CLI entrypoint can be imported and executed."""
    assert main([]) == 0


def test_cli_report_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    """`report` prints a JSON document for the requested state."""
    assert main(["report", "--time", "6", "--season", "spring", "--location", "tokyo"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["state"]["season"] == "spring"
    assert 250.0 < payload["position"]["azimuth"] < 290.0


def test_cli_presets(capsys: pytest.CaptureFixture[str]) -> None:
    """`presets` lists both tables."""
    assert main(["presets"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["locations"]["tokyo"]["name"] == "東京"


def test_cli_rejects_unknown_season() -> None:
    """Unknown choices exit with an argparse usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(["report", "--season", "monsoon"])
    assert excinfo.value.code == 2
