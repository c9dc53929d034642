"""
Tests for the command line interface.
"""

import json

from typer.testing import CliRunner

from conftest import ALL_SLOTS, sentence
from freeslots import __version__
from freeslots.cli.app import app

runner = CliRunner()

PAYLOAD = {
    "calendars": {
        "me@example.com": {
            "busy": [{"start": "2025-01-01T14:00:00Z", "end": "2025-01-01T15:00:00Z"}]
        }
    }
}


def test_check_payload_file(tmp_path):
    """The sentence is printed for a payload file."""
    payload_file = tmp_path / "busy.json"
    payload_file.write_text(json.dumps(PAYLOAD), encoding="utf-8")

    result = runner.invoke(app, ["check", str(payload_file), "--offset=-5"])

    assert result.exit_code == 0
    assert sentence(ALL_SLOTS[2:]) in result.output


def test_check_stdin():
    """Without a file the payload is read from stdin."""
    result = runner.invoke(app, ["check"], input=json.dumps(PAYLOAD))

    assert result.exit_code == 0
    assert "10am to 10:30am" not in result.output
    assert "9:30am to 10am, 11am to 11:30am" in result.output


def test_check_empty_stdin():
    result = runner.invoke(app, ["check"], input="")

    assert result.exit_code == 0
    assert sentence(ALL_SLOTS) in result.output


def test_check_malformed_payload():
    result = runner.invoke(app, ["check"], input="not json")

    assert result.exit_code == 1
    assert "Error" in result.output


def test_check_with_config_file(tmp_path):
    config_file = tmp_path / "freeslots.yaml"
    config_file.write_text("utc_offset_hours: -5\n", encoding="utf-8")

    result = runner.invoke(
        app, ["check", "--config", str(config_file)], input=json.dumps(PAYLOAD)
    )

    assert result.exit_code == 0
    assert sentence(ALL_SLOTS[2:]) in result.output


def test_check_missing_config(tmp_path):
    result = runner.invoke(
        app, ["check", "--config", str(tmp_path / "missing.yaml")], input=""
    )

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_grid():
    result = runner.invoke(app, ["grid"])

    assert result.exit_code == 0
    assert "18 slots of 30 minutes" in result.output
    assert "5:30pm" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
