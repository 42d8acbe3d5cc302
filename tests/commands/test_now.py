"""Tests for the now CLI command."""

from __future__ import annotations

import json
from datetime import datetime

import pytest
from click.testing import CliRunner

from chronozone.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestNowCommand:
    def test_default_zone_is_utc(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "now"])
        assert result.exit_code == 0
        reading = json.loads(result.stdout)["data"]["now"]
        assert reading["timezone_id"] == "UTC"
        assert reading["utc"].startswith(reading["local_datetime"][:16])

    def test_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "now", "Asia/Kolkata"])
        assert result.exit_code == 0
        datetime.fromisoformat(result.stdout.strip())

    def test_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now", "Pacific Standard Time"])
        assert result.exit_code == 0
        assert "Pacific Standard Time" in result.output

    def test_unknown_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["now", "Nowhere/Atlantis"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
