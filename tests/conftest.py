"""Shared pytest fixtures and test helpers for chronozone tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from chronozone.domain.ports import reset_services, use_services
from chronozone.infrastructure.timezones import ZoneInfoTimezoneService

FIXED_UTC = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


class FixedClock:
    """Clock frozen at one instant, with a configurable local zone."""

    def __init__(
        self,
        utc: datetime = FIXED_UTC,
        local: datetime | None = None,
        local_zone: str = "America/Denver",
    ) -> None:
        self.utc = utc
        self.local = local or datetime(2024, 1, 15, 5, 0, 0)
        self.local_zone = local_zone

    def now_utc(self) -> datetime:
        return self.utc

    def now_local(self) -> datetime:
        return self.local

    def local_timezone_id(self) -> str:
        return self.local_zone


@pytest.fixture(autouse=True)
def _reset_services() -> Generator[None]:
    """Each test starts from the default, lazily-built services."""
    reset_services()
    yield
    reset_services()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A frozen clock installed as the process-wide clock."""
    clock = FixedClock()
    use_services(clock=clock)
    return clock


@pytest.fixture
def tz_service(fixed_clock: FixedClock) -> ZoneInfoTimezoneService:
    """A fresh zoneinfo service bound to the fixed clock."""
    service = ZoneInfoTimezoneService(clock=fixed_clock)
    use_services(timezone_service=service)
    return service


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides in the env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHRONOZONE_CONFIG", raising=False)
