"""Tests for TimeService and service wiring."""

from datetime import datetime
from pathlib import Path

import pytest

from chronozone.config.settings import ChronoSettings
from chronozone.domain.ports import get_clock, get_timezone_service
from chronozone.infrastructure.clock import SystemClock
from chronozone.infrastructure.timezones import ZoneInfoTimezoneService
from chronozone.services.timeops import TimeService, configure_services


@pytest.fixture
def service(tz_service: ZoneInfoTimezoneService) -> TimeService:
    return TimeService()


class TestDiff:
    def test_calendar_fields(self, service: TimeService) -> None:
        result = service.diff(
            datetime(2020, 1, 1),
            datetime(2021, 2, 3, 4, 5, 6, 7000),
            timezone_id="UTC",
        )
        assert result.ok is True
        assert result.op == "diff"
        data = result.data
        assert (data["years"], data["months"], data["days"]) == (1, 1, 2)
        assert (data["hours"], data["minutes"], data["seconds"], data["milliseconds"]) == (4, 5, 6, 7)
        assert data["summary"] == "1 year, 1 month"
        assert data["start"]["timezone_id"] == "UTC"

    def test_weeks_summary(self, service: TimeService) -> None:
        result = service.diff(datetime(2008, 10, 20), datetime(2010, 3, 5))
        assert result.data["summary"] == "1 year, 4 months"
        assert result.data["days"] == 13
        assert result.data["weeks_in_month"] == 1
        assert result.data["days_remainder_weeks"] == 6

    def test_end_read_in_other_zone(self, service: TimeService) -> None:
        result = service.diff(
            datetime(2024, 1, 1, 0, 0),
            datetime(2024, 1, 1, 12, 0),
            timezone_id="America/New_York",
            end_timezone_id="Europe/London",
        )
        assert result.ok is True
        assert result.data["hours"] == 7
        assert result.data["end"]["timezone_id"] == "America/New_York"
        assert result.data["end"]["local_datetime"] == "2024-01-01T07:00:00"
        assert result.data["summary"] == "7 hours, 0 minutes"
        assert result.warnings == [
            "END 2024-01-01T12:00:00 (Europe/London) measured as 2024-01-01T07:00:00 (America/New_York)"
        ]

    def test_reversed_endpoints(self, service: TimeService) -> None:
        result = service.diff(datetime(2024, 3, 1), datetime(2024, 1, 1))
        assert result.data["months"] == 2
        assert result.warnings == []

    def test_unknown_zone(self, service: TimeService) -> None:
        result = service.diff(
            datetime(2024, 1, 1), datetime(2024, 1, 2), timezone_id="Nowhere/Atlantis", end_timezone_id="UTC"
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "TIMEZONE_NOT_FOUND"
        assert result.error.detail == {"timezone_id": "Nowhere/Atlantis"}


    def test_same_zone_gap_reading(self, service: TimeService) -> None:
        result = service.diff(
            datetime(2024, 3, 10, 2, 30), datetime(2024, 3, 12, 0, 0), timezone_id="America/New_York"
        )
        assert result.ok is True
        assert (result.data["days"], result.data["hours"], result.data["minutes"]) == (1, 21, 30)
        assert result.data["start"]["utc"] is None
        assert result.data["end"]["utc"] == "2024-03-12T04:00:00+00:00"

    def test_same_unknown_zone(self, service: TimeService) -> None:
        result = service.diff(datetime(2024, 1, 1), datetime(2024, 1, 2), timezone_id="Nowhere/Atlantis")
        assert result.ok is True
        assert result.data["summary"] == "1 day, 0 hours"
        assert result.data["start"]["utc"] is None

class TestConvert:
    def test_windows_zones(self, service: TimeService) -> None:
        result = service.convert(
            datetime(1955, 9, 26, 1, 2, 3), "Mountain Standard Time", "Eastern Standard Time"
        )
        assert result.ok is True
        assert result.data["target"]["local_datetime"] == "1955-09-26T03:02:03"
        assert result.data["source"]["utc"] == result.data["target"]["utc"]
        assert result.data["target"]["utc"] == "1955-09-26T07:02:03+00:00"

    def test_gap_error(self, service: TimeService) -> None:
        result = service.convert(datetime(2024, 3, 10, 2, 30), "America/New_York", "UTC")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_LOCAL_TIME"
        assert result.error.detail == {
            "timezone_id": "America/New_York",
            "local_datetime": "2024-03-10T02:30:00",
        }

    def test_unknown_target(self, service: TimeService) -> None:
        result = service.convert(datetime(2024, 1, 1), "UTC", "Mars/Olympus")
        assert result.ok is False
        assert result.error is not None
        assert "Mars/Olympus" in result.error.message


class TestNow:
    def test_zone(self, service: TimeService) -> None:
        result = service.now("Asia/Tokyo")
        assert result.ok is True
        assert result.data["now"] == {
            "local_datetime": "2024-01-15T21:00:00",
            "timezone_id": "Asia/Tokyo",
            "utc": "2024-01-15T12:00:00+00:00",
        }

    def test_defaults_to_utc(self, service: TimeService) -> None:
        assert service.now().data["now"]["local_datetime"] == "2024-01-15T12:00:00"

    def test_unknown_zone(self, service: TimeService) -> None:
        result = service.now("Nowhere/Atlantis")
        assert result.ok is False


class TestCompare:
    @pytest.mark.parametrize(
        "second,expected,relation,seconds",
        [
            (datetime(1955, 9, 26, 3, 2, 3), 0, "equal", 0.0),
            (datetime(1955, 9, 26, 3, 2, 4), -1, "before", -1.0),
            (datetime(1955, 9, 26, 2, 2, 3), 1, "after", 3600.0),
        ],
    )
    def test_relation(
        self,
        service: TimeService,
        second: datetime,
        expected: int,
        relation: str,
        seconds: float,
    ) -> None:
        result = service.compare(
            datetime(1955, 9, 26, 1, 2, 3), "Mountain Standard Time", second, "Eastern Standard Time"
        )
        assert result.ok is True
        assert result.data["result"] == expected
        assert result.data["relation"] == relation
        assert result.data["difference_seconds"] == seconds

    def test_unknown_zone(self, service: TimeService) -> None:
        result = service.compare(datetime(2024, 1, 1), "UTC", datetime(2024, 1, 1), "Nowhere/Atlantis")
        assert result.ok is False


    def test_same_unknown_zone_still_ordered(self, service: TimeService) -> None:
        result = service.compare(
            datetime(2024, 1, 1, 10, 0), "Nowhere/Atlantis", datetime(2024, 1, 1, 11, 0), "Nowhere/Atlantis"
        )
        assert result.ok is True
        assert result.data["relation"] == "before"
        assert result.data["difference_seconds"] is None
        assert result.data["first"]["utc"] is None

class TestConfigureServices:
    def test_installs_configured_services(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CHRONOZONE_CONFIG", raising=False)
        (tmp_path / "chronozone.toml").write_text(
            '[timezones]\nnonexistent = "shift_forward"\n'
            '[timezones.aliases]\nHQ = "Europe/Berlin"\n'
            '[clock]\nlocal_timezone = "Asia/Kolkata"\n'
        )
        configure_services(ChronoSettings.from_cli(start=tmp_path))

        service = get_timezone_service()
        assert isinstance(service, ZoneInfoTimezoneService)
        assert service.nonexistent == "shift_forward"
        assert service.resolve("HQ") is service.resolve("Europe/Berlin")
        clock = get_clock()
        assert isinstance(clock, SystemClock)
        assert clock.local_timezone_id() == "Asia/Kolkata"

    def test_from_settings_uses_aliases(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CHRONOZONE_CONFIG", raising=False)
        (tmp_path / "chronozone.toml").write_text('[timezones.aliases]\nHQ = "Asia/Tokyo"\n')
        svc = TimeService.from_settings(ChronoSettings.from_cli(start=tmp_path))
        result = svc.convert(datetime(2024, 1, 1, 9, 0), "HQ", "UTC")
        assert result.data["target"]["local_datetime"] == "2024-01-01T00:00:00"
