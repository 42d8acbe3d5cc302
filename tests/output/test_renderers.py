"""Tests for operation-specific Rich renderers."""

from chronozone.output.console import create_console, get_output, style_for_relation
from chronozone.output.renderers import render_quiet, render_result, render_summary
from chronozone.services.result import ServiceError, ServiceResult


def _zoned(local: str, zone: str, utc: str | None) -> dict[str, str | None]:
    return {"local_datetime": local, "timezone_id": zone, "utc": utc}


DIFF = ServiceResult(
    ok=True,
    op="diff",
    data={
        "start": _zoned("2020-01-01T00:00:00", "UTC", "2020-01-01T00:00:00+00:00"),
        "end": _zoned("2021-02-03T04:05:06", "UTC", "2021-02-03T04:05:06+00:00"),
        "years": 1,
        "months": 1,
        "days": 2,
        "hours": 4,
        "minutes": 5,
        "seconds": 6,
        "milliseconds": 0,
        "weeks_in_month": 0,
        "days_remainder_weeks": 2,
        "summary": "1 year, 1 month",
    },
)

CONVERT = ServiceResult(
    ok=True,
    op="convert",
    data={
        "source": _zoned("1955-09-26T01:02:03", "Mountain Standard Time", "1955-09-26T07:02:03+00:00"),
        "target": _zoned("1955-09-26T03:02:03", "Eastern Standard Time", "1955-09-26T07:02:03+00:00"),
    },
)

COMPARE = ServiceResult(
    ok=True,
    op="compare",
    data={
        "first": _zoned("2024-01-01T00:00:00", "UTC", "2024-01-01T00:00:00+00:00"),
        "second": _zoned("2024-01-01T09:00:01", "Asia/Tokyo", "2024-01-01T00:00:01+00:00"),
        "result": -1,
        "relation": "before",
        "difference_seconds": -1.0,
    },
)

NOW = ServiceResult(
    ok=True,
    op="now",
    data={"now": _zoned("2024-01-15T21:00:00", "Asia/Tokyo", "2024-01-15T12:00:00+00:00")},
)


class TestRenderDiff:
    def test_breakdown(self) -> None:
        output = render_result(DIFF)
        assert "diff" in output
        assert "summary: 1 year, 1 month" in output
        assert "Years" in output
        assert "Milliseconds" not in output
        assert "[UTC]" in output

    def test_lines_use_single_separator(self) -> None:
        lines = render_result(DIFF).splitlines()
        assert lines[0] == "OK  diff"
        assert "  summary: 1 year, 1 month" in lines
        assert "  start: 2020-01-01T00:00:00  [UTC]" in lines

    def test_verbose_adds_week_split_and_utc(self) -> None:
        output = render_result(DIFF, verbose=True)
        assert "Weeks In Month" in output
        assert "Milliseconds" in output
        assert "utc=2021-02-03T04:05:06+00:00" in output


class TestRenderConvert:
    def test_both_readings(self) -> None:
        output = render_result(CONVERT)
        assert "1955-09-26T01:02:03" in output
        assert "[Eastern Standard Time]" in output
        assert "utc=" not in output


class TestRenderCompare:
    def test_relation(self) -> None:
        output = render_result(COMPARE)
        assert "relation: before" in output
        assert "difference_seconds: -1.0" in output

    def test_without_utc_projection(self) -> None:
        data = dict(COMPARE.data)
        data["first"] = _zoned("2024-01-01T00:00:00", "Nowhere/Atlantis", None)
        data["second"] = _zoned("2024-01-01T00:00:01", "Nowhere/Atlantis", None)
        data["difference_seconds"] = None
        output = render_result(ServiceResult(ok=True, op="compare", data=data), verbose=True)
        assert "relation: before" in output
        assert "difference_seconds" not in output
        assert "utc=n/a" in output


class TestRenderNow:
    def test_reading(self) -> None:
        assert "2024-01-15T21:00:00" in render_result(NOW)


class TestRenderError:
    def test_message(self) -> None:
        result = ServiceResult(
            ok=False,
            op="now",
            error=ServiceError(code="TIMEZONE_NOT_FOUND", message="Unknown timezone: 'Mars'"),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "Unknown timezone: 'Mars'" in output

    def test_verbose_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="now",
            error=ServiceError(code="X", message="bad", detail={"timezone_id": "Mars"}),
        )
        assert "timezone_id: Mars" in render_result(result, verbose=True)
        assert "timezone_id" not in render_result(result)


class TestRenderSummary:
    def test_per_op(self) -> None:
        assert render_summary(DIFF) == "1 year, 1 month"
        assert render_summary(CONVERT) == "1955-09-26T03:02:03"
        assert render_summary(NOW) == "2024-01-15T21:00:00"
        assert render_summary(COMPARE) == "before"

    def test_quiet_matches_summary(self) -> None:
        assert render_quiet(CONVERT) == render_summary(CONVERT)


class TestConsole:
    def test_buffered_output(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_relation_styles(self) -> None:
        assert style_for_relation("after") == "cz.after"
        assert style_for_relation("sideways") == ""
