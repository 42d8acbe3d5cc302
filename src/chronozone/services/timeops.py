"""TimeService: zone conversion, calendar differences, and ordering.

Every operation builds :class:`ZonedInstant` values and returns a
ServiceResult. Zone failures (unknown id, local time in a DST gap) become
structured errors carrying the exception's code; they are never retried.

Operations whose readings share one zone work on the local readings and
succeed even when that zone cannot be resolved. The UTC projection in
their payload is then reported as ``None``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from chronozone.domain.errors import ChronozoneError
from chronozone.domain.instant import ZonedInstant
from chronozone.domain.interval import difference
from chronozone.domain.ports import use_services
from chronozone.infrastructure.clock import SystemClock
from chronozone.infrastructure.timezones import ZoneInfoTimezoneService
from chronozone.services.contracts import (
    CompareResultData,
    ConvertResultData,
    DiffResultData,
    NowResultData,
    dump_validated,
)
from chronozone.services.result import ServiceResult

if TYPE_CHECKING:
    from chronozone.config.settings import ChronoSettings

logger = logging.getLogger(__name__)

_RELATIONS = {-1: "before", 0: "equal", 1: "after"}


def configure_services(settings: ChronoSettings) -> None:
    """Install the timezone service and clock described by *settings*."""
    clock = SystemClock(settings.clock.local_timezone)
    service = ZoneInfoTimezoneService.from_config(settings.timezones, clock=clock)
    use_services(timezone_service=service, clock=clock)
    logger.debug(
        "Configured timezone service (windows_aliases=%s, nonexistent=%s)",
        settings.timezones.windows_aliases,
        settings.timezones.nonexistent,
    )


def _utc_or_none(instant: ZonedInstant) -> datetime | None:
    try:
        return instant.to_utc()
    except ChronozoneError as exc:
        logger.debug("No UTC projection for %s: %s", instant, exc)
        return None


def _reading(instant: ZonedInstant) -> dict[str, Any]:
    utc = _utc_or_none(instant)
    return {
        "local_datetime": instant.local_datetime.isoformat(),
        "timezone_id": instant.timezone_id,
        "utc": utc.isoformat() if utc is not None else None,
    }


def _failure(op: str, exc: ChronozoneError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult.failure(op, exc)


class TimeService:
    """Operations behind the CLI commands."""

    @classmethod
    def from_settings(cls, settings: ChronoSettings) -> TimeService:
        configure_services(settings)
        return cls()

    def diff(
        self,
        start: datetime,
        end: datetime,
        *,
        timezone_id: str | None = None,
        end_timezone_id: str | None = None,
    ) -> ServiceResult:
        """Calendar interval between two readings.

        *end* is read in *end_timezone_id* (default: *timezone_id*) and then
        re-expressed in the start zone, so both endpoints share one frame.
        That re-expression is reported as a warning.
        """
        op = "diff"
        warnings: list[str] = []
        first = ZonedInstant(start, timezone_id)
        second = ZonedInstant(end, end_timezone_id or first.timezone_id)
        if second.timezone_id != first.timezone_id:
            try:
                moved = second.convert_to_zone(first.timezone_id)
            except ChronozoneError as exc:
                return _failure(op, exc)
            warnings.append(
                f"END {second.local_datetime.isoformat()} ({second.timezone_id}) measured as "
                f"{moved.local_datetime.isoformat()} ({first.timezone_id})"
            )
            second = moved
        interval = difference(first.local_datetime, second.local_datetime)
        data = {
            "start": _reading(first),
            "end": _reading(second),
            **interval.model_dump(),
            "summary": interval.get_duration_summary(),
        }
        return ServiceResult.success(op, dump_validated(DiffResultData, data), warnings)

    def convert(
        self,
        local_datetime: datetime,
        source_timezone_id: str | None,
        target_timezone_id: str | None,
    ) -> ServiceResult:
        """Re-express a reading from one zone in another."""
        op = "convert"
        source = ZonedInstant(local_datetime, source_timezone_id)
        try:
            target = source.convert_to_zone(target_timezone_id)
        except ChronozoneError as exc:
            return _failure(op, exc)
        data = {"source": _reading(source), "target": _reading(target)}
        return ServiceResult.success(op, dump_validated(ConvertResultData, data))

    def now(self, timezone_id: str | None = None) -> ServiceResult:
        """The current wall-clock reading in a zone (UTC when omitted)."""
        op = "now"
        try:
            current = ZonedInstant.now(timezone_id)
        except ChronozoneError as exc:
            return _failure(op, exc)
        return ServiceResult.success(op, dump_validated(NowResultData, {"now": _reading(current)}))

    def compare(
        self,
        first_datetime: datetime,
        first_timezone_id: str | None,
        second_datetime: datetime,
        second_timezone_id: str | None,
    ) -> ServiceResult:
        """Order two zoned readings and report the absolute gap between them.

        ``difference_seconds`` is None when either reading has no UTC
        projection; the ordering itself is still reported for same-zone
        readings.
        """
        op = "compare"
        first = ZonedInstant(first_datetime, first_timezone_id)
        second = ZonedInstant(second_datetime, second_timezone_id)
        try:
            result = first.compare(second)
        except ChronozoneError as exc:
            return _failure(op, exc)
        first_utc, second_utc = _utc_or_none(first), _utc_or_none(second)
        gap = None
        if first_utc is not None and second_utc is not None:
            gap = (first_utc - second_utc).total_seconds()
        data = {
            "first": _reading(first),
            "second": _reading(second),
            "result": result,
            "relation": _RELATIONS[result],
            "difference_seconds": gap,
        }
        return ServiceResult.success(op, dump_validated(CompareResultData, data))
