"""Exception taxonomy for timezone-dependent operations.

Zone resolution failures are never transient: nothing here is retried,
and nothing is silently replaced with UTC or the process-local zone.
"""

from __future__ import annotations

from datetime import datetime


class ChronozoneError(Exception):
    """Base class for all chronozone errors."""

    code = "CHRONOZONE_ERROR"


class TimezoneNotFound(ChronozoneError, KeyError):
    """The timezone service does not recognize *timezone_id*."""

    code = "TIMEZONE_NOT_FOUND"

    def __init__(self, timezone_id: str) -> None:
        super().__init__(timezone_id)
        self.timezone_id = timezone_id

    def __str__(self) -> str:
        return f"Unknown timezone: {self.timezone_id!r}"


class InvalidLocalTime(ChronozoneError, ValueError):
    """A local reading falls in a DST gap and does not exist in its zone."""

    code = "INVALID_LOCAL_TIME"

    def __init__(self, local_datetime: datetime, timezone_id: str) -> None:
        super().__init__(local_datetime, timezone_id)
        self.local_datetime = local_datetime
        self.timezone_id = timezone_id

    def __str__(self) -> str:
        return f"{self.local_datetime.isoformat()} does not exist in {self.timezone_id}"
