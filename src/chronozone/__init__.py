"""chronozone — timezone-qualified instants and calendar intervals."""

from __future__ import annotations

from chronozone.domain.errors import ChronozoneError, InvalidLocalTime, TimezoneNotFound
from chronozone.domain.instant import UTC_TIMEZONE_ID, ZonedInstant
from chronozone.domain.interval import CalendarInterval, difference

__version__ = "0.1.0"

__all__ = [
    "UTC_TIMEZONE_ID",
    "CalendarInterval",
    "ChronozoneError",
    "InvalidLocalTime",
    "TimezoneNotFound",
    "ZonedInstant",
    "__version__",
    "difference",
]
