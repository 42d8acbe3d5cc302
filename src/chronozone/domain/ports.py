"""Service contracts consumed by the value types.

The timezone database and the wall clock are external collaborators.
:class:`TimezoneService` and :class:`Clock` describe what the domain needs
from them; :mod:`chronozone.infrastructure` supplies the default
implementations, which are created lazily on first use and can be replaced
with :func:`use_services` (tests install a fixed clock this way).

:class:`IntervalLike` and :class:`InstantLike` are the capability sets of
the two value types, for callers that want to accept substitutes.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, tzinfo
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from chronozone.infrastructure.timezones import ZoneConverter


@runtime_checkable
class TimezoneService(Protocol):
    """Lookup-by-id access to timezone offset/DST rules."""

    def resolve(self, timezone_id: str) -> tzinfo:
        """Return the rules for *timezone_id* or raise ``TimezoneNotFound``."""
        ...

    def to_utc(self, local_datetime: datetime, rules: tzinfo) -> datetime:
        """Project a naive local reading to an aware UTC datetime."""
        ...

    def from_utc(self, instant: datetime, rules: tzinfo) -> datetime:
        """Return the naive local reading of an absolute instant."""
        ...

    def convert(self, local_datetime: datetime, source_rules: tzinfo, target_rules: tzinfo) -> datetime:
        """Re-express a naive local reading from one zone in another."""
        ...

    def converter(self, timezone_id: str | None) -> ZoneConverter:
        """Return the cached per-zone convertor for *timezone_id*."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Source of the current time."""

    def now_utc(self) -> datetime:
        """Current absolute instant, aware, in UTC."""
        ...

    def now_local(self) -> datetime:
        """Current process-local wall-clock reading, naive."""
        ...

    def local_timezone_id(self) -> str:
        """Identifier of the zone :meth:`now_local` reads in."""
        ...


@runtime_checkable
class IntervalLike(Protocol):
    """Read-only surface of a calendar interval."""

    @property
    def years(self) -> int: ...

    @property
    def months(self) -> int: ...

    @property
    def days(self) -> int: ...

    @property
    def hours(self) -> int: ...

    @property
    def minutes(self) -> int: ...

    @property
    def seconds(self) -> int: ...

    @property
    def milliseconds(self) -> int: ...

    @property
    def weeks_in_month(self) -> int: ...

    @property
    def days_remainder_weeks(self) -> int: ...

    def get_duration_summary(self) -> str: ...


@runtime_checkable
class InstantLike(Protocol):
    """Operations every timezone-qualified instant provides."""

    @property
    def local_datetime(self) -> datetime: ...

    @property
    def timezone_id(self) -> str: ...

    def to_utc(self) -> datetime: ...

    def convert_to_zone(self, timezone_id: str | None) -> Self: ...

    def add_days(self, value: float) -> Self: ...

    def add_hours(self, value: float) -> Self: ...

    def add_minutes(self, value: float) -> Self: ...

    def add(self, duration: timedelta) -> Self: ...

    def round_to_nearest_minute(self) -> Self: ...

    def subtract(self, other: Self) -> timedelta: ...

    def compare(self, other: Self) -> int: ...


# ---------------------------------------------------------------------------
# Process-wide service wiring
# ---------------------------------------------------------------------------

_lock = threading.Lock()
_timezone_service: TimezoneService | None = None
_clock: Clock | None = None


def use_services(
    *,
    timezone_service: TimezoneService | None = None,
    clock: Clock | None = None,
) -> None:
    """Install the services the value types use. ``None`` leaves a slot unchanged."""
    global _timezone_service, _clock
    with _lock:
        if timezone_service is not None:
            _timezone_service = timezone_service
        if clock is not None:
            _clock = clock


def reset_services() -> None:
    """Drop installed services so the defaults are rebuilt on next use."""
    global _timezone_service, _clock
    with _lock:
        _timezone_service = None
        _clock = None


def get_timezone_service() -> TimezoneService:
    """Return the active timezone service, creating the default on first use."""
    global _timezone_service
    service = _timezone_service
    if service is not None:
        return service
    from chronozone.infrastructure.timezones import ZoneInfoTimezoneService

    with _lock:
        if _timezone_service is None:
            _timezone_service = ZoneInfoTimezoneService()
        return _timezone_service


def get_clock() -> Clock:
    """Return the active clock, creating the system clock on first use."""
    global _clock
    clock = _clock
    if clock is not None:
        return clock
    from chronozone.infrastructure.clock import SystemClock

    with _lock:
        if _clock is None:
            _clock = SystemClock()
        return _clock
