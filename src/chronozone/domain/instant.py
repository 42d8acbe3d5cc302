"""ZonedInstant — a wall-clock reading qualified by a timezone id.

The local reading is stored verbatim and is always wall-clock time *in*
``timezone_id``. The absolute instant is derived on demand through the
timezone service, so rule updates are picked up at read time rather than
frozen at construction. Constructing an instance never resolves the zone;
an unknown id only fails once a zone-dependent operation runs.

Zone-independent operations (construction, arithmetic on the local
reading, same-zone comparison) cannot fail. ``to_utc``, ``convert_to_zone``,
cross-zone comparison, and ``now`` may raise ``TimezoneNotFound``, or
whatever the timezone service reports for a local time in a DST gap.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from chronozone.domain.calendar import round_to_minute
from chronozone.domain.ports import get_clock, get_timezone_service

UTC_TIMEZONE_ID = "UTC"


def safe_timezone_id(timezone_id: str | None) -> str:
    """Map an empty or missing id to UTC; any other id is returned as is."""
    if not timezone_id:
        return UTC_TIMEZONE_ID
    return timezone_id


def _sign(value: timedelta) -> int:
    if value > timedelta(0):
        return 1
    if value < timedelta(0):
        return -1
    return 0


@dataclass(frozen=True, eq=False)
class ZonedInstant:
    """An immutable (local date-time, timezone id) pair.

    Attributes:
        local_datetime: Naive wall-clock reading in ``timezone_id``. An aware
            value passed in has its ``tzinfo`` dropped; the fields are kept
            exactly as given, not shifted.
        timezone_id: Identifier resolvable by the timezone service. Empty or
            ``None`` means UTC.
    """

    local_datetime: datetime
    timezone_id: str = UTC_TIMEZONE_ID

    def __post_init__(self) -> None:
        if self.local_datetime.tzinfo is not None:
            object.__setattr__(self, "local_datetime", self.local_datetime.replace(tzinfo=None))
        object.__setattr__(self, "timezone_id", safe_timezone_id(self.timezone_id))

    # --- Factories ---

    @classmethod
    def now(cls, timezone_id: str | None) -> ZonedInstant:
        """The current wall-clock reading in *timezone_id*."""
        zone = safe_timezone_id(timezone_id)
        service = get_timezone_service()
        local = service.from_utc(get_clock().now_utc(), service.resolve(zone))
        return cls(local, zone)

    @classmethod
    def utc_now(cls) -> ZonedInstant:
        """The current UTC reading."""
        return cls(get_clock().now_utc(), UTC_TIMEZONE_ID)

    @classmethod
    def local_now(cls) -> ZonedInstant:
        """The process-local wall-clock reading paired with the local zone id."""
        clock = get_clock()
        return cls(clock.now_local(), clock.local_timezone_id())

    # --- Projections ---

    def to_utc(self) -> datetime:
        """The absolute instant as an aware UTC ``datetime``."""
        service = get_timezone_service()
        return service.to_utc(self.local_datetime, service.resolve(self.timezone_id))

    def to_offset_datetime(self) -> datetime:
        """The local reading carrying its zone's UTC offset at that moment."""
        offset = self.local_datetime - self.to_utc().replace(tzinfo=None)
        return self.local_datetime.replace(tzinfo=timezone(offset))

    def local_datetime_in(self, timezone_id: str | None) -> datetime:
        """The naive wall-clock reading of this instant in another zone."""
        service = get_timezone_service()
        return service.convert(
            self.local_datetime,
            service.resolve(self.timezone_id),
            service.resolve(safe_timezone_id(timezone_id)),
        )

    def convert_to_zone(self, timezone_id: str | None) -> ZonedInstant:
        """Re-express this instant in *timezone_id*.

        The absolute instant is unchanged; only the local reading moves.
        Converting to the current zone returns ``self``.
        """
        target = safe_timezone_id(timezone_id)
        if target == self.timezone_id:
            return self
        return ZonedInstant(self.local_datetime_in(target), target)

    def date(self) -> ZonedInstant:
        """Midnight at the start of the local date, same zone."""
        midnight = self.local_datetime.replace(hour=0, minute=0, second=0, microsecond=0)
        return dataclasses.replace(self, local_datetime=midnight)

    # --- Arithmetic on the local reading ---

    def add(self, duration: timedelta) -> ZonedInstant:
        """Add *duration* to the local reading. The zone is unchanged."""
        return dataclasses.replace(self, local_datetime=self.local_datetime + duration)

    def add_days(self, value: float) -> ZonedInstant:
        """Add a whole or fractional number of days; may be negative."""
        return self.add(timedelta(days=value))

    def add_hours(self, value: float) -> ZonedInstant:
        """Add a whole or fractional number of hours; may be negative."""
        return self.add(timedelta(hours=value))

    def add_minutes(self, value: float) -> ZonedInstant:
        """Add a whole or fractional number of minutes; may be negative."""
        return self.add(timedelta(minutes=value))

    def round_to_nearest_minute(self) -> ZonedInstant:
        """Drop seconds and sub-seconds, rounding up from 30 seconds."""
        return dataclasses.replace(self, local_datetime=round_to_minute(self.local_datetime))

    def subtract(self, other: ZonedInstant) -> timedelta:
        """Signed difference of the two absolute instants, whatever their zones."""
        return self.to_utc() - other.to_utc()

    # --- Ordering ---

    def compare(self, other: ZonedInstant) -> int:
        """Return -1, 0, or 1 as this instant is before, at, or after *other*.

        Instants in the same zone compare their local readings directly and
        never touch the timezone service. Otherwise both sides are projected
        to UTC.
        """
        if other is self:
            return 0
        if self.timezone_id == other.timezone_id:
            return _sign(self.local_datetime - other.local_datetime)
        return _sign(self.to_utc() - other.to_utc())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: ZonedInstant) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: ZonedInstant) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: ZonedInstant) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: ZonedInstant) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        """Hash of the UTC projection, so equal instants in different zones collide.

        Unlike same-zone ``==``, hashing always resolves the zone: an
        instance in an unknown zone raises ``TimezoneNotFound`` and a
        reading inside a DST gap raises whatever the timezone service
        raises for it (``InvalidLocalTime`` by default). Such instances
        cannot be set members or dict keys.
        """
        return hash(self.to_utc())

    def __add__(self, other: object) -> ZonedInstant:
        if not isinstance(other, timedelta):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> timedelta:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        return f"DateTime: {self.local_datetime}, TimeZoneId: {self.timezone_id}"
