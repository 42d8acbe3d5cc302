"""Timezone service backed by ``zoneinfo``.

Resolution is cached per id for the life of the process: the first lookup
of an id loads its rules, later lookups share the same object, and
nothing is ever invalidated. Reads are lock-free; inserts go through a
lock and keep whichever object got there first.

DST policy for local readings:

- Ambiguous (clock set back): the standard-time occurrence, i.e. the
  second one, is used.
- Nonexistent (clock set forward): ``"raise"`` raises ``InvalidLocalTime``;
  ``"shift_forward"`` moves the reading forward by the length of the gap.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING, Literal, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chronozone.domain.errors import InvalidLocalTime, TimezoneNotFound
from chronozone.domain.ports import get_clock
from chronozone.infrastructure.windows_zones import WINDOWS_ZONE_ALIASES, WindowsZone

if TYPE_CHECKING:
    from chronozone.config.models import TimezonesConfig
    from chronozone.domain.ports import Clock

logger = logging.getLogger(__name__)

NonexistentPolicy = Literal["raise", "shift_forward"]


def _rules_name(rules: tzinfo) -> str:
    return getattr(rules, "key", None) or str(rules)


class ZoneConverter:
    """Converts readings between UTC and one zone.

    Obtained from :meth:`ZoneInfoTimezoneService.converter`, which hands out
    one shared instance per zone id.
    """

    def __init__(
        self,
        service: ZoneInfoTimezoneService,
        timezone_id: str,
        rules: tzinfo,
        clock: Clock | None = None,
    ) -> None:
        self._service = service
        self._rules = rules
        self._clock = clock
        self.timezone_id = timezone_id

    def now(self) -> datetime:
        """The current wall-clock reading in this zone."""
        clock = self._clock or get_clock()
        return self.from_utc(clock.now_utc())

    def to_utc(self, local_datetime: datetime) -> datetime:
        """Project a reading in this zone to UTC. Any ``tzinfo`` is ignored."""
        return self._service.to_utc(local_datetime.replace(tzinfo=None), self._rules)

    def from_utc(self, instant: datetime) -> datetime:
        """The naive reading in this zone. A naive *instant* is taken as UTC."""
        return self._service.from_utc(instant, self._rules)


class ZoneInfoTimezoneService:
    """Default :class:`~chronozone.domain.ports.TimezoneService`.

    Args:
        aliases: Extra id -> IANA key mappings, checked before Windows ids.
        windows_aliases: Accept Windows ids such as ``"Eastern Standard Time"``,
            with Windows DST conventions for the US zones.
        nonexistent: What to do with a local reading inside a DST gap.
        clock: Clock used by :meth:`converter` for the local zone and ``now``.
    """

    def __init__(
        self,
        *,
        aliases: Mapping[str, str] | None = None,
        windows_aliases: bool = True,
        nonexistent: NonexistentPolicy = "raise",
        clock: Clock | None = None,
    ) -> None:
        self._aliases: dict[str, str] = dict(aliases or {})
        self._windows_aliases = windows_aliases
        self._nonexistent = nonexistent
        self._clock = clock
        self._rules: dict[str, tzinfo] = {}
        self._converters: dict[str, ZoneConverter] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: TimezonesConfig, *, clock: Clock | None = None) -> Self:
        """Build a service from the ``[timezones]`` config section."""
        return cls(
            aliases=config.aliases,
            windows_aliases=config.windows_aliases,
            nonexistent=config.nonexistent,
            clock=clock,
        )

    @property
    def nonexistent(self) -> NonexistentPolicy:
        return self._nonexistent

    def resolve(self, timezone_id: str) -> tzinfo:
        """Return the rules for *timezone_id*, loading them on first use.

        Raises:
            TimezoneNotFound: Neither an alias nor an IANA key matches.
        """
        rules = self._rules.get(timezone_id)
        if rules is not None:
            return rules
        loaded = self._load(timezone_id)
        with self._lock:
            return self._rules.setdefault(timezone_id, loaded)

    def _load(self, timezone_id: str) -> tzinfo:
        if not timezone_id:
            raise TimezoneNotFound(timezone_id)
        windows = self._windows_aliases and timezone_id not in self._aliases
        if timezone_id in self._aliases:
            key = self._aliases[timezone_id]
        elif windows:
            key = WINDOWS_ZONE_ALIASES.get(timezone_id, timezone_id)
        else:
            key = timezone_id
        if key != timezone_id:
            logger.debug("Timezone alias %s -> %s", timezone_id, key)
        try:
            rules: tzinfo = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneNotFound(timezone_id) from exc
        if windows:
            rules = WindowsZone.for_windows_id(timezone_id, rules) or rules
        logger.debug("Loaded timezone rules for %s", timezone_id)
        return rules

    def to_utc(self, local_datetime: datetime, rules: tzinfo) -> datetime:
        """Project a naive local reading to an aware UTC datetime.

        Raises:
            InvalidLocalTime: The reading is in a DST gap and the policy
                is ``"raise"``.
        """
        local = local_datetime.replace(tzinfo=None, fold=0)
        instant = local.replace(tzinfo=rules, fold=1).astimezone(UTC)
        if instant.astimezone(rules).replace(tzinfo=None, fold=0) == local:
            return instant
        # Skipped by a forward transition.
        if self._nonexistent == "raise":
            raise InvalidLocalTime(local, _rules_name(rules))
        # Transitions are never less than a day apart.
        before = (local - timedelta(days=1)).replace(tzinfo=rules).utcoffset()
        return (local - before).replace(tzinfo=UTC)

    def from_utc(self, instant: datetime, rules: tzinfo) -> datetime:
        """The naive local reading of *instant*. A naive value is taken as UTC."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return instant.astimezone(rules).replace(tzinfo=None, fold=0)

    def convert(self, local_datetime: datetime, source_rules: tzinfo, target_rules: tzinfo) -> datetime:
        """Re-express a reading in *source_rules* as a reading in *target_rules*."""
        return self.from_utc(self.to_utc(local_datetime, source_rules), target_rules)

    def converter(self, timezone_id: str | None) -> ZoneConverter:
        """The shared convertor for *timezone_id*.

        An empty or missing id means the process-local zone, since that is
        the best available guess when a user has no zone set.
        """
        zone = timezone_id or (self._clock or get_clock()).local_timezone_id()
        cached = self._converters.get(zone)
        if cached is not None:
            return cached
        created = ZoneConverter(self, zone, self.resolve(zone), self._clock)
        with self._lock:
            return self._converters.setdefault(zone, created)
