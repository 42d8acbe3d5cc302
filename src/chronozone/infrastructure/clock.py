"""System wall-clock access."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfoNotFoundError

import tzlocal

from chronozone.domain.ports import get_timezone_service

if TYPE_CHECKING:
    from chronozone.domain.ports import TimezoneService

logger = logging.getLogger(__name__)

_FALLBACK_ZONE = "UTC"


def detect_local_timezone_id() -> str:
    """IANA id of the process-local zone, as reported by ``tzlocal``.

    ``tzlocal`` honours ``TZ`` and the platform configuration (including
    the Windows registry). When it cannot name a zone, ``"UTC"`` is used.
    """
    try:
        name = tzlocal.get_localzone_name()
    except ZoneInfoNotFoundError as exc:
        logger.warning("Local timezone not determined (%s); using %s", exc, _FALLBACK_ZONE)
        return _FALLBACK_ZONE
    return name or _FALLBACK_ZONE


class SystemClock:
    """Default :class:`~chronozone.domain.ports.Clock`.

    Args:
        local_timezone: Zone id to treat as process-local instead of the
            detected one. ``now_local`` then reads the clock in that zone.
        timezone_service: Service used to read the configured local zone.
    """

    def __init__(
        self,
        local_timezone: str | None = None,
        timezone_service: TimezoneService | None = None,
    ) -> None:
        self._local_timezone = local_timezone
        self._timezone_service = timezone_service

    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def now_local(self) -> datetime:
        if self._local_timezone is None:
            return datetime.now()
        service = self._timezone_service or get_timezone_service()
        return service.from_utc(self.now_utc(), service.resolve(self._local_timezone))

    def local_timezone_id(self) -> str:
        return self._local_timezone or detect_local_timezone_id()
