"""Windows timezone ids.

Windows ids map to IANA keys through the CLDR table that ``tzlocal``
ships. The mapping alone is not enough for the US zones: the Windows
registry describes them with one recurring rule for every year before
2007 (first Sunday in April to last Sunday in October), where the IANA
history has local wartime and pre-1967 variations. :class:`WindowsZone`
applies that recurring rule before 2007 and the IANA zone from 2007 on.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from dateutil.tz import tzstr
from tzlocal.windows_tz import win_tz

#: Windows id -> IANA key.
WINDOWS_ZONE_ALIASES: dict[str, str] = dict(win_tz)

#: First year the Windows registry follows the current US DST rule.
MODERN_RULES_YEAR = 2007

#: POSIX rules for the years before ``MODERN_RULES_YEAR``.
LEGACY_US_RULES: dict[str, str] = {
    "Atlantic Standard Time": "AST4ADT,M4.1.0,M10.5.0",
    "Eastern Standard Time": "EST5EDT,M4.1.0,M10.5.0",
    "Central Standard Time": "CST6CDT,M4.1.0,M10.5.0",
    "Mountain Standard Time": "MST7MDT,M4.1.0,M10.5.0",
    "Pacific Standard Time": "PST8PDT,M4.1.0,M10.5.0",
    "Alaskan Standard Time": "AKST9AKDT,M4.1.0,M10.5.0",
}


class WindowsZone(tzinfo):
    """A Windows zone: recurring legacy rule before 2007, IANA rules after.

    Attributes:
        key: The Windows id, used in error messages.
    """

    def __init__(self, key: str, legacy: tzinfo, modern: tzinfo) -> None:
        self.key = key
        self._legacy = legacy
        self._modern = modern

    @classmethod
    def for_windows_id(cls, windows_id: str, modern: tzinfo) -> WindowsZone | None:
        """Wrap *modern* when *windows_id* has a legacy US rule, else None."""
        rule = LEGACY_US_RULES.get(windows_id)
        if rule is None:
            return None
        return cls(windows_id, tzstr(rule), modern)

    def _rules(self, year: int) -> tzinfo:
        return self._modern if year >= MODERN_RULES_YEAR else self._legacy

    def utcoffset(self, dt: datetime | None) -> timedelta | None:
        if dt is None:
            return None
        return self._rules(dt.year).utcoffset(dt.replace(tzinfo=None))

    def dst(self, dt: datetime | None) -> timedelta | None:
        if dt is None:
            return None
        return self._rules(dt.year).dst(dt.replace(tzinfo=None))

    def tzname(self, dt: datetime | None) -> str | None:
        if dt is None:
            return self.key
        return self._rules(dt.year).tzname(dt.replace(tzinfo=None))

    def fromutc(self, dt: datetime) -> datetime:
        # Both delegates require the value to carry their own tzinfo.
        rules = self._rules(dt.year)
        local = rules.fromutc(dt.replace(tzinfo=rules))
        return local.replace(tzinfo=self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"

    def __str__(self) -> str:
        return self.key
