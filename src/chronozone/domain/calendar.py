"""Calendar-advance and rounding helpers for plain ``datetime`` values.

Advancing by years or months clamps the day-of-month to the last valid
day of the target month (Jan 31 + 1 month = Feb 28/29, Feb 29 + 1 year =
Feb 28), as ``dateutil.relativedelta`` does.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta


def add_years(value: datetime, years: int) -> datetime:
    """Return *value* advanced by *years* calendar years."""
    return value + relativedelta(years=years)


def add_months(value: datetime, months: int) -> datetime:
    """Return *value* advanced by *months* calendar months."""
    return value + relativedelta(months=months)


def round_to_minute(value: datetime) -> datetime:
    """Round to the nearest minute.

    Seconds and sub-seconds are dropped; 30 seconds or more rounds up.

    Examples:
        >>> round_to_minute(datetime(2024, 1, 1, 9, 15, 29, 999999))
        datetime.datetime(2024, 1, 1, 9, 15)
        >>> round_to_minute(datetime(2024, 1, 1, 9, 15, 30))
        datetime.datetime(2024, 1, 1, 9, 16)
    """
    truncated = value.replace(second=0, microsecond=0)
    if value.second >= 30:
        return truncated + timedelta(minutes=1)
    return truncated
