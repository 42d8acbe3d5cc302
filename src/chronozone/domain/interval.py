"""Calendar-aware interval between two date-times.

The interval is a mixed-radix decomposition: each field holds what is
left after every larger unit has been taken out. Years and months are
*whole* calendar units found by advancing the earlier date-time one unit
at a time (with day-of-month clamping) until the next step would
overshoot, so 2023-12-31 to 2024-12-30 is 0 years even though it crosses
a year boundary.

INVARIANT: intervals are absolute. ``difference(a, b) == difference(b, a)``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from pydantic import BaseModel, Field, computed_field

from chronozone.domain.calendar import add_months, add_years


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'' if value == 1 else 's'}"


class CalendarInterval(BaseModel):
    """Years, months, days, and time-of-day remainder between two date-times."""

    model_config = {"frozen": True}

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    milliseconds: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def weeks_in_month(self) -> int:
        """Whole weeks within the days component."""
        return self.days // 7

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days_remainder_weeks(self) -> int:
        """Days left over once whole weeks are removed."""
        return self.days % 7

    @classmethod
    def between(cls, first: datetime, second: datetime) -> CalendarInterval:
        """Alias of :func:`difference`."""
        return difference(first, second)

    def get_duration_summary(self) -> str:
        """Describe the interval by its two most significant units.

        Examples:
            >>> CalendarInterval(years=2, months=5, days=24).get_duration_summary()
            '2 years, 5 months'
            >>> CalendarInterval(months=1, days=3).get_duration_summary()
            '1 month, 3 days'
            >>> CalendarInterval().get_duration_summary()
            '0 seconds'
        """
        if self.years > 0:
            return f"{_plural(self.years, 'year')}, {_plural(self.months, 'month')}"
        if self.months > 0:
            if self.weeks_in_month > 0:
                return f"{_plural(self.months, 'month')}, {_plural(self.weeks_in_month, 'week')}"
            return f"{_plural(self.months, 'month')}, {_plural(self.days, 'day')}"
        if self.days > 0:
            return f"{_plural(self.days, 'day')}, {_plural(self.hours, 'hour')}"
        if self.hours > 0:
            return f"{_plural(self.hours, 'hour')}, {_plural(self.minutes, 'minute')}"
        if self.minutes > 0:
            return f"{_plural(self.minutes, 'minute')}, {_plural(self.seconds, 'second')}"
        return _plural(self.seconds, "second")

    def __str__(self) -> str:
        return self.get_duration_summary()


def _whole_units(
    start: datetime,
    end: datetime,
    advance: Callable[[datetime, int], datetime],
) -> int:
    """Largest N such that ``advance(start, N) <= end``.

    Every candidate is measured from *start* itself, never from the
    previous candidate, so month-end clamping does not accumulate.
    """
    count = 0
    while True:
        try:
            candidate = advance(start, count + 1)
        except (OverflowError, ValueError):
            # Past datetime.max: cannot be <= end.
            break
        if candidate > end:
            break
        count += 1
    return count


def difference(first: datetime, second: datetime) -> CalendarInterval:
    """Compute the absolute calendar difference between two date-times.

    Both values must be in the same frame: both naive local readings in one
    zone, or both aware. Never fails for well-formed inputs; equal values
    give an all-zero interval.
    """
    start, end = (first, second) if first <= second else (second, first)

    years = _whole_units(start, end, add_years)
    start = add_years(start, years)
    months = _whole_units(start, end, add_months)
    start = add_months(start, months)

    days = (end - start).days
    remainder: timedelta = end - (start + timedelta(days=days))
    hours, rest = divmod(remainder.seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    return CalendarInterval(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=remainder.microseconds // 1000,
    )
