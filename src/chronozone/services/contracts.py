"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class ZonedReading(BaseModel):
    """A local reading with its zone and UTC projection.

    ``utc`` is None when the reading has no absolute instant: an unknown
    zone, or a local time inside a DST gap.
    """

    local_datetime: str
    timezone_id: str
    utc: str | None = None


class DiffResultData(BaseModel):
    """Payload contract for ``TimeService.diff``."""

    start: ZonedReading
    end: ZonedReading
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    weeks_in_month: int
    days_remainder_weeks: int
    summary: str


class ConvertResultData(BaseModel):
    """Payload contract for ``TimeService.convert``."""

    source: ZonedReading
    target: ZonedReading


class NowResultData(BaseModel):
    """Payload contract for ``TimeService.now``."""

    now: ZonedReading


class CompareResultData(BaseModel):
    """Payload contract for ``TimeService.compare``."""

    first: ZonedReading
    second: ZonedReading
    result: Literal[-1, 0, 1]
    relation: Literal["before", "equal", "after"]
    difference_seconds: float | None = None
