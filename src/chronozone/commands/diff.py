"""Command: calendar interval between two date-times."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from chronozone.commands._base import ISO_DATETIME, ChronoCommand

if TYPE_CHECKING:
    from chronozone.commands._context import AppContext


@click.command(
    cls=ChronoCommand,
    examples="""\
  chronozone diff 2024-03-15 2024-09-15
  chronozone diff 2023-09-15T12:25:12 2024-03-10T14:30:45
  chronozone diff 2024-01-01T09:00:00 2024-01-01T09:00:00 --tz Europe/Paris --end-tz UTC
  chronozone --json diff 2021-09-15 2024-03-10""",
)
@click.argument("start", type=ISO_DATETIME)
@click.argument("end", type=ISO_DATETIME)
@click.option("--tz", "timezone_id", default=None, help="Zone of START (default UTC).")
@click.option("--end-tz", "end_timezone_id", default=None, help="Zone of END (default: --tz).")
@click.pass_obj
def diff(
    app: AppContext,
    start: datetime,
    end: datetime,
    timezone_id: str | None,
    end_timezone_id: str | None,
) -> None:
    """Show the years, months, days, and time between START and END."""
    app.emit(app.service.diff(start, end, timezone_id=timezone_id, end_timezone_id=end_timezone_id))
