"""Command: order two zoned readings."""

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
  chronozone compare 1955-09-26T01:02:03 "Mountain Standard Time" 1955-09-26T03:02:03 "Eastern Standard Time"
  chronozone compare 2024-06-01T09:00:00 Europe/Berlin 2024-06-01T08:30:00 Europe/London""",
)
@click.argument("first", type=ISO_DATETIME)
@click.argument("first_zone")
@click.argument("second", type=ISO_DATETIME)
@click.argument("second_zone")
@click.pass_obj
def compare(
    app: AppContext,
    first: datetime,
    first_zone: str,
    second: datetime,
    second_zone: str,
) -> None:
    """Tell whether FIRST in FIRST_ZONE is before, equal to, or after SECOND in SECOND_ZONE."""
    app.emit(app.service.compare(first, first_zone, second, second_zone))
