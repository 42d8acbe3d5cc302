"""Command: re-express a wall-clock reading in another zone."""

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
  chronozone convert 1955-09-26T01:02:03 --from "Mountain Standard Time" --to "Eastern Standard Time"
  chronozone convert 2024-07-01T12:00:00 --from America/Chicago --to Asia/Tokyo
  chronozone -q convert 2024-07-01T12:00:00 --from UTC --to Europe/London""",
)
@click.argument("local_datetime", metavar="DATETIME", type=ISO_DATETIME)
@click.option("--from", "source", default=None, help="Zone DATETIME is read in (default UTC).")
@click.option("--to", "target", default=None, help="Zone to convert to (default UTC).")
@click.pass_obj
def convert(app: AppContext, local_datetime: datetime, source: str | None, target: str | None) -> None:
    """Convert DATETIME from one timezone to another."""
    app.emit(app.service.convert(local_datetime, source, target))
