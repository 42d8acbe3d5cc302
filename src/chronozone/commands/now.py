"""Command: current wall-clock reading in a zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronozone.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronozone.commands._context import AppContext


@click.command(
    cls=ChronoCommand,
    examples="""\
  chronozone now
  chronozone now Asia/Kolkata
  chronozone now "Pacific Standard Time"
  chronozone --json now Europe/Paris""",
)
@click.argument("timezone_id", metavar="[ZONE]", required=False, default=None)
@click.pass_obj
def now(app: AppContext, timezone_id: str | None) -> None:
    """Show the current time in ZONE (default UTC)."""
    app.emit(app.service.now(timezone_id))
