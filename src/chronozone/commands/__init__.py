"""Subcommand modules for chronozone.

Provides register_commands() which uses deferred imports to keep
``chronozone --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from chronozone.commands.compare import compare
    from chronozone.commands.convert import convert
    from chronozone.commands.diff import diff
    from chronozone.commands.now import now

    cli.add_command(diff)
    cli.add_command(convert)
    cli.add_command(now)
    cli.add_command(compare)
