"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy TimeService initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronozone.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from chronozone.config.settings import ChronoSettings
    from chronozone.services.result import ServiceResult
    from chronozone.services.timeops import TimeService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The time service is created on first use so ``--help`` and
    ``--version`` never load timezone data.
    """

    def __init__(self, settings: ChronoSettings) -> None:
        self.settings = settings
        self._service: TimeService | None = None

        from chronozone.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> TimeService:
        """The time service (created lazily on first access)."""
        if self._service is None:
            from chronozone.services.timeops import TimeService

            self._service = TimeService.from_settings(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            summary_only=self.settings.output.summary_only,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
