"""structlog setup for the CLI.

Every record, whether it comes from structlog or from a stdlib
``logging.getLogger(__name__)`` in the library code, goes through one
stderr handler on the root logger. stdout is left to command output.

Rendering is a console layout by default and JSON lines with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

#: Third-party loggers kept at WARNING even with ``-v``.
QUIET_LOGGERS = ("tzlocal",)


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to stderr through structlog.

    Safe to call more than once; the root logger always ends up with a
    single handler.

    Args:
        verbose: Let ``chronozone`` loggers through from DEBUG up.
            Otherwise only WARNING and above are shown.
        log_json: Render JSON lines instead of the console layout.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    # Python warnings arrive on the "py.warnings" logger.
    logging.captureWarnings(True)

    logging.getLogger("chronozone").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
