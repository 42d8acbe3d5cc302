"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; every
TimeService operation has one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from chronozone.output.console import create_console, get_output, style_for_relation

if TYPE_CHECKING:
    from rich.console import Console

    from chronozone.services.result import ServiceResult

_INTERVAL_FIELDS = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "weeks_in_month",
    "days_remainder_weeks",
)

# Columns shown without --verbose.
_BRIEF_FIELDS = _INTERVAL_FIELDS[:6]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return render_summary(result)


def render_summary(result: ServiceResult) -> str:
    """The one value a script wants from each operation."""
    return str(_SUMMARIES[result.op](result.data))


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print ``  key: value`` with the key dimmed."""
    console.print(Text.assemble((f"  {key}: ", "cz.key"), (str(value), style)))


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "cz.ok"), (f"  {result.op}", "cz.op")))


def _reading(console: Console, key: str, reading: dict[str, Any], *, verbose: bool) -> None:
    """Print a zoned reading as ``local  [zone]``, plus the UTC projection when verbose."""
    line = Text.assemble(
        (f"  {key}: ", "cz.key"),
        str(reading["local_datetime"]),
        (f"  [{reading['timezone_id']}]", "cz.zone"),
    )
    if verbose:
        utc = reading.get("utc")
        line.append(f"  utc={utc if utc is not None else 'n/a'}", style="cz.utc")
    console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "cz.error"), (f"  {result.op}", "cz.op"), f" — {msg}"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_diff(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a calendar interval as a one-row breakdown table."""
    d = result.data
    _status_line(console, result)
    _reading(console, "start", d["start"], verbose=verbose)
    _reading(console, "end", d["end"], verbose=verbose)
    _line(console, "summary", d["summary"], style="cz.summary")

    fields = _INTERVAL_FIELDS if verbose else _BRIEF_FIELDS
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for name in fields:
        table.add_column(name.replace("_", " ").title(), justify="right")
    table.add_row(*(str(d[name]) for name in fields))
    console.print(table)


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _reading(console, "source", d["source"], verbose=verbose)
    _reading(console, "target", d["target"], verbose=verbose)


def _render_now(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _reading(console, "now", result.data["now"], verbose=verbose)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the relation of the first reading to the second."""
    d = result.data
    _status_line(console, result)
    _reading(console, "first", d["first"], verbose=verbose)
    _reading(console, "second", d["second"], verbose=verbose)
    relation = str(d["relation"])
    _line(console, "relation", relation, style=style_for_relation(relation))
    if d.get("difference_seconds") is not None:
        _line(console, "difference_seconds", d["difference_seconds"])


# ── Dispatch tables ───────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "diff": _render_diff,
    "convert": _render_convert,
    "now": _render_now,
    "compare": _render_compare,
}

_SUMMARIES: dict[str, Callable[[dict[str, Any]], Any]] = {
    "diff": lambda d: d["summary"],
    "convert": lambda d: d["target"]["local_datetime"],
    "now": lambda d: d["now"]["local_datetime"],
    "compare": lambda d: d["relation"],
}
