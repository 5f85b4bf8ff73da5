"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from meetcount.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from meetcount.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    meetings = result.data.get("meetings")
    if isinstance(meetings, list):
        return "\n".join(str(m.get("count", "")) for m in meetings)

    for key in ("days", "name"):
        if key in result.data:
            return str(result.data[key])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    line = Text("OK", style="meet.ok")
    line.append(f"  {result.op}", style="meet.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if key in ("date", "start", "end"):
        style = "meet.date"
    elif key in ("name", "weekday"):
        style = "meet.weekday"
    else:
        style = ""
    line = Text(f"  {key}: ", style="meet.key")
    line.append(str(value), style=style)
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"

    extras = [f"{ak}={av}" for ak, av in span_data.get("annotations", {}).items()]
    if extras:
        line += f"  ({', '.join(extras)})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _meeting_table(meetings: list[dict[str, Any]]) -> Table:
    """Build a Rich Table with one row per counted meeting."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Meeting", justify="right")
    table.add_column("Start", style="meet.date", no_wrap=True)
    table.add_column("End", style="meet.date", no_wrap=True)
    table.add_column("Weekday", style="meet.weekday")
    table.add_column("Base", justify="right")
    table.add_column("Holidays", style="meet.excluded", justify="right")
    table.add_column("Count", style="meet.count", justify="right")

    for m in meetings:
        table.add_row(
            str(m.get("index", "")),
            str(m.get("start", "")),
            str(m.get("end", "")),
            str(m.get("weekday", "")),
            str(m.get("base_count", "")),
            str(m.get("holidays_excluded", "")),
            str(m.get("count", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="meet.error")
    line.append(f"  {result.op}", style="meet.op")
    line.append(f" — {msg}")
    console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_count(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render count_meetings as ``Meeting i: n`` lines, or a table when verbose."""
    _status_line(console, result)
    meetings = result.data.get("meetings", [])

    if verbose:
        _field(console, "remainder_rule", result.data.get("remainder_rule"))
        _field(console, "holidays", result.data.get("holiday_count", 0))
        console.print()
        console.print(_meeting_table(meetings))
        _render_meta(console, result)
        return

    for m in meetings:
        line = Text(f"Meeting {m.get('index')}: ")
        line.append(str(m.get("count")), style="meet.count")
        excluded = m.get("holidays_excluded", 0)
        if excluded:
            line.append(f"  ({excluded} on holidays)", style="meet.excluded")
        console.print(line)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Key-value renderer for lookups (weekday, days) and unknown ops."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "count_meetings": _render_count,
}
