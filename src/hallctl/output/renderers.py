"""Rich renderers for ParseResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from hallctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from hallctl.parsing.result import ParseResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ParseResult[Any],
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ParseResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)
    if result.ok:
        data = result.to_data()
        if "values" in data:
            _render_set(result, data, console)
        else:
            _render_single(result, data, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ParseResult[Any]) -> str:
    """Minimal output: the normalized value(s), or the error line."""
    if not result.ok:
        return f"ERROR: {result.op} — {_message(result)}"
    data = result.to_data()
    if "values" in data:
        return "\n".join(data["values"])
    if "one_based" in data:
        return str(data["one_based"])
    return str(data["value"])


def render_fields(
    messages: Mapping[str, str],
    *,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a table of field kinds and their accepted formats."""
    console = create_console(no_color=no_color, width=width)
    table = Table(show_header=True, show_lines=True, pad_edge=False, expand=False)
    table.add_column("Field", style="hall.kind", no_wrap=True)
    table.add_column("Accepted format")
    for kind, message in messages.items():
        table.add_row(kind, message)
    console.print(table)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _message(result: ParseResult[Any]) -> str:
    return result.error.message if result.error else "Unknown error"


def _status_line(console: Console, result: ParseResult[Any]) -> None:
    console.print(Text("OK", style="hall.ok"), Text(f"  {result.op}", style="hall.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    console.print(
        Text(f"  {key}: ", style="hall.key"),
        Text(str(value), style="hall.value"),
        sep="",
    )


def _render_single(result: ParseResult[Any], data: dict[str, Any], console: Console) -> None:
    _status_line(console, result)
    for key, value in data.items():
        _field(console, key, value)


def _render_set(result: ParseResult[Any], data: dict[str, Any], console: Console) -> None:
    _status_line(console, result)
    _field(console, "count", data["count"])
    if not data["values"]:
        return
    table = Table(show_header=False, pad_edge=False, box=None)
    table.add_column("value", style="hall.value")
    for value in data["values"]:
        table.add_row(f"  {value}")
    console.print(table)


def _render_error(result: ParseResult[Any], console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="hall.error")
    op = Text(f"  {result.op}", style="hall.op")
    console.print(label, op, Text(" — "), Text(_message(result)), sep="")
    if verbose and result.error:
        console.print(Text(f"  code: {result.error.code}", style="dim"))
