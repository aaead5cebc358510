"""Human/JSON output for ServiceResult.

Human output is meant to be piped: ``convert`` prints the bare hex
string and ``axis-order`` the bare axis order, so the result can be fed
straight into SQL. ``--json`` prints the whole serialized result.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from spatialwriter.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from spatialwriter.services.result import ServiceResult


def _render_formats(console: Console, data: dict[str, Any]) -> None:
    table = Table(show_header=True, header_style="sw.key", box=None)
    table.add_column("format", style="sw.format")
    table.add_column("default")
    default = data.get("default")
    for name in data.get("formats", []):
        table.add_row(name, "[sw.default]*[/]" if name == default else "")
    console.print(table)


def _render_key_values(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        console.print(f"  [sw.key]{key}:[/] {escape(str(value))}", soft_wrap=True)


_RENDERERS: dict[str, Callable[[Console, dict[str, Any]], None]] = {
    "convert": lambda console, data: console.print(escape(data["hex"]), soft_wrap=True),
    "axis_order": lambda console, data: console.print(data["axis_order"], soft_wrap=True),
    "list_formats": _render_formats,
}


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise human-readable text.
        no_color: Strip ANSI styling from human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if result.ok:
        renderer = _RENDERERS.get(result.op)
        if renderer is not None:
            renderer(console, result.data)
        else:
            console.print(f"[sw.ok]OK:[/] [sw.op]{result.op}[/]")
            _render_key_values(console, result.data)
        return get_output(console)

    error_msg = result.error.message if result.error else "Unknown error"
    code = result.error.code if result.error else "ERROR"
    console.print(
        f"[sw.error]ERROR:[/] [sw.op]{result.op}[/] ({code}) {escape(error_msg)}",
        soft_wrap=True,
    )
    return get_output(console)
