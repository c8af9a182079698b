"""Per-operation Rich renderers for ServiceResult.

:func:`render_result` picks a renderer by ``result.op``; ops without a
dedicated renderer get the generic key/value layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pagesize.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from pagesize.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet``: the size string or preset names."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if "display" in result.data:
        return str(result.data["display"])
    presets = result.data.get("presets")
    if isinstance(presets, list):
        return "\n".join(str(entry["name"]) for entry in presets)
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ps.ok"), Text(f"  {result.op}", style="ps.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "ps.name" if key == "name" else ""
    console.print(Text(f"  {key}: ", style="ps.key"), Text(str(value), style=style), sep="")


def _preset_table(presets: list[dict[str, Any]], default: str | None) -> Table:
    """One row per preset; the configured default is marked."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="ps.name", no_wrap=True)
    table.add_column("Height (cm)", style="ps.dimension", justify="right")
    table.add_column("Width (cm)", style="ps.dimension", justify="right")
    table.add_column("Default", style="ps.default", justify="center")
    for entry in presets:
        table.add_row(
            str(entry["name"]),
            str(entry["height"]),
            str(entry["width"]),
            "*" if entry["name"] == default else "",
        )
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="ps.error"),
        Text(f"  {result.op}", style="ps.op"),
        Text(" - "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_preset_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    presets = result.data.get("presets", [])
    default = result.data.get("default")
    _status_line(console, result)
    console.print(_preset_table(presets, default))
    console.print(f"\n{len(presets)} presets, default: {default}")


def _render_size(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """show_preset and custom_size: name, dimensions, and the display string."""
    _status_line(console, result)
    for key in ("name", "height", "width"):
        if key in result.data:
            _field(console, key, result.data[key])
    if "display" in result.data:
        console.print()
        console.print(Text(f"  {result.data['display']}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_presets": _render_preset_list,
    "show_preset": _render_size,
    "custom_size": _render_size,
}
