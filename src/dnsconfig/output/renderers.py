"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dnsconfig.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dnsconfig.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
    if result.op == "show":
        return "\n".join(_option_lines(result.data))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _option_lines(data: dict[str, Any]) -> list[str]:
    lines = [f"{key}={value}" for key, value in data.get("options", {}).items()]
    lines.extend(data.get("flags", []))
    return lines


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text()
    line.append("OK", style="dc.ok")
    line.append(": ")
    line.append(result.op, style="dc.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    line = Text("  ")
    line.append(f"{key}: ", style="dc.key")
    line.append(str(value))
    console.print(line)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    line = Text()
    line.append("ERROR", style="dc.error")
    line.append(f": {result.op} — ")
    line.append(result.error.message if result.error else "Unknown error")
    console.print(line)
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "service", result.data.get("service", ""))
    _field(console, "hostname", result.data.get("hostname", ""))

    options: dict[str, str] = result.data.get("options", {})
    flags: list[str] = result.data.get("flags", [])
    if not options and not flags:
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Option", style="dc.option")
    table.add_column("Value")
    for key, value in options.items():
        table.add_row(key, value)
    for flag in flags:
        table.add_row(Text(flag, style="dc.flag"), Text("(flag)", style="dc.key"))
    console.print(table)


def _render_commit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "service", result.data.get("service", ""))
    files: list[str] = result.data.get("files", [])
    _field(console, "files", len(files))
    if verbose:
        for path in files:
            console.print(Text(f"    {path}", style="dc.path"))
    if result.data.get("restarted"):
        _field(console, "restarted", "yes")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "show": _render_show,
    "commit": _render_commit,
}
