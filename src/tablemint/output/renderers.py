"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tablemint.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from tablemint.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints the one value worth piping: the bare locator for ``resolve``,
    the owner for ``owner``, the count for ``supply`` and the identifier
    for ``mint``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "owner":
        return str(result.data["owner"])
    if result.op == "supply":
        return str(result.data["total"])
    if "uri" in result.data:
        return str(result.data["uri"])
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tm.ok")
    op = Text(f"  {result.op}", style="tm.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tm.key")
    if key == "id":
        v = Text(str(value), style="tm.id")
    elif key == "uri":
        v = Text(str(value), style="tm.uri")
    else:
        v = Text(str(value))
    # Locators are long; never wrap them across lines.
    console.print(k, v, sep="", soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {json.dumps(v, separators=(',', ':'))}"), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tm.error")
    op = Text(f"  {result.op}", style="tm.op")
    console.print(label, op, Text(" — "), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_mint(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "id", result.data["id"])
    _field(console, "owner", result.data["owner"])


def _render_resolve(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "id", result.data["id"])
    uri = result.data["uri"]
    _field(console, "uri", uri if uri else "(no base location configured)")
    if "query" in result.data:
        _field(console, "query", result.data["query"])


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "mint": _render_mint,
    "resolve": _render_resolve,
    "owner": _render_mint,
}
