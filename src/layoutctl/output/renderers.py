"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from layoutctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from layoutctl.services.result import ServiceResult


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

    if result.op == "list_modules":
        return "\n".join(str(item["key"]) for item in result.data.get("items", []))
    if result.op == "export_markup" and "output" not in result.data:
        return str(result.data.get("markup", ""))
    if result.op == "show_layout":
        return "\n".join(result.data.get("accepting", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "lay.ok"), (f"  {result.op}", "lay.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="lay.key")
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    if key == "path" or key == "output":
        v = Text(str(value), style="lay.path")
    elif key == "module":
        v = Text(str(value), style="lay.module")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="lay.error")
    op = Text(f"  {result.op}", style="lay.op")
    console.print(Text.assemble(label, op, " — ", msg))
    if err is not None:
        console.print(Text(f"  code: {err.code}", style="dim"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Catalog renderer ──────────────────────────────────────────────────


def _render_modules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the module catalog as a table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="lay.module", no_wrap=True)
    table.add_column("Label")
    table.add_column("Rows", justify="right")
    table.add_column("Cols", justify="right")
    if verbose:
        table.add_column("Cells", justify="right", style="dim")

    for item in result.data.get("items", []):
        row = [
            str(item.get("key", "")),
            str(item.get("label", "")),
            str(item.get("rows", "")),
            str(item.get("cols", "")),
        ]
        if verbose:
            row.append(str(item.get("cells", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} modules")


# ── Layout tree renderer ──────────────────────────────────────────────


def _node_label(node: dict[str, Any], accepting: set[str]) -> Text:
    kind = str(node.get("kind", ""))
    path = str(node.get("path", ""))
    label = Text(path, style="lay.path")
    label.append(f"  {kind}", style=style_for_kind(kind))
    if kind == "container":
        label.append(f"  {node.get('module', '')}", style="lay.module")
    else:
        content = str(node.get("content", ""))
        if content:
            label.append(f"  {content!r}", style="lay.content")
        if path in accepting:
            label.append("  accepts drops", style="lay.accepts")
    return label


def _add_children(branch: Tree, node: dict[str, Any], accepting: set[str]) -> None:
    for child in node.get("children", []):
        sub = branch.add(_node_label(child, accepting))
        _add_children(sub, child, accepting)


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render show_layout as a tree, marking cells that accept drops."""
    d = result.data
    root = d.get("root", {})
    accepting = set(d.get("accepting", []))

    tree = Tree(_node_label(root, accepting), guide_style="dim")
    _add_children(tree, root, accepting)
    console.print(tree)
    if verbose:
        console.print()
        _field(console, "leaves", d.get("leaves", 0))
        _field(console, "containers", d.get("containers", 0))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_drop(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render request_drop results."""
    _status_line(console, result)
    for key in ("path", "module", "label", "cells"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose and "children" in result.data:
        _field(console, "children", ", ".join(result.data["children"]))


def _render_reset(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "root", "empty leaf")


# ── Export renderer ───────────────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print raw markup, or a summary when it went to a file."""
    d = result.data
    if "output" not in d:
        # out() neither wraps nor interprets console markup.
        console.out(str(d.get("markup", "")), highlight=False)
        return
    _status_line(console, result)
    _field(console, "output", d["output"])
    _field(console, "length", d.get("length", 0))
    _field(console, "document", d.get("document", False))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_modules": _render_modules,
    "show_layout": _render_layout,
    "request_drop": _render_drop,
    "reset": _render_reset,
    "export_markup": _render_export,
}
