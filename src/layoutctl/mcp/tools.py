"""MCP tool definitions — 6 tools over the server's editing session.

Each tool has a ``<name>_impl`` function testable without the mcp package.
``register_tools()`` wraps them with FastMCP decorators, running each call
inside the session gate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from layoutctl.services.result import ServiceResult

if TYPE_CHECKING:
    from layoutctl.mcp.gate import SessionGate
    from layoutctl.services.session import EditorSession


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
        }
    return response


def list_modules_impl(session: EditorSession) -> dict[str, Any]:
    """List the module catalog."""
    from layoutctl.services.catalog import CatalogService

    return _to_mcp_response(CatalogService(session).list_modules())


def show_layout_impl(session: EditorSession) -> dict[str, Any]:
    """Snapshot of the layout tree and the cells that accept drops."""
    return _to_mcp_response(session.describe())


def drop_module_impl(session: EditorSession, path: str, module: str) -> dict[str, Any]:
    """Drop a module on the leaf at *path*."""
    return _to_mcp_response(session.drop(path, module))


def set_cell_text_impl(session: EditorSession, path: str, text: str) -> dict[str, Any]:
    """Set the text of the leaf at *path*."""
    return _to_mcp_response(session.edit(path, text))


def reset_layout_impl(session: EditorSession) -> dict[str, Any]:
    """Start over from one empty cell."""
    return _to_mcp_response(session.reset())


def export_markup_impl(session: EditorSession, *, document: bool = False) -> dict[str, Any]:
    """Export the layout as markup."""
    from layoutctl.services.export import ExportService

    return _to_mcp_response(ExportService(session).export(document=document))


def register_tools(server: Any, gate: SessionGate) -> None:
    """Register all 6 MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def list_modules() -> dict[str, Any]:
        """List the module templates that can be dropped on a cell."""
        with gate.locked() as session:
            return list_modules_impl(session)

    @server.tool()  # type: ignore[untyped-decorator]
    def show_layout() -> dict[str, Any]:
        """Show the layout tree. Cell paths are 'root' or dotted child indices like '1.0'."""
        with gate.locked() as session:
            return show_layout_impl(session)

    @server.tool()  # type: ignore[untyped-decorator]
    def drop_module(path: str, module: str) -> dict[str, Any]:
        """Split the empty cell at *path* with a module (e.g. '2x2'). Only leaves accept."""
        with gate.locked() as session:
            return drop_module_impl(session, path, module)

    @server.tool()  # type: ignore[untyped-decorator]
    def set_cell_text(path: str, text: str) -> dict[str, Any]:
        """Set the text shown in the leaf cell at *path*."""
        with gate.locked() as session:
            return set_cell_text_impl(session, path, text)

    @server.tool()  # type: ignore[untyped-decorator]
    def reset_layout() -> dict[str, Any]:
        """Discard the layout and start over from one empty cell."""
        with gate.locked() as session:
            return reset_layout_impl(session)

    @server.tool()  # type: ignore[untyped-decorator]
    def export_markup(document: bool = False) -> dict[str, Any]:
        """Export the layout as nested flex-box markup, optionally as a full HTML page."""
        with gate.locked() as session:
            return export_markup_impl(session, document=document)
