"""MCP resource definitions — layoutctl://layout and layoutctl://modules.

Each resource has a ``<name>_impl`` function testable without the mcp package.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from layoutctl.mcp.gate import SessionGate
    from layoutctl.services.session import EditorSession


def layout_markup_impl(session: EditorSession) -> str:
    """Current layout rendered as a markup fragment."""
    return session.export_markup()


def modules_impl(session: EditorSession) -> list[dict[str, Any]]:
    """Module catalog as plain dicts."""
    from layoutctl.services.catalog import CatalogService

    return list(CatalogService(session).list_modules().data["items"])


def register_resources(server: Any, gate: SessionGate) -> None:
    """Register both MCP resources on the FastMCP server."""

    @server.resource("layoutctl://layout")  # type: ignore[untyped-decorator]
    def layout_resource() -> str:
        """The current layout as markup."""
        with gate.locked() as session:
            return layout_markup_impl(session)

    @server.resource("layoutctl://modules")  # type: ignore[untyped-decorator]
    def modules_resource() -> str:
        """The module catalog."""
        with gate.locked() as session:
            return json.dumps(modules_impl(session), indent=2)
