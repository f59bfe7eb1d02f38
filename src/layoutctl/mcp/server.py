"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio by default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from layoutctl.config.settings import LayoutSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(
    *,
    settings: LayoutSettings | None = None,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Create and configure the MCP server.

    The server owns a single EditorSession for its whole lifetime; every
    tool and resource goes through one :class:`SessionGate`.

    *host* and *port* configure the bind address for HTTP transports
    (sse, streamable-http). They are ignored when using stdio.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install layoutctl[mcp]"
        raise RuntimeError(msg)

    from layoutctl.config.settings import LayoutSettings
    from layoutctl.mcp.gate import SessionGate
    from layoutctl.mcp.resources import register_resources
    from layoutctl.mcp.tools import register_tools
    from layoutctl.services.session import EditorSession

    if settings is None:
        settings = LayoutSettings.from_cli()
    gate = SessionGate(EditorSession.from_settings(settings))

    server = _FastMCP("layoutctl", host=host, port=port)

    register_tools(server, gate)
    register_resources(server, gate)

    return server
