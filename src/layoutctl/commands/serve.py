"""serve — start the MCP server (requires layoutctl[mcp] extra)."""

from __future__ import annotations

import click

from layoutctl.commands._base import LayoutCommand


@click.command(
    cls=LayoutCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  layoutctl serve

  # Streamable HTTP on custom host/port
  layoutctl serve --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport in layoutctl.toml).",
)
@click.option("--host", default="127.0.0.1", help="Bind address (HTTP transports only).")
@click.option("--port", default=8000, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: object, transport: str | None, host: str, port: int) -> None:
    """Serve one editing session to MCP clients (requires layoutctl[mcp] extra)."""
    from layoutctl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install layoutctl[mcp]", err=True)
        raise SystemExit(1)

    from layoutctl.commands._context import AppContext

    assert isinstance(app, AppContext)
    server = create_server(settings=app.settings, host=host, port=port)
    server.run(transport=transport or app.settings.mcp.transport)
