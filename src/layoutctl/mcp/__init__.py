"""MCP adapter — exposes one editing session to MCP clients."""
