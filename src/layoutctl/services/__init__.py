"""Service layer — session state and operations returning ServiceResult.

Services may import from domain, plugins and infrastructure.
They must never import from commands, output, or mcp.
"""
