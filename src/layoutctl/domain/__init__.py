"""Domain layer — layout tree, module catalog, drop policy, markup.

This layer depends only on stdlib, pydantic and markupsafe.
It must never import from services, infrastructure, commands, or config.
"""
