"""Pluggy hook specifications for layout lifecycle events.

Hooks fire synchronously, after the mutation they describe has completed,
so an implementation always observes the tree in its new state. UI
collaborators use them to re-render.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("layoutctl")


class LayoutctlHookSpec:
    """Hook specifications for the layoutctl plugin system."""

    @hookspec
    def post_drop(self, path: str, module_key: str, child_paths: list[str]) -> None:
        """Called after a leaf was split by an accepted drop."""

    @hookspec
    def post_content(self, path: str, content: str) -> None:
        """Called after a leaf's text changed."""

    @hookspec
    def post_reset(self) -> None:
        """Called after the session installed a fresh root."""

    @hookspec
    def post_export(self, markup: str, document: bool, output: str | None) -> None:
        """Called after markup was exported."""
