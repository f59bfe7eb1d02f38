"""EditorSession — owns the current layout tree and mediates every change.

UI collaborators (CLI, shell, MCP tools) never split nodes themselves: they
resolve a target and call :meth:`EditorSession.request_drop`, which asks the
drop policy again at drop time before mutating anything.

The session is single-writer. It does no locking of its own; adapters that
can receive concurrent requests serialize their calls (see ``layoutctl.mcp``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from layoutctl.domain.errors import (
    LayoutError,
    NodeNotFoundError,
    RejectedDropError,
    UnknownModuleError,
)
from layoutctl.domain.markup import render
from layoutctl.domain.modules import find_module, is_cataloged, list_modules
from layoutctl.domain.node import LayoutNode
from layoutctl.domain.policy import accepting_paths, can_accept
from layoutctl.services.result import ServiceResult

if TYPE_CHECKING:
    from layoutctl.config.settings import LayoutSettings
    from layoutctl.domain.modules import ModuleType
    from layoutctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EditorSession:
    """Holds the root node for the lifetime of one editing session."""

    def __init__(
        self,
        settings: LayoutSettings,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        self.settings = settings
        self.plugins = plugins
        self._root = LayoutNode()

    @classmethod
    def from_settings(cls, settings: LayoutSettings) -> EditorSession:
        """Create a session, loading entry-point plugins when enabled."""
        plugins: PluginManager | None = None
        if settings.plugins.enabled:
            from layoutctl.plugins.manager import PluginManager

            plugins = PluginManager()
            plugins.discover_and_load()
        return cls(settings, plugins=plugins)

    # ------------------------------------------------------------------
    # Core contract
    # ------------------------------------------------------------------

    def current(self) -> LayoutNode:
        return self._root

    def reset(self) -> ServiceResult:
        """Discard the whole tree and start again from one empty leaf."""
        self._root = LayoutNode()
        logger.debug("Layout reset")

        warnings: list[str] = []
        self.dispatch("post_reset", {}, warnings)
        return ServiceResult(
            ok=True,
            op="reset",
            data={"root": self._root.to_dict()},
            warnings=warnings,
        )

    def request_drop(self, target: LayoutNode, module: ModuleType) -> ServiceResult:
        """Split *target* with *module* if the drop is acceptable right now.

        Rejected drops leave the tree untouched and come back as a failed
        result (``REJECTED_DROP`` or ``UNKNOWN_MODULE``).
        """
        op = "request_drop"
        try:
            if target.root() is not self._root:
                raise RejectedDropError(
                    "target cell is not part of the current layout",
                    module=module.key,
                )
            if not is_cataloged(module):
                raise UnknownModuleError(
                    f"Module '{module.key}' is not a catalog preset",
                    module=module.key,
                )
            if not can_accept(target, module):
                raise RejectedDropError(
                    "only a leaf cell may accept a new module",
                    path=target.path(),
                    module=module.key,
                )
            children = target.split(module)
        except LayoutError as exc:
            logger.debug("Drop rejected: %s", exc.message)
            return ServiceResult.failure(op, exc)

        path = target.path()
        child_paths = [child.path() for child in children]
        logger.debug("Dropped %s on %s (%d cells)", module.key, path, len(children))

        warnings: list[str] = []
        self.dispatch(
            "post_drop",
            {"path": path, "module_key": module.key, "child_paths": child_paths},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": path,
                "module": module.key,
                "label": module.label,
                "cells": len(children),
                "children": child_paths,
            },
            warnings=warnings,
        )

    def export_markup(self) -> str:
        """Render the current tree with the configured placeholder and indent."""
        cfg = self.settings.export
        return render(self._root, placeholder=cfg.placeholder, indent=cfg.indent)

    # ------------------------------------------------------------------
    # Adapter helpers
    # ------------------------------------------------------------------

    def locate(self, path: str) -> LayoutNode:
        """Resolve a cell path against the current root.

        Raises:
            NodeNotFoundError: the path does not name a cell.
        """
        return self._root.locate(path)

    def drop(self, path: str, module_key: str) -> ServiceResult:
        """Resolve *path* and *module_key*, then :meth:`request_drop`."""
        try:
            target = self.locate(path)
            module = find_module(module_key)
        except LayoutError as exc:
            return ServiceResult.failure("request_drop", exc)
        return self.request_drop(target, module)

    def set_content(self, target: LayoutNode, text: str) -> ServiceResult:
        """Replace the text of a leaf in the current tree."""
        op = "set_content"
        try:
            if target.root() is not self._root:
                raise NodeNotFoundError(
                    "target cell is not part of the current layout", path=target.path()
                )
            target.set_content(text)
        except LayoutError as exc:
            return ServiceResult.failure(op, exc)

        path = target.path()
        warnings: list[str] = []
        self.dispatch("post_content", {"path": path, "content": text}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": path, "content": text},
            warnings=warnings,
        )

    def edit(self, path: str, text: str) -> ServiceResult:
        """Resolve *path* and :meth:`set_content`."""
        try:
            target = self.locate(path)
        except LayoutError as exc:
            return ServiceResult.failure("set_content", exc)
        return self.set_content(target, text)

    def describe(self) -> ServiceResult:
        """Snapshot of the tree plus the cells that currently accept drops."""
        nodes = list(self._root.walk())
        leaves = sum(1 for node in nodes if node.is_leaf())
        # Any preset gives the same answer: acceptance never depends on the module.
        accepting = accepting_paths(self._root, list_modules()[0])
        return ServiceResult(
            ok=True,
            op="show_layout",
            data={
                "leaves": leaves,
                "containers": len(nodes) - leaves,
                "accepting": accepting,
                "root": self._root.to_dict(),
            },
        )

    def dispatch(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a lifecycle hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self.plugins is None:
            return
        try:
            self.plugins.dispatch(hook_name, payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
