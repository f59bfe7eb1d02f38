"""LayoutNode — the recursive layout tree.

A node is one of two variants, discriminated by :class:`NodeKind`:

- ``LEAF``: editable text content, no children.
- ``CONTAINER``: an immutable tuple of exactly ``rows * cols`` children in
  row-major order, no text of its own.

INVARIANT: ``split()`` is the only structural mutation. It turns a leaf into
a container exactly once; containers never revert and are never split again.

Children are owned by their parent's child tuple. The parent link is a
``weakref`` used for traversal only (paths, root lookup), so a discarded tree
is reclaimed as soon as nothing references its root.

Cell paths address nodes from the root: ``root`` for the root itself,
otherwise dot-separated child indices (``0``, ``1.2``). A leading ``root.``
is accepted.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from layoutctl.domain.errors import InvalidOperationError, InvalidStateError, NodeNotFoundError
from layoutctl.domain.modules import ModuleType

ROOT_PATH = "root"


class NodeKind(StrEnum):
    """Layout node variants."""

    LEAF = "leaf"
    CONTAINER = "container"


def parse_path(path: str) -> tuple[int, ...]:
    """Parse a cell path into child indices.

    Raises:
        NodeNotFoundError: *path* is not ``root`` or a dotted list of ASCII indices.

    Examples:
        >>> parse_path("root")
        ()
        >>> parse_path("1.0")
        (1, 0)
        >>> parse_path("root.2")
        (2,)
    """
    text = path.strip()
    if text in ("", ROOT_PATH):
        return ()
    if text.startswith(ROOT_PATH + "."):
        text = text[len(ROOT_PATH) + 1 :]
    parts = text.split(".")
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise NodeNotFoundError(f"Invalid cell path '{path}'", path=path)
    return tuple(int(part) for part in parts)


def format_path(indices: tuple[int, ...]) -> str:
    """Inverse of :func:`parse_path`."""
    if not indices:
        return ROOT_PATH
    return ".".join(str(i) for i in indices)


class LayoutNode:
    """One cell of the layout tree."""

    __slots__ = ("__weakref__", "_children", "_content", "_kind", "_module", "_parent")

    def __init__(self, parent: LayoutNode | None = None) -> None:
        self._kind = NodeKind.LEAF
        self._content = ""
        self._children: tuple[LayoutNode, ...] = ()
        self._module: ModuleType | None = None
        self._parent: weakref.ref[LayoutNode] | None = (
            weakref.ref(parent) if parent is not None else None
        )

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"<LayoutNode leaf path={self.path()!r}>"
        assert self._module is not None
        return f"<LayoutNode container path={self.path()!r} module={self._module.key!r}>"

    # ------------------------------------------------------------------
    # Variant queries
    # ------------------------------------------------------------------

    @property
    def kind(self) -> NodeKind:
        return self._kind

    def is_leaf(self) -> bool:
        return self._kind is NodeKind.LEAF

    @property
    def module(self) -> ModuleType | None:
        """The module that split this node, or None for a leaf."""
        return self._module

    def content(self) -> str:
        """Text of a leaf.

        Raises:
            InvalidStateError: the node is a container.
        """
        if not self.is_leaf():
            raise InvalidStateError("A container cell has no text content", path=self.path())
        return self._content

    def set_content(self, text: str) -> None:
        """Replace the text of a leaf.

        Raises:
            InvalidStateError: the node is a container.
        """
        if not self.is_leaf():
            raise InvalidStateError("Only a leaf cell holds text content", path=self.path())
        self._content = text

    def children(self) -> tuple[LayoutNode, ...]:
        return self._children

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def split(self, module: ModuleType) -> tuple[LayoutNode, ...]:
        """Turn this leaf into a container of ``module.cells`` empty leaves.

        Children are created in row-major order. Any text the leaf held is
        discarded.

        Raises:
            InvalidOperationError: the node is already a container. The tree
                is left untouched.
        """
        if not self.is_leaf():
            raise InvalidOperationError(
                "only a leaf cell may accept a new module",
                path=self.path(),
                module=module.key,
            )
        children = tuple(LayoutNode(parent=self) for _ in range(module.rows * module.cols))
        self._children = children
        self._module = module
        self._content = ""
        self._kind = NodeKind.CONTAINER
        return children

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    @property
    def parent(self) -> LayoutNode | None:
        if self._parent is None:
            return None
        return self._parent()

    def root(self) -> LayoutNode:
        node = self
        while (parent := node.parent) is not None:
            node = parent
        return node

    def index(self) -> int | None:
        """Position within the parent's children, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        for i, child in enumerate(parent._children):
            if child is self:
                return i
        raise AssertionError("child missing from its parent's children")

    def indices(self) -> tuple[int, ...]:
        """Child indices leading from the root to this node."""
        steps: list[int] = []
        node: LayoutNode | None = self
        while node is not None and (i := node.index()) is not None:
            steps.append(i)
            node = node.parent
        return tuple(reversed(steps))

    def path(self) -> str:
        return format_path(self.indices())

    def depth(self) -> int:
        return len(self.indices())

    def walk(self) -> Iterator[LayoutNode]:
        """Yield this node and all descendants, pre-order."""
        yield self
        for child in self._children:
            yield from child.walk()

    def leaves(self) -> Iterator[LayoutNode]:
        return (node for node in self.walk() if node.is_leaf())

    def locate(self, path: str) -> LayoutNode:
        """Resolve a cell path relative to this node.

        Raises:
            NodeNotFoundError: the path is malformed or leaves the tree.
        """
        node = self
        for i in parse_path(path):
            if not 0 <= i < len(node._children):
                raise NodeNotFoundError(f"No cell at path '{path}'", path=path)
            node = node._children[i]
        return node

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready snapshot of this subtree."""
        data: dict[str, Any] = {"path": self.path(), "kind": str(self._kind)}
        if self.is_leaf():
            data["content"] = self._content
        else:
            assert self._module is not None
            data["module"] = self._module.key
            data["children"] = [child.to_dict() for child in self._children]
        return data
