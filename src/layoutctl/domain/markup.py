"""Layout tree → flex-box markup.

``render()`` is pure: it reads the tree, never mutates it, and identical
trees always produce byte-identical output.

Flex direction comes from the live child count, not from the module shape:
more than two children renders as ``column``, otherwise ``row``. A 3x1 and a
1x3 split therefore export with the same direction.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from markupsafe import escape

if TYPE_CHECKING:
    from layoutctl.domain.node import LayoutNode

DEFAULT_PLACEHOLDER = "Drop a module here"

CONTAINER_STYLE = "display: flex; flex: 1; flex-direction: {direction};"
LEAF_STYLE = "display: flex; flex: 1; min-height: 2em; border: 1px dashed #999999; padding: 4px;"


def flex_direction(node: LayoutNode) -> str:
    """``column`` for more than two children, else ``row``."""
    return "column" if len(node.children()) > 2 else "row"


def render(
    node: LayoutNode,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
    indent: int = 2,
) -> str:
    """Render *node* and its subtree as nested flex-box ``<div>`` elements.

    Args:
        node: Subtree root (usually the session root).
        placeholder: Text shown in leaves that have no content.
        indent: Spaces per nesting level, one element per line. ``0`` yields
            compact single-line markup.
    """
    lines = _render_lines(node, placeholder, 0)
    if indent <= 0:
        return "".join(line for _level, line in lines)
    return "\n".join(" " * (indent * level) + line for level, line in lines)


def _render_lines(node: LayoutNode, placeholder: str, level: int) -> Iterator[tuple[int, str]]:
    if node.is_leaf():
        yield level, f'<div style="{LEAF_STYLE}">{_leaf_text(node.content() or placeholder)}</div>'
        return

    children = node.children()
    module = node.module
    assert module is not None and len(children) == module.cells, (
        f"container at {node.path()} holds {len(children)} children"
    )
    style = CONTAINER_STYLE.format(direction=flex_direction(node))
    yield level, f'<div style="{style}">'
    for child in children:
        yield from _render_lines(child, placeholder, level + 1)
    yield level, "</div>"


def _leaf_text(text: str) -> str:
    # Every newline becomes a break, trailing ones included.
    lines = text.replace("\r\n", "\n").split("\n")
    return "<br>".join(str(escape(line)) for line in lines)
