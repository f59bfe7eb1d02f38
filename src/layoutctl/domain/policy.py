"""Drop acceptance policy.

Callers ask twice: once while a drag hovers a cell (to show an accepting
affordance) and again at drop time, because the tree may have changed in
between. Only the drop-time answer decides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layoutctl.domain.modules import ModuleType
    from layoutctl.domain.node import LayoutNode


def can_accept(node: LayoutNode, module: ModuleType) -> bool:
    """Whether *node* may receive *module*.

    Only leaves accept. The module never disqualifies a drop; it only
    selects how the leaf will be split.
    """
    del module
    return node.is_leaf()


def accepting_paths(root: LayoutNode, module: ModuleType) -> list[str]:
    """Paths of every cell under *root* that would accept *module* right now."""
    return [node.path() for node in root.walk() if can_accept(node, module)]
