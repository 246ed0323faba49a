"""Binary tree node type shared by the traversal algorithms.

``TreeNode`` is a ``@dataclass`` with an arbitrary payload and optional
left/right children. Trees are built by nesting constructor calls and are
treated as read-only input by every algorithm in
``tree_traversals.traversals``.

``render_tree`` produces a deterministic level-order ASCII representation that
marks missing children with centred dots, which keeps demo output and test
failures readable.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class TreeNode(Generic[T]):
    """Node of a binary tree holding a payload of any type."""

    value: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None

    def __post_init__(self) -> None:
        for label, child in (("left", self.left), ("right", self.right)):
            if child is not None and not isinstance(child, TreeNode):
                raise TypeError(f"TreeNode.{label} must be a TreeNode or None")

    @property
    def is_leaf(self) -> bool:
        """``True`` when the node has no children."""

        return self.left is None and self.right is None


def render_tree(root: Optional[TreeNode[T]]) -> str:
    """Render *root* level-by-level, marking missing nodes with ``·``.

    The renderer stops once the entire level is empty, ensuring that the output
    contains no trailing placeholder-only rows.
    """

    if root is None:
        return "<empty>"

    lines: List[str] = []
    queue: Deque[Optional[TreeNode[T]]] = deque([root])

    while queue:
        level_nodes: List[str] = []
        next_level_has_real_node = False
        for _ in range(len(queue)):
            node = queue.popleft()
            if node is None:
                level_nodes.append("·")
                queue.extend((None, None))
                continue

            level_nodes.append(str(node.value))
            queue.append(node.left)
            queue.append(node.right)
            if not node.is_leaf:
                next_level_has_real_node = True

        lines.append(" ".join(level_nodes))
        if not next_level_has_real_node:
            break

    return "\n".join(lines)


__all__ = [
    "TreeNode",
    "render_tree",
]
