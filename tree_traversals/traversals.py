"""Recursive and breadth-first algorithms over ``TreeNode`` trees.

Every function here is pure: it reads the supplied tree, never mutates or
allocates nodes, and keeps its working state (queues, sets, path buffers) local
to the call. An absent root (``None``) is always accepted and yields the
operation's identity value, so callers never need to special-case empty trees.

The public API covers the following capabilities:

* ``sum_leaf_nodes`` – sum of the values stored in leaves.
* ``count_internal_nodes`` – number of nodes with at least one child.
* ``build_post_order_string`` – concatenated values in left, right, self order.
* ``collect_level_order_values`` – breadth-first list of values.
* ``count_distinct_values`` – number of unique values across the tree.
* ``has_strictly_increasing_path`` – whether some root-to-leaf path strictly
  increases.
* ``have_same_shape`` – structural comparison that ignores values.
* ``find_all_root_to_leaf_paths`` – every root-to-leaf path, leaves taken left
  to right.

Recursion depth equals tree height; extremely deep trees can exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
import logging
from typing import Any, Deque, Iterator, List, Optional, Set, TypeVar

from .node import TreeNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sum_leaf_nodes(node: Optional[TreeNode[int]]) -> int:
    """Return the sum of the values of all leaves under *node*."""

    if node is None:
        return 0

    total = node.value if node.is_leaf else 0
    total += sum_leaf_nodes(node.left)
    total += sum_leaf_nodes(node.right)
    return total


def count_internal_nodes(node: Optional[TreeNode[int]]) -> int:
    """Return the number of nodes under *node* that have at least one child."""

    if node is None:
        return 0

    count = 0 if node.is_leaf else 1
    count += count_internal_nodes(node.left)
    count += count_internal_nodes(node.right)
    return count


def build_post_order_string(node: Optional[TreeNode[Any]]) -> str:
    """Concatenate ``str(value)`` for every node in post-order.

    For a post-order visitation of ``"a"``, ``"b"`` and ``"c"`` the result is
    ``"abc"``. An empty tree yields ``""``.
    """

    if node is None:
        return ""

    return (
        build_post_order_string(node.left)
        + build_post_order_string(node.right)
        + str(node.value)
    )


def _iter_breadth_first(node: Optional[TreeNode[T]]) -> Iterator[TreeNode[T]]:
    """Yield the nodes under *node* top-to-bottom, left-to-right."""

    if node is None:
        return

    queue: Deque[TreeNode[T]] = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


def collect_level_order_values(node: Optional[TreeNode[T]]) -> List[T]:
    """Return the tree's values level by level, from top to bottom."""

    values = [current.value for current in _iter_breadth_first(node)]
    logger.debug("Level-order traversal visited %d nodes", len(values))
    return values


def count_distinct_values(node: Optional[TreeNode[int]]) -> int:
    """Return the number of unique values stored in the tree."""

    unique_values: Set[int] = set()
    for current in _iter_breadth_first(node):
        unique_values.add(current.value)
    return len(unique_values)


def has_strictly_increasing_path(node: Optional[TreeNode[int]]) -> bool:
    """Return ``True`` when a root-to-leaf path has strictly increasing values.

    A leaf on its own is a complete path, so any present leaf satisfies the
    property. Descent only continues into a child whose value is strictly
    greater than its parent's.
    """

    if node is None:
        return False
    if node.is_leaf:
        return True

    left_path = False
    right_path = False
    if node.left is not None and node.left.value > node.value:
        left_path = has_strictly_increasing_path(node.left)
    if node.right is not None and node.right.value > node.value:
        right_path = has_strictly_increasing_path(node.right)
    return left_path or right_path


def have_same_shape(
    node_a: Optional[TreeNode[Any]], node_b: Optional[TreeNode[Any]]
) -> bool:
    """Return ``True`` when both trees have the same arrangement of nodes.

    Values are ignored, so the trees may even hold different payload types.
    Two empty trees have the same shape; an empty and a non-empty tree do not.
    """

    if node_a is None and node_b is None:
        return True
    if node_a is None or node_b is None:
        return False

    return have_same_shape(node_a.left, node_b.left) and have_same_shape(
        node_a.right, node_b.right
    )


def find_all_root_to_leaf_paths(node: Optional[TreeNode[T]]) -> List[List[T]]:
    """Return every root-to-leaf path as a list of values.

    Paths are emitted in pre-order, so the leaves of a left subtree appear
    before those of the right subtree::

            1
           / \\
          2   3
         / \\   \\
        4   5   6

    yields ``[[1, 2, 4], [1, 2, 5], [1, 3, 6]]``.
    """

    paths: List[List[T]] = []
    current_path: List[T] = []

    def _walk(current: Optional[TreeNode[T]]) -> None:
        if current is None:
            return
        current_path.append(current.value)
        if current.is_leaf:
            paths.append(list(current_path))
        else:
            _walk(current.left)
            _walk(current.right)
        current_path.pop()

    _walk(node)
    logger.debug("Found %d root-to-leaf paths", len(paths))
    return paths


__all__ = [
    "build_post_order_string",
    "collect_level_order_values",
    "count_distinct_values",
    "count_internal_nodes",
    "find_all_root_to_leaf_paths",
    "has_strictly_increasing_path",
    "have_same_shape",
    "sum_leaf_nodes",
]
