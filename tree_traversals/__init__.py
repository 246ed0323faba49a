"""Traversal algorithms over generic binary trees."""

from .node import TreeNode, render_tree
from .traversals import (
    build_post_order_string,
    collect_level_order_values,
    count_distinct_values,
    count_internal_nodes,
    find_all_root_to_leaf_paths,
    has_strictly_increasing_path,
    have_same_shape,
    sum_leaf_nodes,
)

__all__ = [
    "TreeNode",
    "build_post_order_string",
    "collect_level_order_values",
    "count_distinct_values",
    "count_internal_nodes",
    "find_all_root_to_leaf_paths",
    "has_strictly_increasing_path",
    "have_same_shape",
    "render_tree",
    "sum_leaf_nodes",
]
