"""Command line demonstration of the ``tree_traversals`` algorithms.

Running the module prints every built-in demo tree as a level-order ASCII
rendering followed by the result of each single-tree traversal, which makes the
behaviour of the library easy to eyeball from a terminal.

The heavy lifting happens in ``tree_traversals``; here we simply orchestrate
pre-defined demo inputs and emit human-readable status lines.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from tree_traversals import (
    TreeNode,
    build_post_order_string,
    collect_level_order_values,
    count_distinct_values,
    count_internal_nodes,
    find_all_root_to_leaf_paths,
    has_strictly_increasing_path,
    render_tree,
    sum_leaf_nodes,
)

logger = logging.getLogger(__name__)

OPERATIONS: Tuple[Tuple[str, Callable[[Optional[TreeNode[Any]]], Any]], ...] = (
    ("sum_leaf_nodes", sum_leaf_nodes),
    ("count_internal_nodes", count_internal_nodes),
    ("build_post_order_string", build_post_order_string),
    ("collect_level_order_values", collect_level_order_values),
    ("count_distinct_values", count_distinct_values),
    ("has_strictly_increasing_path", has_strictly_increasing_path),
    ("find_all_root_to_leaf_paths", find_all_root_to_leaf_paths),
)


@dataclass(frozen=True)
class DemoCase:
    """A named tree used by the demonstration."""

    name: str
    builder: Callable[[], Optional[TreeNode[int]]]

    def build(self) -> Optional[TreeNode[int]]:
        """Materialise the tree associated with this demo case."""

        return self.builder()


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(
        name="Example",
        builder=lambda: TreeNode(
            1,
            left=TreeNode(2, TreeNode(4), TreeNode(5)),
            right=TreeNode(3, right=TreeNode(6)),
        ),
    )
    yield DemoCase(
        name="Increasing",
        builder=lambda: TreeNode(5, TreeNode(3), TreeNode(9)),
    )
    yield DemoCase(name="Empty", builder=lambda: None)


def _format_report(case: DemoCase, tree: Optional[TreeNode[int]]) -> List[str]:
    """Return formatted output lines for *case* and its *tree*."""

    lines = [f"{case.name} tree", render_tree(tree)]
    for label, operation in OPERATIONS:
        result = operation(tree)
        logger.debug("%s on %s tree -> %r", label, case.name, result)
        lines.append(f"{label}: {result!r}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the demonstration flow for the selected cases."""

    cases = list(_iter_demo_cases())
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--case",
        action="append",
        default=None,
        help=(
            "Name of a demo case to run; may be repeated. "
            f"Available: {', '.join(case.name for case in cases)}."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.case is not None:
        by_name = {case.name.lower(): case for case in cases}
        unknown = [name for name in args.case if name.lower() not in by_name]
        if unknown:
            parser.error(f"Unknown demo case(s): {', '.join(unknown)}")
        cases = [by_name[name.lower()] for name in args.case]

    for case in cases:
        logger.info("Running demo case %s", case.name)
        for line in _format_report(case, case.build()):
            print(line)
        print()  # Spacer between cases
    return 0


__all__ = ["DemoCase", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
