#!/usr/bin/env python3
"""
Walking a tree far deeper than the recursion limit.

This example demonstrates:
- The recursive baseline failing with RecursionError
- The explicit-stack walker inverting the same tree
- Walk statistics (peak stack depths) from a custom StackWalker
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from stackwalk import Combine, Descend, StackWalker, invert_tree, tree_stats
from stackwalk.testing import chain_tree


def sum_values(root):
    """Sum all values with a custom combining walk."""
    def expand(node):
        if node is None:
            return None
        return [Descend(node.left), Descend(node.right), Combine(node.value)]

    walker = StackWalker(expand,
                         combine=lambda value, left, right: value + left + right,
                         empty=lambda: 0)
    return walker.walk(root), walker.last_stats


def main():
    length = sys.getrecursionlimit() * 50
    chain = chain_tree(length)
    print(f"Chain of {length} nodes (recursion limit {sys.getrecursionlimit()})")

    try:
        invert_tree(chain, mode="recursive")
    except RecursionError:
        print("  recursive invert: RecursionError")

    inverted = invert_tree(chain)
    stats = tree_stats(inverted)
    print(f"  explicit-stack invert: {stats['total_nodes']} nodes, height {stats['height']}")

    total, walk_stats = sum_values(chain)
    print(f"  sum of values: {total}")
    print(f"  steps: {walk_stats.steps}, "
          f"peak control depth: {walk_stats.max_control_depth}, "
          f"peak result depth: {walk_stats.max_result_depth}")


if __name__ == "__main__":
    main()
