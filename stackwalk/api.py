"""High-level API for StackWalk.

This module provides simple, functional interfaces for the tree operations.
Each function can run on the explicit-stack walker (the default) or on the
recursive baseline, selected with ``mode`` or through a WalkConfig.
"""

from typing import Any, Dict, List, Optional, TextIO, Tuple, Union

from .algorithms import builder, transformer, visitor
from .algorithms import recursive
from .config import WalkConfig, WalkMode, parse_mode
from .core.node import BinaryNode
from .core.traversal import iter_depth_first

ModeArg = Optional[Union[WalkMode, str]]


def build_tree(
    depth: int,
    mode: ModeArg = None,
    start: int = 0,
    config: Optional[WalkConfig] = None
) -> Optional[BinaryNode[int]]:
    """Generate a perfect binary tree labelled in pre-order.

    Args:
        depth: Number of levels (0 = empty tree)
        mode: Walk mode, overrides config.mode when given
        start: Counter value before the first label is taken
        config: Optional WalkConfig

    Returns:
        Root of the new tree, or None for depth 0

    Example:
        >>> root = build_tree(3)
        >>> root.value, root.left.value, root.right.value
        (1, 2, 5)
    """
    config, walk_mode = _resolve(mode, config)
    if walk_mode == WalkMode.RECURSIVE:
        return recursive.build_tree(depth, start)
    return builder.build_tree(depth, start, config)


def invert_tree(
    root: Optional[BinaryNode],
    mode: ModeArg = None,
    config: Optional[WalkConfig] = None
) -> Optional[BinaryNode]:
    """Return a new tree with left and right swapped at every level.

    The input tree is left untouched.
    """
    config, walk_mode = _resolve(mode, config)
    if walk_mode == WalkMode.RECURSIVE:
        return recursive.invert_tree(root)
    return transformer.invert_tree(root, config)


def render_tree(
    root: Optional[BinaryNode],
    mode: ModeArg = None,
    config: Optional[WalkConfig] = None
) -> List[str]:
    """Render a tree as indented lines (right subtree above, left below)."""
    config, walk_mode = _resolve(mode, config)
    indent = config.render.indent
    if walk_mode == WalkMode.RECURSIVE:
        return recursive.render_tree(root, indent)
    return visitor.render_tree(root, indent, config)


def print_tree(
    root: Optional[BinaryNode],
    mode: ModeArg = None,
    stream: Optional[TextIO] = None,
    config: Optional[WalkConfig] = None
) -> None:
    """Print a tree, one indented value per line.

    Args:
        root: Tree to print
        mode: Walk mode, overrides config.mode when given
        stream: Output stream, overrides config.render.stream when given
        config: Optional WalkConfig

    Example:
        >>> print_tree(build_tree(2))
          3
        1
          2
    """
    config, walk_mode = _resolve(mode, config)
    out = stream if stream is not None else config.render.stream
    indent = config.render.indent
    if walk_mode == WalkMode.RECURSIVE:
        recursive.print_tree(root, out, indent)
    else:
        visitor.print_tree(root, out, indent, config)


def preorder_values(
    root: Optional[BinaryNode],
    mode: ModeArg = None,
    config: Optional[WalkConfig] = None
) -> List[Any]:
    """Collect values in pre-order (node, left subtree, right subtree)."""
    config, walk_mode = _resolve(mode, config)
    if walk_mode == WalkMode.RECURSIVE:
        return recursive.preorder_values(root)
    return visitor.preorder_values(root, config)


def visit_preorder(
    root: Optional[BinaryNode],
    mode: ModeArg = None,
    stream: Optional[TextIO] = None,
    config: Optional[WalkConfig] = None
) -> None:
    """Print values in pre-order on one line, e.g. ``1, 2, 3, ``."""
    config, walk_mode = _resolve(mode, config)
    out = stream if stream is not None else config.render.stream
    separator = config.render.separator
    if walk_mode == WalkMode.RECURSIVE:
        recursive.visit_preorder(root, out, separator)
    else:
        visitor.visit_preorder(root, out, separator, config)


def tree_stats(root: Optional[BinaryNode]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height
        and depths (node count per depth)

    Example:
        >>> stats = tree_stats(build_tree(3))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['height']
        (7, 4, 3)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {}
    }

    for node, depth in iter_depth_first(root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats


# Helper functions

def _resolve(mode: ModeArg, config: Optional[WalkConfig]) -> Tuple[WalkConfig, WalkMode]:
    """Validate config and work out the effective walk mode.

    Raises:
        ConfigurationError: If config fails validation
        ValueError: If mode is not a known alias
    """
    config = (config if config is not None else WalkConfig()).check()
    walk_mode = parse_mode(mode) if mode is not None else config.mode
    return config, walk_mode
