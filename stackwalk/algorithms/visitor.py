"""Side-effecting depth-first walks on the explicit stack.

Visitors schedule ``Handle`` items instead of ``Combine`` items: a node's
turn produces output rather than a value, and empty subtrees leave nothing
on the result stack.

The indented printer visits right subtree, node, left subtree, so that a
printed tree reads like the tree rotated a quarter turn to the left: deeper
right nodes above their parent, deeper left nodes below it.
"""

import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple

from ..config import WalkConfig
from ..core.actions import Action, Descend, Handle
from ..core.node import BinaryNode
from ..core.walker import StackWalker


def walk_indented(root: Optional[BinaryNode],
                  emit: Callable[[Any, int], None],
                  config: Optional[WalkConfig] = None) -> None:
    """Call ``emit(value, depth)`` for every node in printing order.

    Args:
        root: Tree to walk
        emit: Receives each value with its depth (root = 0)
        config: Optional WalkConfig for the walker
    """
    def expand(item: Tuple[Optional[BinaryNode], int]) -> Optional[List[Action]]:
        node, depth = item
        if node is None:
            return None
        return [
            Descend((node.right, depth + 1)),
            Handle((node.value, depth)),
            Descend((node.left, depth + 1)),
        ]

    def handle(item: Tuple[Any, int]) -> None:
        emit(*item)

    StackWalker(expand, handle=handle, config=config).walk((root, 0))


def render_tree(root: Optional[BinaryNode],
                indent: str = "  ",
                config: Optional[WalkConfig] = None) -> List[str]:
    """Render a tree as indented lines, one value per line.

    Example:
        >>> from stackwalk.core import make, leaf
        >>> render_tree(make(1, leaf(2), leaf(3)))
        ['  3', '1', '  2']
    """
    lines: List[str] = []
    walk_indented(root, lambda value, depth: lines.append(f"{indent * depth}{value}"), config)
    return lines


def print_tree(root: Optional[BinaryNode],
               stream: Optional[TextIO] = None,
               indent: str = "  ",
               config: Optional[WalkConfig] = None) -> None:
    """Write a tree to ``stream`` (default stdout) one line per node.

    Each line is written as soon as its node is handled.
    """
    out = stream if stream is not None else sys.stdout

    def emit(value: Any, depth: int) -> None:
        out.write(f"{indent * depth}{value}\n")

    walk_indented(root, emit, config)


def walk_preorder(root: Optional[BinaryNode],
                  emit: Callable[[Any], None],
                  config: Optional[WalkConfig] = None) -> None:
    """Call ``emit(value)`` in pre-order (node, left subtree, right subtree)."""
    def expand(node: Optional[BinaryNode]) -> Optional[List[Action]]:
        if node is None:
            return None
        return [Handle(node.value), Descend(node.left), Descend(node.right)]

    StackWalker(expand, handle=emit, config=config).walk(root)


def preorder_values(root: Optional[BinaryNode],
                    config: Optional[WalkConfig] = None) -> List[Any]:
    """Collect values in pre-order."""
    values: List[Any] = []
    walk_preorder(root, values.append, config)
    return values


def visit_preorder(root: Optional[BinaryNode],
                   stream: Optional[TextIO] = None,
                   separator: str = ", ",
                   config: Optional[WalkConfig] = None) -> None:
    """Write pre-order values on one line, each followed by ``separator``."""
    out = stream if stream is not None else sys.stdout
    walk_preorder(root, lambda value: out.write(f"{value}{separator}"), config)
    out.write("\n")
