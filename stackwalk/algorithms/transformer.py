"""Tree transformations on the explicit stack.

Transformations never touch the input: every result node is freshly
allocated, and the walker only reads the original nodes while expanding them.
"""

from typing import Any, Callable, List, Optional

from ..config import WalkConfig
from ..core.actions import Action, Combine, Descend
from ..core.node import BinaryNode, make
from ..core.walker import StackWalker


def _expand_node(node: Optional[BinaryNode]) -> Optional[List[Action]]:
    if node is None:
        return None
    return [Descend(node.left), Descend(node.right), Combine(node.value)]


def invert_tree(root: Optional[BinaryNode],
                config: Optional[WalkConfig] = None) -> Optional[BinaryNode]:
    """Return a new tree with left and right swapped at every level.

    Args:
        root: Tree to invert (left untouched)
        config: Optional WalkConfig for the walker

    Returns:
        Root of the inverted copy, or None for the empty tree
    """
    def combine(value: Any, left: Optional[BinaryNode],
                right: Optional[BinaryNode]) -> BinaryNode:
        return make(value, right, left)

    return StackWalker(_expand_node, combine=combine, config=config).walk(root)


def map_tree(root: Optional[BinaryNode],
             func: Callable[[Any], Any],
             config: Optional[WalkConfig] = None) -> Optional[BinaryNode]:
    """Return a new tree of the same shape with ``func`` applied to each value.

    ``func`` is called in post-order (left subtree, right subtree, node).
    """
    def combine(value: Any, left: Optional[BinaryNode],
                right: Optional[BinaryNode]) -> BinaryNode:
        return make(func(value), left, right)

    return StackWalker(_expand_node, combine=combine, config=config).walk(root)
