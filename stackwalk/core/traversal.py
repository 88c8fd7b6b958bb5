"""Plain iteration over binary trees.

These helpers walk a tree with a local list used as a stack, yielding
``(node, depth)`` tuples the way DFS traversers usually do. They are used
for inspection (counting, measuring, checking shapes) rather than for
building new trees.
"""

from typing import Iterator, List, Optional, Tuple

from .node import BinaryNode


def iter_depth_first(root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
    """Traverse tree depth-first, pre-order (node, left, right).

    Args:
        root: Starting node (None = empty tree, yields nothing)

    Yields:
        Tuples of (node, depth) where the root has depth 0
    """
    if root is None:
        return

    stack: List[Tuple[BinaryNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield (node, depth)
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))


def count_nodes(root: Optional[BinaryNode]) -> int:
    """Count nodes in a tree."""
    count = 0
    for _ in iter_depth_first(root):
        count += 1
    return count


def tree_height(root: Optional[BinaryNode]) -> int:
    """Number of levels in a tree.

    Returns:
        0 for the empty tree, 1 for a single node, and so on
    """
    height = 0
    for _, depth in iter_depth_first(root):
        height = max(height, depth + 1)
    return height


def shares_nodes(a: Optional[BinaryNode], b: Optional[BinaryNode]) -> bool:
    """Check if two trees have any node object in common."""
    seen = {id(node) for node, _ in iter_depth_first(a)}
    return any(id(node) in seen for node, _ in iter_depth_first(b))
