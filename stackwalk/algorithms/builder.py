"""Perfect binary tree generation on the explicit stack.

Descend payloads are remaining depths. Each non-zero depth takes the next
label from a counter when it is expanded, so labels follow pre-order: the
root gets the first label, then the whole left subtree, then the right one.
The label rides in the Combine payload until both children exist.
"""

from typing import List, Optional

from ..config import WalkConfig
from ..core.actions import Action, Combine, Descend
from ..core.node import BinaryNode, make
from ..core.walker import StackWalker


class TreeBuilder:
    """Builds perfect binary trees labelled with a running counter.

    The counter belongs to a single ``build`` call, so two builds (even on
    the same builder) never share or interleave labels.
    """

    def __init__(self, config: Optional[WalkConfig] = None):
        self.config = config
        self.last_stats = None

    def build(self, depth: int, start: int = 0) -> Optional[BinaryNode[int]]:
        """Generate a perfect binary tree with ``depth`` levels.

        Args:
            depth: Number of levels (0 = empty tree)
            start: Counter value before the first label is taken

        Returns:
            Root of the new tree, or None for depth 0

        Raises:
            ValueError: If depth is negative
        """
        if depth < 0:
            raise ValueError(f"depth cannot be negative, got {depth}")

        counter = start

        def expand(remaining: int) -> Optional[List[Action]]:
            nonlocal counter
            if remaining == 0:
                return None
            counter += 1
            return [
                Descend(remaining - 1),
                Descend(remaining - 1),
                Combine(counter),
            ]

        def combine(label: int, left, right) -> BinaryNode[int]:
            return make(label, left, right)

        walker = StackWalker(expand, combine=combine, config=self.config)
        root = walker.walk(depth)
        self.last_stats = walker.last_stats
        return root


def build_tree(depth: int, start: int = 0,
               config: Optional[WalkConfig] = None) -> Optional[BinaryNode[int]]:
    """Generate a perfect binary tree without native recursion.

    Example:
        >>> root = build_tree(2)
        >>> (root.value, root.left.value, root.right.value)
        (1, 2, 3)
    """
    return TreeBuilder(config).build(depth, start)
