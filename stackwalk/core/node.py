"""BinaryNode abstraction for StackWalk.

The BinaryNode is intentionally kept simple - it's a value container that
owns its two children. All tree algorithms live outside the node and run
through the explicit-stack walker, so nothing here recurses.
"""

from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class BinaryNode(Generic[T]):
    """A value plus two optional, exclusively owned child subtrees.

    The empty subtree is represented by ``None``. A node is never shared
    between two parents and never points back up the tree, so every node
    reachable from a root is reachable along exactly one path.

    Nodes are not mutated after construction by anything in this library:
    builders and transformers always allocate new nodes.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: T,
                 left: Optional["BinaryNode[T]"] = None,
                 right: Optional["BinaryNode[T]"] = None):
        """Create a node.

        Args:
            value: Value carried by this node
            left: Left subtree (None = empty)
            right: Right subtree (None = empty)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        """Shallow representation - children are shown by value only."""
        left = None if self.left is None else self.left.value
        right = None if self.right is None else self.right.value
        return f"{self.__class__.__name__}({self.value!r}, left={left!r}, right={right!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality: same shape and equal values everywhere.

        Compared with an explicit stack of node pairs so that arbitrarily
        deep trees never hit the recursion limit.
        """
        if not isinstance(other, BinaryNode):
            return NotImplemented

        pending: List[Tuple[Any, Any]] = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if a is None or b is None:
                return False
            if a.value != b.value:
                return False
            pending.append((a.right, b.right))
            pending.append((a.left, b.left))
        return True

    # Structural equality over mutable slots - not usable as a dict key
    __hash__ = None  # type: ignore[assignment]


def make(value: T,
         left: Optional[BinaryNode[T]] = None,
         right: Optional[BinaryNode[T]] = None) -> BinaryNode[T]:
    """Build a node that takes ownership of ``left`` and ``right``."""
    return BinaryNode(value, left, right)


def leaf(value: T) -> BinaryNode[T]:
    """Build a node with no children."""
    return BinaryNode(value)
