"""Test fixtures for StackWalk consumers.

These helpers build awkward trees (very deep chains, hand-written shapes)
and record what a walker does, without anyone having to reach into the
walker's internals.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..core.actions import Action, Combine, Descend
from ..core.node import BinaryNode, make
from ..core.walker import StackWalker


def chain_tree(length: int, side: str = "left", start: int = 1) -> Optional[BinaryNode[int]]:
    """Build a degenerate tree where every node has one child.

    Built bottom-up in a loop, so ``length`` can be far beyond the
    recursion limit.

    Args:
        length: Number of nodes (0 = empty tree)
        side: "left" or "right" - which child each node has
        start: Value of the root; values increase by one per level

    Returns:
        Root of the chain
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    node: Optional[BinaryNode[int]] = None
    for value in range(start + length - 1, start - 1, -1):
        if side == "left":
            node = make(value, node, None)
        else:
            node = make(value, None, node)
    return node


def from_nested(spec: Any) -> Optional[BinaryNode]:
    """Build a tree from nested ``(value, left, right)`` tuples.

    ``None`` is the empty tree; a bare value is a leaf.

    Example:
        tree = from_nested((1, (2, None, 4), 3))
    """
    def expand(item: Any) -> Optional[List[Action]]:
        if item is None:
            return None
        if isinstance(item, tuple):
            value, left, right = item
        else:
            value, left, right = item, None, None
        return [Descend(left), Descend(right), Combine(value)]

    return StackWalker(expand, combine=make).walk(spec)


def to_nested(root: Optional[BinaryNode]) -> Any:
    """Inverse of from_nested; leaves come back as bare values."""
    def expand(node: Optional[BinaryNode]) -> Optional[List[Action]]:
        if node is None:
            return None
        return [Descend(node.left), Descend(node.right), Combine(node.value)]

    def combine(value: Any, left: Any, right: Any) -> Any:
        if left is None and right is None:
            return value
        return (value, left, right)

    return StackWalker(expand, combine=combine).walk(root)


class WalkTracer:
    """Records the callbacks a walker makes, in order.

    Wrap an algorithm's callbacks, run the walk, then inspect ``events``:
    a list of ``(kind, payload)`` tuples with kind one of "expand",
    "combine" or "handle". Combine events carry ``(payload, child_results)``.

    Example:
        tracer = WalkTracer()
        walker = StackWalker(tracer.expand(expand), combine=tracer.combine(combine))
        walker.walk(root)
        assert tracer.kinds()[-1] == "combine"
    """

    def __init__(self):
        self.events: List[Tuple[str, Any]] = []

    def expand(self, func: Callable[[Any], Optional[Sequence[Action]]]) -> Callable:
        def traced(payload: Any) -> Optional[Sequence[Action]]:
            self.events.append(("expand", payload))
            return func(payload)
        return traced

    def combine(self, func: Callable[..., Any]) -> Callable:
        def traced(payload: Any, *children: Any) -> Any:
            self.events.append(("combine", (payload, children)))
            return func(payload, *children)
        return traced

    def handle(self, func: Callable[[Any], None]) -> Callable:
        def traced(payload: Any) -> None:
            self.events.append(("handle", payload))
            func(payload)
        return traced

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.events]

    def payloads(self, kind: str) -> List[Any]:
        return [payload for event_kind, payload in self.events if event_kind == kind]
