"""Explicit-stack walker for StackWalk.

The walker runs post-order tree algorithms without touching the interpreter
call stack. Pending work lives on a control stack of work items; completed
sub-results live on a result stack. Both are plain lists, so the only limit
on tree depth is available memory.

An algorithm plugs in three callables:

- ``expand(payload)`` returns ``None`` for an empty subtree, otherwise the
  work items to run for this node, listed in the order they should execute.
- ``combine(payload, *child_results)`` builds a node's result once its
  children's results are ready.
- ``handle(payload)`` performs a side effect for a node (print, collect...).

For a binary node that is expanded to
``[Descend(left), Descend(right), Combine(value)]`` the walker pushes
``Combine(value)``, ``Descend(right)``, ``Descend(left)``. The left subtree
is therefore resolved first and the right subtree's result ends up on top
of the result stack when the ``Combine`` is popped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from .actions import Action, Combine, Descend, Handle
from ..config import WalkConfig

logger = logging.getLogger(__name__)

R = TypeVar("R")

ExpandFn = Callable[[Any], Optional[Sequence[Action]]]


class StackInvariantError(RuntimeError):
    """The push/pop protocol of a walk is broken.

    Raised when a ``Combine`` finds too few results, when an item has no
    callback to run it, or when a walk finishes with the wrong number of
    results left over. This is a programming error in the algorithm plugged
    into the walker, never a data problem, so it is not meant to be caught.
    """
    pass


@dataclass
class WalkStats:
    """Bookkeeping for one walk."""

    steps: int = 0
    descends: int = 0
    empties: int = 0
    combines: int = 0
    handles: int = 0
    max_control_depth: int = 0
    max_result_depth: int = 0


class StackWalker(Generic[R]):
    """Iterative evaluation engine with a control stack and a result stack.

    A walker is either *combining* (``combine`` given: every subtree produces
    a result, and the walk returns the root's result) or *side-effecting*
    (no ``combine``: empty subtrees produce nothing, and the walk returns
    None). A walker can be reused; each ``walk`` gets fresh stacks.
    """

    def __init__(self,
                 expand: ExpandFn,
                 combine: Optional[Callable[..., R]] = None,
                 handle: Optional[Callable[[Any], None]] = None,
                 empty: Optional[Callable[[], Any]] = None,
                 config: Optional[WalkConfig] = None):
        """Initialize walker with the algorithm's callbacks.

        Args:
            expand: Maps a Descend payload to scheduled items or None
            combine: Builds a result from a Combine payload and child results
            handle: Side effect for a Handle payload
            empty: Produces the result of an empty subtree (default: None)
            config: WalkConfig controlling stats collection
        """
        self._expand = expand
        self._combine = combine
        self._handle = handle
        self._empty = empty if empty is not None else _no_result
        self._collect_stats = config.collect_stats if config is not None else True
        self.last_stats: Optional[WalkStats] = None

    @property
    def combining(self) -> bool:
        """True if this walker threads results back up the tree."""
        return self._combine is not None

    def walk(self, root: Any) -> Optional[R]:
        """Run the walk from ``root`` until the control stack drains.

        Args:
            root: Payload of the initial Descend item

        Returns:
            The root's result for a combining walk, None otherwise

        Raises:
            StackInvariantError: If the push/pop protocol is violated
        """
        control: List[Action] = [Descend(root)]
        results: List[Any] = []
        stats = WalkStats() if self._collect_stats else None

        while control:
            if stats is not None:
                stats.steps += 1
                if len(control) > stats.max_control_depth:
                    stats.max_control_depth = len(control)

            action = control.pop()

            if isinstance(action, Descend):
                scheduled = self._expand(action.payload)
                if scheduled is None:
                    # Base case: empty subtree
                    if self._combine is not None:
                        results.append(self._empty())
                    if stats is not None:
                        stats.empties += 1
                else:
                    # Reversed so the first scheduled item is popped first
                    control.extend(reversed(scheduled))
                    if stats is not None:
                        stats.descends += 1

            elif isinstance(action, Combine):
                if self._combine is None:
                    raise StackInvariantError(
                        f"Combine item {action.payload!r} scheduled on a walker without combine"
                    )
                if len(results) < action.arity:
                    raise StackInvariantError(
                        f"Combine {action.payload!r} needs {action.arity} results, "
                        f"result stack holds {len(results)}"
                    )
                # Top of the stack is the last child; pop back into child order
                children = [results.pop() for _ in range(action.arity)]
                children.reverse()
                results.append(self._combine(action.payload, *children))
                if stats is not None:
                    stats.combines += 1

            elif isinstance(action, Handle):
                if self._handle is None:
                    raise StackInvariantError(
                        f"Handle item {action.payload!r} scheduled on a walker without handle"
                    )
                self._handle(action.payload)
                if stats is not None:
                    stats.handles += 1

            else:
                raise StackInvariantError(f"Unknown work item: {action!r}")

            if stats is not None and len(results) > stats.max_result_depth:
                stats.max_result_depth = len(results)

        self.last_stats = stats
        if stats is not None:
            logger.debug(
                "walk finished: %d steps, peak control depth %d, peak result depth %d",
                stats.steps, stats.max_control_depth, stats.max_result_depth
            )

        return self._finish(results)

    def _finish(self, results: List[Any]) -> Optional[R]:
        """Check the leftover results and hand back the final one."""
        if self._combine is None:
            if results:
                raise StackInvariantError(
                    f"Side-effecting walk left {len(results)} results behind"
                )
            return None

        if len(results) != 1:
            raise StackInvariantError(
                f"Walk must leave exactly one result, found {len(results)}"
            )
        return results.pop()


def _no_result() -> None:
    return None
