"""Work items for the explicit-stack walker.

A walk is driven by a control stack of these items. ``Descend`` means
"expand this subtree next", ``Combine`` means "the children below this point
are resolved, synthesize this node's result now", and ``Handle`` means "this
node's own turn has come" in walks that produce side effects instead of
results.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Descend:
    """Process this subtree (or shape) next, as a recursive call would."""

    payload: Any


@dataclass(frozen=True)
class Combine:
    """Pop ``arity`` child results and synthesize the parent's result."""

    payload: Any
    arity: int = 2


@dataclass(frozen=True)
class Handle:
    """Run the walk's side effect for one node."""

    payload: Any


Action = Union[Descend, Combine, Handle]
