"""Core abstractions for StackWalk.

This module contains the node model, the work-item model, and the
explicit-stack walker that every algorithm runs on.
"""

from .node import BinaryNode, make, leaf
from .actions import Action, Descend, Combine, Handle
from .walker import StackWalker, StackInvariantError, WalkStats
from .traversal import iter_depth_first, count_nodes, tree_height, shares_nodes

__all__ = [
    "BinaryNode",
    "make",
    "leaf",
    "Action",
    "Descend",
    "Combine",
    "Handle",
    "StackWalker",
    "StackInvariantError",
    "WalkStats",
    "iter_depth_first",
    "count_nodes",
    "tree_height",
    "shares_nodes",
]
