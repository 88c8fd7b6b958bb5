"""Testing utilities for StackWalk consumers."""

from .fixtures import WalkTracer, chain_tree, from_nested, to_nested

__all__ = ['WalkTracer', 'chain_tree', 'from_nested', 'to_nested']
