"""Tree algorithms built on the explicit-stack walker.

The ``recursive`` module holds the native-recursion baselines; import it
explicitly when you want them.
"""

from .builder import TreeBuilder, build_tree
from .transformer import invert_tree, map_tree
from .visitor import (
    walk_indented,
    walk_preorder,
    render_tree,
    print_tree,
    preorder_values,
    visit_preorder,
)

__all__ = [
    'TreeBuilder',
    'build_tree',
    'invert_tree',
    'map_tree',
    'walk_indented',
    'walk_preorder',
    'render_tree',
    'print_tree',
    'preorder_values',
    'visit_preorder',
]
