"""StackWalk - Binary tree algorithms on an explicit work stack.

StackWalk runs recursive tree algorithms (construction, inversion,
depth-annotated printing) without the interpreter call stack. A control
stack holds pending work items and a result stack holds finished
sub-results, so tree depth is bounded by memory rather than by
sys.getrecursionlimit().

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from stackwalk import build_tree, invert_tree, print_tree

    root = build_tree(3)
    print_tree(invert_tree(root))
━━━━━━━━━━━━━━━━━━━━━━━━━━

Pass mode="recursive" to any of these to run the recursive baseline instead.
"""

__version__ = "0.1.0"

# Core components
from .core import (
    BinaryNode,
    make,
    leaf,
    Action,
    Descend,
    Combine,
    Handle,
    StackWalker,
    StackInvariantError,
    WalkStats,
)
from .algorithms import TreeBuilder, map_tree

# Configuration
from .config import (
    WalkConfig,
    WalkMode,
    RenderConfig,
    ConfigurationError,
    parse_mode,
)

# High-level API
from .api import (
    build_tree,
    invert_tree,
    render_tree,
    print_tree,
    preorder_values,
    visit_preorder,
    tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinaryNode',
    'make',
    'leaf',
    'Action',
    'Descend',
    'Combine',
    'Handle',
    'StackWalker',
    'StackInvariantError',
    'WalkStats',
    'TreeBuilder',
    'map_tree',
    # Config
    'WalkConfig',
    'WalkMode',
    'RenderConfig',
    'ConfigurationError',
    'parse_mode',
    # API
    'build_tree',
    'invert_tree',
    'render_tree',
    'print_tree',
    'preorder_values',
    'visit_preorder',
    'tree_stats',
]
