"""Recursive reference implementations.

These are the textbook versions of the walker algorithms, using the native
call stack. They exist as a correctness baseline: every explicit-stack
algorithm must agree with its counterpart here. They raise RecursionError
on trees deeper than the interpreter's recursion limit.
"""

import sys
from typing import Any, List, Optional, TextIO

from ..core.node import BinaryNode, make


class _Counter:
    """Mutable label source shared by one recursive build."""

    def __init__(self, value: int = 0):
        self.value = value

    def next(self) -> int:
        self.value += 1
        return self.value


def generate_tree(depth: int, counter: Optional[_Counter] = None) -> Optional[BinaryNode[int]]:
    """Generate a perfect binary tree, labelling nodes in pre-order."""
    if depth < 0:
        raise ValueError(f"depth cannot be negative, got {depth}")
    if counter is None:
        counter = _Counter()
    if depth == 0:
        return None

    label = counter.next()
    left = generate_tree(depth - 1, counter)
    right = generate_tree(depth - 1, counter)
    return make(label, left, right)


def build_tree(depth: int, start: int = 0) -> Optional[BinaryNode[int]]:
    return generate_tree(depth, _Counter(start))


def invert_tree(root: Optional[BinaryNode]) -> Optional[BinaryNode]:
    if root is None:
        return None
    return make(root.value, invert_tree(root.right), invert_tree(root.left))


def render_tree(root: Optional[BinaryNode], indent: str = "  ") -> List[str]:
    lines: List[str] = []

    def _render(node: BinaryNode, level: int) -> None:
        if node.right is not None:
            _render(node.right, level + 1)
        lines.append(f"{indent * level}{node.value}")
        if node.left is not None:
            _render(node.left, level + 1)

    if root is not None:
        _render(root, 0)
    return lines


def print_tree(root: Optional[BinaryNode],
               stream: Optional[TextIO] = None,
               indent: str = "  ") -> None:
    out = stream if stream is not None else sys.stdout

    def _print(node: BinaryNode, level: int) -> None:
        if node.right is not None:
            _print(node.right, level + 1)
        out.write(f"{indent * level}{node.value}\n")
        if node.left is not None:
            _print(node.left, level + 1)

    if root is not None:
        _print(root, 0)


def preorder_values(root: Optional[BinaryNode]) -> List[Any]:
    if root is None:
        return []
    return [root.value] + preorder_values(root.left) + preorder_values(root.right)


def visit_preorder(root: Optional[BinaryNode],
                   stream: Optional[TextIO] = None,
                   separator: str = ", ") -> None:
    out = stream if stream is not None else sys.stdout

    def _visit(node: Optional[BinaryNode]) -> None:
        if node is None:
            return
        out.write(f"{node.value}{separator}")
        _visit(node.left)
        _visit(node.right)

    _visit(root)
    out.write("\n")
