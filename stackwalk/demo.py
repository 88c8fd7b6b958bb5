#!/usr/bin/env python3
"""
Side-by-side demo of recursive and explicit-stack tree walks.

Builds a depth-3 tree, prints it, inverts it and prints the result, first
with the recursive baselines and then with the explicit-stack walker. Both
halves print the same trees.

Usage:
    python -m stackwalk
    stackwalk-demo
"""

import sys
from typing import Optional, TextIO

from .api import build_tree, invert_tree, print_tree
from .config import WalkMode

DEMO_DEPTH = 3

INVERT_BANNER = "-------------- After invert ------------ "
SECTION_BANNER = " ---------------------------- "


def run_section(mode: WalkMode, out: TextIO) -> None:
    """Build, print, invert and print again using one walk mode."""
    root = build_tree(DEMO_DEPTH, mode=mode)
    print_tree(root, mode=mode, stream=out)

    print("", file=out)
    print(INVERT_BANNER, file=out)
    print("", file=out)

    inverted = invert_tree(root, mode=mode)
    print_tree(inverted, mode=mode, stream=out)


def main(stream: Optional[TextIO] = None) -> int:
    out = stream if stream is not None else sys.stdout

    print("Recursive calls", file=out)
    run_section(WalkMode.RECURSIVE, out)

    print("", file=out)
    print(SECTION_BANNER, file=out)
    print("", file=out)

    print("Non-Recursive calls", file=out)
    run_section(WalkMode.EXPLICIT_STACK, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
