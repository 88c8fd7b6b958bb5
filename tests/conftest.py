"""Shared pytest configuration for the StackWalk test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: deep or wide trees, excluded by run_tests.py by default"
    )


@pytest.fixture
def tree3():
    """Perfect tree of depth 3 built on the explicit stack.

    Structure (value order is pre-order):
            1
          /   \\
         2     5
        / \\   / \\
       3   4 6   7
    """
    from stackwalk import build_tree
    return build_tree(3)
