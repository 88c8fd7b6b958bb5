"""Unit tests for the BinaryNode model.

Covers construction helpers, structural equality and the shallow repr.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from stackwalk import BinaryNode, make, leaf
from stackwalk.testing import chain_tree, from_nested


class TestConstruction(unittest.TestCase):
    """Test make() and leaf()."""

    def test_leaf_has_no_children(self):
        node = leaf(7)
        self.assertEqual(node.value, 7)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertTrue(node.is_leaf())

    def test_make_takes_children(self):
        left, right = leaf(2), leaf(3)
        node = make(1, left, right)
        self.assertIs(node.left, left)
        self.assertIs(node.right, right)
        self.assertFalse(node.is_leaf())

    def test_one_sided_node_is_not_leaf(self):
        self.assertFalse(make(1, None, leaf(2)).is_leaf())
        self.assertFalse(make(1, leaf(2), None).is_leaf())

    def test_zero_value_is_a_real_value(self):
        """An empty child is None, never a zero-valued node."""
        node = make(0, leaf(0), None)
        self.assertEqual(node.value, 0)
        self.assertIsNone(node.right)


class TestEquality(unittest.TestCase):
    """Test structural equality."""

    def test_equal_trees(self):
        a = from_nested((1, (2, None, 4), 3))
        b = make(1, make(2, None, leaf(4)), leaf(3))
        self.assertEqual(a, b)
        self.assertFalse(a != b)

    def test_different_values(self):
        self.assertNotEqual(make(1, leaf(2)), make(1, leaf(3)))

    def test_different_shapes_same_values(self):
        self.assertNotEqual(make(1, leaf(2), None), make(1, None, leaf(2)))

    def test_compare_with_other_types(self):
        self.assertNotEqual(leaf(1), 1)
        self.assertNotEqual(leaf(1), None)

    def test_nodes_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(leaf(1))

    def test_deep_equality_does_not_recurse(self):
        depth = sys.getrecursionlimit() * 5
        self.assertEqual(chain_tree(depth), chain_tree(depth))
        self.assertNotEqual(chain_tree(depth), chain_tree(depth, start=2))


class TestRepresentation(unittest.TestCase):
    """Test str() and repr()."""

    def test_str_is_value(self):
        self.assertEqual(str(leaf("x")), "x")

    def test_repr_is_shallow(self):
        node = make(1, make(2, leaf(4)), None)
        self.assertEqual(repr(node), "BinaryNode(1, left=2, right=None)")

    def test_repr_of_deep_chain(self):
        node = chain_tree(sys.getrecursionlimit() * 2)
        self.assertEqual(repr(node), "BinaryNode(1, left=2, right=None)")


if __name__ == "__main__":
    unittest.main()
