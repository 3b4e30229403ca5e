"""
Tests for the rotation cases, checked against the resulting tree shape.
"""

import pytest

from balanced_tree import BalancedTree


def shape(node):
    """Return (value, left_shape, right_shape) for a subtree, None if absent."""
    if node is None:
        return None
    return (node.value, shape(node.left), shape(node.right))


class TestInsertRotations:
    """Each insert imbalance case settles on the same three-node shape."""

    @pytest.mark.parametrize(
        "order",
        [
            [1, 2, 3],  # right-right
            [3, 2, 1],  # left-left
            [1, 3, 2],  # right-left
            [3, 1, 2],  # left-right
        ],
    )
    def test_three_values_rotate_to_middle_root(self, order):
        """Test the middle value ends up at the root."""
        tree = BalancedTree(order)

        assert shape(tree._root) == (2, (1, None, None), (3, None, None))
        assert tree.height() == 1
        assert tree._root.left.height == 0
        assert tree._root.right.height == 0

    def test_rotation_below_root(self):
        """Test a rotation deeper in the tree relinks the parent's slot."""
        tree = BalancedTree([10, 5, 20, 30, 40])

        assert shape(tree._root) == (
            10,
            (5, None, None),
            (30, (20, None, None), (40, None, None)),
        )
        assert tree.is_balanced()

    def test_rotation_moves_inner_subtree(self):
        """Test the pivot's inner child is handed to the rotated node."""
        tree = BalancedTree([20, 10, 30, 25, 40, 50])

        assert shape(tree._root) == (
            30,
            (20, (10, None, None), (25, None, None)),
            (40, None, (50, None, None)),
        )
        assert tree.height() == 2


class TestRemoveRotations:
    """Removals that leave a node out of balance."""

    def test_remove_triggers_single_rotation(self):
        """Test removing from the short side rotates the heavy side up."""
        tree = BalancedTree([2, 1, 3, 4])
        tree.remove(1)

        assert shape(tree._root) == (3, (2, None, None), (4, None, None))

    def test_remove_with_balanced_heavy_child_uses_single_rotation(self):
        """Test a heavy child with balance 0 needs only one rotation."""
        tree = BalancedTree([2, 1, 4, 3, 5])
        tree.remove(1)

        assert shape(tree._root) == (
            4,
            (2, None, (3, None, None)),
            (5, None, None),
        )
        assert tree.height() == 2
        assert tree.is_balanced()

    def test_remove_triggers_double_rotation(self):
        """Test a heavy child leaning inward needs two rotations."""
        tree = BalancedTree([2, 1, 4, 3])
        tree.remove(1)

        assert shape(tree._root) == (3, (2, None, None), (4, None, None))
        assert tree.is_balanced()

    def test_remove_mirrored_double_rotation(self):
        """Test the left-right case on removal."""
        tree = BalancedTree([3, 1, 4, 2])
        tree.remove(4)

        assert shape(tree._root) == (2, (1, None, None), (3, None, None))
        assert tree.is_balanced()
