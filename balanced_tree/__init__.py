"""
AVL tree based ordered container.

This package provides a self-balancing binary search tree with:
- insert(value) - O(log N), duplicates ignored
- remove(value) - O(log N), raises NotFoundError if absent
- contains(value) - O(log N)
- find_min() / find_max() - O(log N), raise EmptyTreeError if empty
- traverse_in_order() - Lazy ascending traversal
"""

from balanced_tree.models.exceptions import EmptyTreeError, NotFoundError, TreeError
from balanced_tree.models.sortedcontainers import BalancedTree

__all__ = ["BalancedTree", "TreeError", "NotFoundError", "EmptyTreeError"]
