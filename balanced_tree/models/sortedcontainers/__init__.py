"""
Sorted container implementations.
"""

from balanced_tree.models.sortedcontainers.avl_tree import BalancedTree, Node

__all__ = ["BalancedTree", "Node"]
