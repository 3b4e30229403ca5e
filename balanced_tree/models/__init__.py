"""
Data models for the ordered containers.
"""

from balanced_tree.models.exceptions import EmptyTreeError, NotFoundError, TreeError
from balanced_tree.models.sortedcontainers import BalancedTree, Node

__all__ = [
    "BalancedTree",
    "Node",
    "TreeError",
    "NotFoundError",
    "EmptyTreeError",
]
