"""
Abstract base classes for the ordered containers.
"""

from balanced_tree.interfaces.ordered_iterable import OrderedIterable
from balanced_tree.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
