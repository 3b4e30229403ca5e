"""
SortedContainer abstract base class for ordered sets of values.
"""

from abc import abstractmethod
from typing import Any

from balanced_tree.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted containers of unique values.

    Provides O(log N) operations for insert, remove and contains.
    Inherits ordered traversal from OrderedIterable.

    Implementations:
    - BalancedTree: AVL tree, height kept within 1.44 * log2(N + 2)
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Insert a value. Inserting a value already present is a no-op.

        Args:
            value: The value to insert. Must be comparable with the others.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> None:
        """
        Remove a value.

        Args:
            value: The value to remove.

        Raises:
            NotFoundError: If the value is not stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def discard(self, value: Any) -> bool:
        """
        Remove a value if present.

        Args:
            value: The value to remove.

        Returns:
            True if the value was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if a value is stored.

        Args:
            value: The value to check.

        Returns:
            True if the value exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find_min(self) -> Any:
        """
        Return the smallest value.

        Raises:
            EmptyTreeError: If the container is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find_max(self) -> Any:
        """
        Return the largest value.

        Raises:
            EmptyTreeError: If the container is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if no values are stored."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of values.

        Time complexity: O(1)
        """
        pass

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()
