"""
OrderedIterable protocol for containers that can be walked in sorted order.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for containers that yield their values in ascending order.

    Implementations must support:
    - Full iteration via __iter__
    - Explicit traversal via traverse_in_order(), either lazily or by
      calling a visitor once per value
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return a fresh iterator over all values in ascending order."""
        pass

    @abstractmethod
    def traverse_in_order(
        self, visitor: Callable[[Any], None] | None = None
    ) -> Iterator[Any] | None:
        """
        Walk the values in ascending order.

        Args:
            visitor: Called once per value if given.

        Returns:
            A lazy iterator over the values when no visitor is given,
            None otherwise.
        """
        pass
