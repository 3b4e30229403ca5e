"""
AVL Tree implementation for sorted value storage.

Keeps the height of every subtree within one of its sibling's, which bounds
the whole tree's height to about 1.44 * log2(N) and every operation to
O(log N).
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from balanced_tree.interfaces.sorted_container import SortedContainer
from balanced_tree.models.exceptions import EmptyTreeError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """Node in the AVL Tree. A leaf has height 0."""

    value: T
    left: "Node[T] | None" = None
    right: "Node[T] | None" = None
    height: int = 0


def _height(node: Node | None) -> int:
    return -1 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Node) -> int:
    return _height(node.right) - _height(node.left)


class BalancedTree(SortedContainer, Generic[T]):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained after every insert and remove:
    1. Values in a node's left subtree are smaller, right subtree larger
    2. No value is stored twice
    3. Sibling subtree heights differ by at most one
    4. Each node caches 1 + the height of its taller child

    Mutations recurse down to the affected node and rebalance on the way
    back up. Every recursive step returns the root of its (possibly rotated)
    subtree, which the caller stores back into the child slot.

    Not thread-safe: callers sharing a tree must serialize all operations.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the tree.

        Args:
            values: Optional values to insert, in order.
        """
        self._root: Node[T] | None = None
        self._size: int = 0

        if values is not None:
            for value in values:
                self.insert(value)

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the height of the root, -1 for an empty tree."""
        return _height(self._root)

    def insert(self, value: T) -> None:
        """Insert a value, ignoring duplicates. O(log N)"""
        self._root = self._insert(self._root, value)

    def remove(self, value: T) -> None:
        """Remove a value, raising NotFoundError if absent. O(log N)"""
        self._root = self._remove(self._root, value)
        self._size -= 1

    def discard(self, value: T) -> bool:
        """Remove a value if present. O(log N)"""
        try:
            self.remove(value)
        except NotFoundError:
            return False
        return True

    def contains(self, value: T) -> bool:
        return self._find_node(value) is not None

    def find_min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_min")

        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def find_max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_max")

        current = self._root
        while current.right is not None:
            current = current.right
        return current.value

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def __iter__(self) -> Iterator[T]:
        return _InOrderIterator(self._root)

    def traverse_in_order(
        self, visitor: Callable[[T], None] | None = None
    ) -> Iterator[T] | None:
        """
        Walk the values in ascending order.

        Args:
            visitor: Called once per value if given.

        Returns:
            A fresh lazy iterator when no visitor is given, None otherwise.
        """
        if visitor is None:
            return _InOrderIterator(self._root)

        for value in _InOrderIterator(self._root):
            visitor(value)
        return None

    def is_balanced(self) -> bool:
        """
        Check ordering, balance and cached heights across the whole tree.

        Returns:
            True if every node satisfies the AVL invariants.
        """
        return self._check(self._root, None, None) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _find_node(self, value: T) -> Node[T] | None:
        """Find node by value."""
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def _insert(self, node: Node[T] | None, value: T) -> Node[T]:
        if node is None:
            self._size += 1
            return Node(value=value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            # Duplicate, nothing beneath changed
            return node

        return self._rebalance(node)

    def _remove(self, node: Node[T] | None, value: T) -> Node[T] | None:
        # Raised on the way down, before any child slot is rewritten
        if node is None:
            raise NotFoundError(value)

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # Two children: take over the successor's value, then remove it
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            logger.debug("Replacing %r with successor %r", node.value, successor.value)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        else:
            return node.left if node.left is not None else node.right

        return self._rebalance(node)

    def _rebalance(self, node: Node[T]) -> Node[T]:
        """Refresh node's height and rotate if it is out of balance."""
        _update_height(node)
        balance = _balance_factor(node)

        if balance > 1:
            assert node.right is not None
            if _balance_factor(node.right) < 0:
                # Right-left case
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        if balance < -1:
            assert node.left is not None
            if _balance_factor(node.left) > 0:
                # Left-right case
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        return node

    def _rotate_left(self, node: Node[T]) -> Node[T]:
        """Left rotation. Returns the new subtree root."""
        pivot = node.right
        assert pivot is not None
        logger.debug("Rotating left at %r", node.value)

        node.right = pivot.left
        pivot.left = node

        # node is now below pivot
        _update_height(node)
        _update_height(pivot)
        return pivot

    def _rotate_right(self, node: Node[T]) -> Node[T]:
        """Right rotation. Returns the new subtree root."""
        pivot = node.left
        assert pivot is not None
        logger.debug("Rotating right at %r", node.value)

        node.left = pivot.right
        pivot.right = node

        _update_height(node)
        _update_height(pivot)
        return pivot

    def _check(self, node: Node[T] | None, low: Any, high: Any) -> int | None:
        """Return the verified height of node's subtree, None if invalid."""
        if node is None:
            return -1

        if low is not None and not low < node.value:
            return None
        if high is not None and not node.value < high:
            return None

        left = self._check(node.left, low, node.value)
        if left is None:
            return None
        right = self._check(node.right, node.value, high)
        if right is None:
            return None

        if abs(right - left) > 1 or node.height != 1 + max(left, right):
            return None
        return node.height


class _InOrderIterator(Iterator[T]):
    """Iterator for ascending traversal of an AVL Tree."""

    def __init__(self, root: Node[T] | None) -> None:
        self._stack: list[Node[T]] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.value

    def _push_left_path(self, node: Node[T] | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
