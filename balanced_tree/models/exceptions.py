"""
Custom exceptions for the ordered containers.
"""

from typing import Any


class TreeError(Exception):
    """Base class for errors raised by the tree containers."""


class NotFoundError(TreeError, KeyError):
    """
    Raised when removing a value that is not stored in the tree.

    The tree is left unchanged.
    """

    def __init__(self, value: Any):
        """
        Initialize not-found error.

        Args:
            value: The value that was looked up.
        """
        self.value = value
        super().__init__(f"Value not found in tree: {value!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class EmptyTreeError(TreeError, ValueError):
    """
    Raised when asking an empty tree for its minimum or maximum.
    """

    def __init__(self, operation: str):
        """
        Initialize empty-tree error.

        Args:
            operation: Name of the operation that needed a value.
        """
        self.operation = operation
        super().__init__(f"Tree is empty - {operation}() has no value to return")
