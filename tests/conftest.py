"""
Shared pytest fixtures for the tree tests.
"""

import pytest

from balanced_tree import BalancedTree


@pytest.fixture
def tree():
    """Provide an empty BalancedTree."""
    return BalancedTree()


@pytest.fixture
def sample_values():
    """Provide distinct values in an order that forces rotations."""
    return [50, 30, 70, 20, 40, 60, 80, 10, 25, 5]


@pytest.fixture
def populated_tree(sample_values):
    """Provide a BalancedTree holding sample_values."""
    return BalancedTree(sample_values)


@pytest.fixture
def large_sample_values():
    """Provide larger sample for stress testing."""
    return list(range(1000))
