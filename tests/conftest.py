"""
Shared pytest fixtures for balanced tree tests.
"""

import random

import pytest

from avlmap import Tree


def _shape(tree):
    """Nested (key, left, right) tuples, None for an empty slot."""
    if tree.node is None:
        return None
    return (tree.node.key, _shape(tree.node.left), _shape(tree.node.right))


def _check_invariants(tree):
    """Assert ordering and balance at every node; return the height."""
    keys = [k for k, _ in tree.inorder()]
    assert keys == sorted(set(keys)), f"keys out of order: {keys}"

    def height(slot):
        if slot.node is None:
            return 0
        left = height(slot.node.left)
        right = height(slot.node.right)
        assert abs(left - right) <= 1, (
            f"unbalanced at {slot.node.key!r}: {left} vs {right}"
        )
        return 1 + max(left, right)

    return height(tree)


@pytest.fixture
def shape():
    """Provide a function returning the nested shape of a tree."""
    return _shape


@pytest.fixture
def check_invariants():
    """Provide a function asserting order and balance invariants."""
    return _check_invariants


@pytest.fixture
def tree():
    """Provide a fresh empty Tree."""
    return Tree()


@pytest.fixture
def sample_tree():
    """Provide the perfectly balanced tree built from 5, 3, 8, 1, 4, 7, 9."""
    t = Tree()
    for key in [5, 3, 8, 1, 4, 7, 9]:
        t.add(key, f"v{key}")
    return t


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def random_keys(rng):
    """Provide 300 random keys with duplicates."""
    return [rng.randint(-500, 500) for _ in range(300)]
