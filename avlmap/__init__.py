"""
Height-balanced ordered key-value tree.

This package provides an in-memory ordered mapping with:
- add(key, value) - O(log N) insert, duplicate keys are ignored
- get(key) - O(log N) lookup
- delete(key) - detaches the whole branch rooted at key
- level_max() / level_min() - height metrics
"""

from avlmap.models.step import Step
from avlmap.models.tree import Node, Tree

__all__ = ["Node", "Step", "Tree"]
