"""
Data models for the balanced tree.
"""

from avlmap.models.exceptions import UnorderableKeyError
from avlmap.models.step import Step
from avlmap.models.tree import Node, Tree

__all__ = [
    "Node",
    "Step",
    "Tree",
    "UnorderableKeyError",
]
