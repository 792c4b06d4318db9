"""
Abstract base classes for ordered containers.
"""

from avlmap.interfaces.ordered_map import OrderedMap

__all__ = ["OrderedMap"]
