"""
Step markers reported by Tree.add.
"""

from enum import IntEnum


class Step(IntEnum):
    """Direction taken at one level of an insertion."""

    NONE = 0  # No insertion took place
    LEAF = 1  # A new node was created here
    LEFT = 2
    RIGHT = 3
