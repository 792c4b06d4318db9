"""
Custom exceptions for the balanced tree.
"""

from typing import Any


class UnorderableKeyError(TypeError):
    """
    Raised when a key cannot be compared against a key already in the tree.

    Comparison happens before any mutation, so the tree is unchanged.
    """

    def __init__(self, key: Any, existing: Any):
        """
        Initialize ordering error.

        Args:
            key: The key passed by the caller.
            existing: The stored key it was compared against.
        """
        self.key = key
        self.existing = existing
        super().__init__(
            f"Cannot order key {key!r} ({type(key).__name__}) against "
            f"{existing!r} ({type(existing).__name__})"
        )
