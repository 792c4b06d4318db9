"""
OrderedMap abstract base class for ordered key-value trees.
"""

from abc import ABC, abstractmethod
from typing import Any


class OrderedMap(ABC):
    """
    Abstract base class for ordered key-value containers.

    Provides O(log N) operations for add and get. Deletion removes a
    whole branch and hands it back to the caller.

    Implementations:
    - Tree: height-balanced, rebalanced by rotations on insert
    """

    @abstractmethod
    def add(self, key: Any, value: Any) -> tuple[Any, Any]:
        """
        Insert a key-value pair unless the key is already present.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Returns:
            The two most recent descent steps taken by the insertion.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.
            default: Returned when the key is absent.

        Returns:
            The value if found, default otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> "OrderedMap":
        """
        Detach the branch rooted at key.

        Args:
            key: The key whose branch is removed.

        Returns:
            The detached branch as an independent container, empty if the
            key was not found.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def level_max(self) -> int:
        """Return the length of the longest root-to-leaf path."""
        pass

    @abstractmethod
    def level_min(self) -> int:
        """Return the minimum level statistic of the root."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.
        """
        pass
