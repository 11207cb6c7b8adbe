"""
OrderedIndex abstract base class for ordered key-value indexes.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any


class OrderedIndex(ABC):
    """
    Abstract base class for ordered key-value indexes.

    Keys must be totally ordered and unique; inserting an existing key
    replaces its value. Absence is reported through return values, never
    through exceptions.

    Implementations:
    - AVLTree: Height-balanced after every mutation
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.

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
    def inorder_traversal(self, visit: Callable[[Any, Any], None]) -> None:
        """
        Call visit(key, value) once per entry in ascending key order.

        Args:
            visit: Callback receiving each key and value.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the index.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)
