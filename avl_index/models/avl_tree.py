"""
AVL Tree implementation for ordered key-value storage.

Keeps sibling subtree heights within one of each other after every insert
and remove, so lookups stay O(log N) regardless of insertion order.
"""

from collections.abc import Callable, Iterator
from typing import Any

from avl_index.interfaces.ordered_index import OrderedIndex
from avl_index.models import node as avl
from avl_index.models.node import AVLNode


class AVLTree(OrderedIndex):
    """
    AVL Tree implementation of OrderedIndex.

    Properties maintained:
    1. Keys in a left subtree are smaller than the node key, keys in a
       right subtree are larger
    2. Every node caches 1 + the height of its taller child
    3. Sibling subtree heights differ by at most one

    Not thread-safe; callers must serialize access.
    """

    def __init__(self) -> None:
        self._root: AVLNode | None = None
        self._size: int = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        if self._root is None:
            self._root = AVLNode(key=key, value=value)
            self._size = 1
            return

        is_new = avl.find(self._root, key) is None
        self._root = avl.insert(self._root, key, value)
        if is_new:
            self._size += 1

    def remove(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        if self._root is None:
            return False

        self._root, removed = avl.remove(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def find(self, key: Any) -> Any | None:
        """Retrieve value by key. O(log N)"""
        node = avl.find(self._root, key)
        return node.value if node else None

    def has(self, key: Any) -> bool:
        return avl.find(self._root, key) is not None

    def inorder_traversal(self, visit: Callable[[Any, Any], None]) -> None:
        avl.inorder_traversal(self._root, visit)

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the root, 0 for an empty tree."""
        return avl.height(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return avl.iter_inorder(self._root)

    def items(self) -> Iterator[tuple[Any, Any]]:
        return avl.iter_inorder(self._root)

    def keys(self) -> Iterator[Any]:
        for key, _ in avl.iter_inorder(self._root):
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in avl.iter_inorder(self._root):
            yield value

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
