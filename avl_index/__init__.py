"""
AVL-tree based ordered key-value index.

This package provides a self-balancing index with:
- insert(key, value) - O(log N), last write wins on duplicate keys
- remove(key) - O(log N), reports whether the key was present
- find(key) - O(log N) point lookup
- inorder_traversal(visit) / iteration - ascending key order
"""

from avl_index.models.avl_tree import AVLTree

__all__ = ["AVLTree"]
