"""
Data models for the AVL index.
"""

from avl_index.models.exceptions import TreeInvariantError
from avl_index.models.node import AVLNode
from avl_index.models.avl_tree import AVLTree

__all__ = [
    "TreeInvariantError",
    "AVLNode",
    "AVLTree",
]
