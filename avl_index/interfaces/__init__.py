"""
Abstract base classes for ordered indexes.
"""

from avl_index.interfaces.ordered_index import OrderedIndex

__all__ = ["OrderedIndex"]
