"""
Custom exceptions for the AVL index.
"""

from typing import Any


class TreeInvariantError(AssertionError):
    """
    Raised when a rotation is attempted without the child it promotes.

    This is a fail-fast error indicating a logic defect in rebalancing.
    It is never raised for missing keys.
    """

    def __init__(self, key: Any, side: str):
        """
        Initialize invariant error.

        Args:
            key: Key of the node the rotation was invoked on.
            side: Which child was required but absent ("left" or "right").
        """
        self.key = key
        self.side = side
        super().__init__(
            f"AVL invariant violated at key {key!r}: "
            f"rotation requires a {side} child"
        )
