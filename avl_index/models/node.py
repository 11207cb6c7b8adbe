"""
AVL node and the recursive procedures that keep a subtree ordered and balanced.

Every mutating procedure takes the root of a subtree and returns the root that
replaces it, so callers always reassign: ``node.left = insert(node.left, k, v)``.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from avl_index.models.exceptions import TreeInvariantError


@dataclass
class AVLNode:
    """Node in the AVL tree. Owns its children; keeps its own subtree height."""

    key: Any
    value: Any
    height: int = 1
    left: "AVLNode | None" = None
    right: "AVLNode | None" = None


def height(node: AVLNode | None) -> int:
    """Cached height of a subtree, 0 when absent. O(1)"""
    return node.height if node is not None else 0


def update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: AVLNode) -> int:
    """Left height minus right height. Positive means left-heavy."""
    return height(node.left) - height(node.right)


def rotate_right(node: AVLNode) -> AVLNode:
    """
    Promote the left child to subtree root.

    Args:
        node: Current subtree root. Must have a left child.

    Returns:
        The new subtree root (the former left child).

    Raises:
        TreeInvariantError: If node has no left child.
    """
    new_root = node.left
    if new_root is None:
        raise TreeInvariantError(node.key, "left")

    node.left = new_root.right
    update_height(node)
    new_root.right = node
    update_height(new_root)
    return new_root


def rotate_left(node: AVLNode) -> AVLNode:
    """
    Promote the right child to subtree root.

    Args:
        node: Current subtree root. Must have a right child.

    Returns:
        The new subtree root (the former right child).

    Raises:
        TreeInvariantError: If node has no right child.
    """
    new_root = node.right
    if new_root is None:
        raise TreeInvariantError(node.key, "right")

    node.right = new_root.left
    update_height(node)
    new_root.left = node
    update_height(new_root)
    return new_root


def balance(node: AVLNode) -> AVLNode:
    """
    Restore the height-balance invariant at node after a change below it.

    Children are assumed balanced with correct heights. At most two
    rotations are performed.

    Returns:
        The new subtree root.
    """
    update_height(node)
    factor = balance_factor(node)

    # Left-heavy
    if factor > 1:
        if balance_factor(node.left) < 0:
            # Left-right case
            node.left = rotate_left(node.left)
        return rotate_right(node)

    # Right-heavy
    if factor < -1:
        if balance_factor(node.right) > 0:
            # Right-left case
            node.right = rotate_right(node.right)
        return rotate_left(node)

    return node


def insert(node: AVLNode | None, key: Any, value: Any) -> AVLNode:
    """
    Insert or update a key-value pair in a subtree. O(log N)

    An existing key keeps its node and has its value overwritten.

    Returns:
        The new, balanced subtree root.
    """
    if node is None:
        return AVLNode(key=key, value=value)

    if key < node.key:
        node.left = insert(node.left, key, value)
    elif key > node.key:
        node.right = insert(node.right, key, value)
    else:
        node.value = value
        return node

    return balance(node)


def find_min(node: AVLNode) -> AVLNode:
    """Leftmost node of a non-empty subtree."""
    while node.left is not None:
        node = node.left
    return node


def remove(node: AVLNode | None, key: Any) -> tuple[AVLNode | None, bool]:
    """
    Remove key from a subtree. O(log N)

    Args:
        node: Subtree root, possibly None.
        key: The key to remove.

    Returns:
        Tuple of (new subtree root or None, whether key was found and removed).
        On a miss the subtree is returned untouched.
    """
    if node is None:
        return None, False

    if key < node.key:
        node.left, removed = remove(node.left, key)
    elif key > node.key:
        node.right, removed = remove(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True

        # Two children: take over the in-order successor's entry,
        # then drop the successor, which has no left child.
        successor = find_min(node.right)
        node.key = successor.key
        node.value = successor.value
        node.right, removed = remove(node.right, successor.key)

    if not removed:
        return node, False

    return balance(node), True


def find(node: AVLNode | None, key: Any) -> AVLNode | None:
    """Node holding key, or None. No mutation. O(log N)"""
    if node is None:
        return None
    if key < node.key:
        return find(node.left, key)
    if key > node.key:
        return find(node.right, key)
    return node


def inorder_traversal(node: AVLNode | None, visit: Callable[[Any, Any], None]) -> None:
    """Call visit(key, value) for every node of the subtree in ascending key order."""
    if node is None:
        return
    inorder_traversal(node.left, visit)
    visit(node.key, node.value)
    inorder_traversal(node.right, visit)


def iter_inorder(node: AVLNode | None) -> Iterator[tuple[Any, Any]]:
    """Lazily yield (key, value) pairs of the subtree in ascending key order."""
    stack: list[AVLNode] = []
    current = node

    while stack or current is not None:
        # Push leftmost path
        while current is not None:
            stack.append(current)
            current = current.left

        current = stack.pop()
        yield current.key, current.value
        current = current.right
