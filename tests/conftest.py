"""
Shared pytest fixtures for AVL index and console tests.
"""

import io
import math

import pytest

from avl_index import AVLTree
from avl_index.models.node import AVLNode, height
from cli import register_commands
from console.shell import Shell


def verify_subtree(node: AVLNode | None, low=None, high=None) -> int:
    """Assert order, height-cache and balance invariants below node; return its height."""
    if node is None:
        return 0

    if low is not None:
        assert node.key > low, f"order violated: {node.key!r} <= {low!r}"
    if high is not None:
        assert node.key < high, f"order violated: {node.key!r} >= {high!r}"

    left_height = verify_subtree(node.left, low, node.key)
    right_height = verify_subtree(node.right, node.key, high)

    assert node.height == 1 + max(left_height, right_height), (
        f"stale height at key {node.key!r}: cached {node.height}, "
        f"actual {1 + max(left_height, right_height)}"
    )
    assert abs(left_height - right_height) <= 1, (
        f"unbalanced at key {node.key!r}: left {left_height}, right {right_height}"
    )
    return node.height


def avl_height_bound(n: int) -> int:
    """Maximum height of an AVL tree holding n entries."""
    return math.ceil(1.4405 * math.log2(n + 2))


def shape(node: AVLNode | None):
    """Nested-tuple snapshot of a subtree for structural comparison."""
    if node is None:
        return None
    return (node.key, node.value, node.height, shape(node.left), shape(node.right))


@pytest.fixture
def check_invariants():
    """Provide a checker asserting every AVL invariant on a tree."""

    def check(tree: AVLTree) -> None:
        verify_subtree(tree._root)
        assert height(tree._root) <= avl_height_bound(tree.size())
        assert len(list(tree)) == tree.size()

    return check


@pytest.fixture
def tree():
    """Provide a fresh, empty AVLTree."""
    return AVLTree()


@pytest.fixture
def scenario_tree():
    """Provide a tree holding (10, "a"), (20, "b"), (5, "c")."""
    tree = AVLTree()
    tree.insert(10, "a")
    tree.insert(20, "b")
    tree.insert(5, "c")
    return tree


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [(10, "a"), (20, "b"), (5, "c"), (15, "d")]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(i, f"value{i}") for i in range(1000)]


@pytest.fixture
def run_session():
    """Provide a runner that feeds script lines to a fresh console and returns its output."""

    def run(*lines: str, tree: AVLTree | None = None) -> list[str]:
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        stdout = io.StringIO()
        shell = Shell(stdin=stdin, stdout=stdout, prompt="> ")
        register_commands(shell, tree if tree is not None else AVLTree())
        shell.run()
        return stdout.getvalue().splitlines()

    return run
