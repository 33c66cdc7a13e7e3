"""Measurements and shape checks of binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from binarytrees.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    pending = [tree] if tree is not None else []
    while pending:
        node = pending.pop()
        yield node
        pending.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path from ``tree``."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path from ``tree`` to a leaf."""
    if tree is None:
        return 0
    return max(
        (1 + height(child) for child in (tree.left, tree.right) if child is not None),
        default=0,
    )


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and the root of its tree."""
    if node is None:
        return 0
    count = 0
    while node.parent is not None:
        node = node.parent
        count += 1
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and its root's subtrees have equal height."""
    return balance(tree) == 0 and is_full(tree)