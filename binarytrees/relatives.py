"""Finding related nodes: siblings, uncles and common ancestors."""

from __future__ import annotations

from typing import Optional

from binarytrees.node import Node


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.right is not node and parent.right is not None:
        return parent.right
    if parent.left is not node and parent.left is not None:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None if there is none."""
    if node is None:
        return None
    return sibling(node.parent)


def is_ancestor(first: Optional[Node], second: Optional[Node]) -> bool:
    """Return True if ``first`` lies strictly above ``second`` in the same tree."""
    if first is None or second is None:
        return False
    current = second.parent
    while current is not None:
        if current is first:
            return True
        current = current.parent
    return False


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor here, so a node and one of its
    descendants have the node itself as their lowest common ancestor.
    """
    while first is not None and second is not None:
        if first is second or first is second.parent or is_ancestor(first, second):
            return first
        if second is first.parent:
            return second
        first = first.parent
    return None