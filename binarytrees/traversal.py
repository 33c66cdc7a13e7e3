"""Depth-first traversals yielding node values."""

from __future__ import annotations

from typing import Iterator, Optional

from binarytrees.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in root, left, right order."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in left, root, right order."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in left, right, root order."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value