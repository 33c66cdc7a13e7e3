import pytest

from binarytrees.node import Node
from binarytrees.traversal import inorder, postorder, preorder


@pytest.fixture
def tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_preorder(tree):
    assert list(preorder(tree)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder(tree):
    assert list(inorder(tree)) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(tree):
    assert list(postorder(tree)) == [6, 56, 12, 256, 512, 402, 98]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(Node(7))) == [7]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_every_value_visited_once(walk, tree):
    assert sorted(walk(tree)) == [6, 12, 56, 98, 256, 402, 512]


def test_inorder_of_search_tree_is_sorted(tree):
    values = list(inorder(tree))
    assert values == sorted(values)


def test_traversal_of_subtree(tree):
    assert list(preorder(tree.right)) == [402, 256, 512]