import io

import pytest

from binarytrees.node import Node
from binarytrees.render import print_tree, render


@pytest.fixture
def tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(128, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(45, root.right)
    root.right.right.left = Node(92, root.right.right)
    root.right.right.right = Node(65, root.right.right)
    return root


def test_render_worked_example(tree):
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)-------.\n"
        "(010)     (054)     (045)       .--(128)--.\n"
        "                              (092)     (065)\n"
    )
    assert render(tree) == expected


def test_render_empty_tree():
    assert render(None) == ""


def test_single_node_is_zero_padded():
    assert render(Node(98)) == "(098)\n"


def test_negative_value_label():
    assert render(Node(-5)) == "(-05)\n"


def test_line_count_matches_levels(tree):
    assert len(render(tree).splitlines()) == 4


def test_no_trailing_spaces(tree):
    for line in render(tree).splitlines():
        assert line == line.rstrip(" ")


def test_every_value_appears(tree):
    text = render(tree)
    for value in (98, 12, 402, 54, 128, 10, 45, 92, 65):
        assert f"({value:03d})" in text


def test_subtree_root_has_no_connector_above(tree):
    lines = render(tree.right.right).splitlines()
    assert lines[0].strip().startswith(".")
    assert "(128)" in lines[0]
    assert len(lines) == 2


def test_print_tree_writes_render(tree):
    buffer = io.StringIO()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render(tree)


def test_print_tree_defaults_to_stdout(tree, capsys):
    print_tree(tree)
    assert capsys.readouterr().out == render(tree)


def test_print_tree_empty_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""