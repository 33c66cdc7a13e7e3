"""Worked examples that build small trees and print what the library reports."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from binarytrees.measure import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from binarytrees.node import Node
from binarytrees.relatives import lowest_common_ancestor, sibling, uncle
from binarytrees.render import print_tree
from binarytrees.traversal import inorder, postorder, preorder


def _attach(parent: Node, value: int, side: str) -> Node:
    child = Node(value, parent)
    setattr(parent, side, child)
    return child


def _root_with_children(left: int = 12, right: int = 402) -> Node:
    root = Node(98)
    _attach(root, left, "left")
    _attach(root, right, "right")
    return root


def _grown_tree() -> Node:
    """The tree most examples start from: 98 over 12 (with 54) and 128 (with 402)."""
    root = _root_with_children()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_node_tree(inner_left: int) -> Node:
    root = _root_with_children()
    _attach(root.left, 6, "left")
    _attach(root.left, inner_left, "right")
    _attach(root.right, 256, "left")
    _attach(root.right, 512, "right")
    return root


def _family_tree() -> Node:
    root = _root_with_children(12, 128)
    _attach(root.left, 54, "right")
    _attach(root.right, 402, "right")
    _attach(root.left, 10, "left")
    _attach(root.right, 110, "left")
    _attach(root.right.right, 200, "left")
    _attach(root.right.right, 512, "right")
    return root


def _describe(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _example_0(out: TextIO) -> None:
    print_tree(_seven_node_tree(16), out)


def _example_1(out: TextIO) -> None:
    root = _root_with_children()
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _example_2(out: TextIO) -> None:
    root = _root_with_children()
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _example_3(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    root.delete()


def _example_4(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a leaf: {int(node.is_leaf())}\n")


def _example_5(out: TextIO) -> None:
    root = _grown_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a root: {int(node.is_root())}\n")


def _traversal_example(order: Callable[[Optional[Node]], object]) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _seven_node_tree(56)
        print_tree(root, out)
        for value in order(root):
            out.write(f"{value}\n")

    return run


def _grown_measure(label: str, measure: Callable[[Optional[Node]], int]) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _grown_tree()
        print_tree(root, out)
        for node in (root, root.right, root.left.right):
            out.write(f"{label} {node.value}: {measure(node)}\n")

    return run


def _example_14(out: TextIO) -> None:
    root = _grown_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {balance(node):+d}\n")


def _example_15(out: TextIO) -> None:
    root = _grown_tree()
    _attach(root.left, 10, "left")
    print_tree(root, out)
    for node in (root, root.left, root.right):
        out.write(f"Is {node.value} full: {int(is_full(node))}\n")


def _example_16(out: TextIO) -> None:
    root = _grown_tree()
    _attach(root.left, 10, "left")
    _attach(root.right, 10, "left")
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n\n")
    _attach(root.right.right, 10, "left")
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n\n")
    _attach(root.right.right, 10, "right")
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n")


def _example_17(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(f"Sibling of {node.value}: {_describe(sibling(node))}\n")


def _example_18(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        out.write(f"Uncle of {node.value}: {_describe(uncle(node))}\n")


def _example_100(out: TextIO) -> None:
    root = _root_with_children()
    _attach(root.left, 54, "right")
    _attach(root.right, 128, "right")
    _attach(root.left, 10, "left")
    _attach(root.right, 45, "left")
    _attach(root.right.right, 92, "left")
    _attach(root.right.right, 65, "right")
    print_tree(root, out)
    pairs = (
        (root.left, root.right),
        (root.right.left, root.right.right.right),
        (root.right.right, root.right.right.right),
    )
    for first, second in pairs:
        ancestor = lowest_common_ancestor(first, second)
        out.write(f"Ancestor of [{first.value}] & [{second.value}]: {_describe(ancestor)}\n")


_EXAMPLES: Dict[int, Callable[[TextIO], None]] = {
    0: _example_0,
    1: _example_1,
    2: _example_2,
    3: _example_3,
    4: _example_4,
    5: _example_5,
    6: _traversal_example(preorder),
    7: _traversal_example(inorder),
    8: _traversal_example(postorder),
    9: _grown_measure("Height from", height),
    10: _grown_measure("Depth of", depth),
    11: _grown_measure("Size of", size),
    12: _grown_measure("Leaves in", leaves),
    13: _grown_measure("Nodes in", internal_nodes),
    14: _example_14,
    15: _example_15,
    16: _example_16,
    17: _example_17,
    18: _example_18,
    100: _example_100,
}


def run_example(number: int) -> str:
    """Run the numbered example and return everything it prints.

    Raises ValueError for a number that names no example.
    """
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    out = io.StringIO()
    example(out)
    return out.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the requested examples, or all of them when none are named."""
    parser = argparse.ArgumentParser(
        prog="binarytrees-demo",
        description="Build example binary trees and print what the library reports.",
    )
    parser.add_argument(
        "examples",
        nargs="*",
        type=int,
        metavar="N",
        help=f"example numbers to run (available: {', '.join(map(str, _EXAMPLES))})",
    )
    args = parser.parse_args(argv)
    numbers: List[int] = args.examples or list(_EXAMPLES)
    for number in numbers:
        if number not in _EXAMPLES:
            parser.error(f"no example numbered {number}")
    for number in numbers:
        sys.stdout.write(run_example(number))
    return 0


if __name__ == "__main__":
    sys.exit(main())