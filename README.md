# binarytrees

A small toolkit for plain binary trees of integers. Every node keeps a link
to its parent as well as to its two children.

## Nodes

`binarytrees.node.Node(value, parent=None, left=None, right=None)` is a
dataclass holding one integer. Creating a node with a `parent` does not
attach it: assign it to `parent.left` or `parent.right` yourself, or use the
insert methods.

- `insert_left(value)` / `insert_right(value)` create a new child and return
  it. An existing child on that side moves down to become the same-side child
  of the new node.
- `delete()` detaches the subtree from its parent and unlinks every node in it.
- `is_leaf()` is true when the node has no children; `is_root()` is true when
  it has no parent.

## Traversals

`binarytrees.traversal` has `preorder`, `inorder` and `postorder`. Each is a
generator yielding node values in its order; an empty tree (`None`) yields
nothing.

## Measurements

`binarytrees.measure`:

- `height(tree)`: edges on the longest path down to a leaf (0 for a single
  node or `None`).
- `depth(node)`: edges between the node and the root.
- `size(tree)`, `leaves(tree)`, `internal_nodes(tree)`: number of nodes, of
  nodes without children, and of nodes with at least one child.
- `balance(tree)`: height of the left subtree minus that of the right one.
- `is_full(tree)`: every node has zero or two children. `None` is not full.
- `is_perfect(tree)`: the tree is full and the root's two subtrees have equal
  height.

## Relatives

`binarytrees.relatives`:

- `sibling(node)`, `uncle(node)`: the other child of the parent, or of the
  grandparent; `None` when there is none.
- `is_ancestor(first, second)`: `first` lies strictly above `second`.
- `lowest_common_ancestor(first, second)`: the deepest node above or equal to
  both; a node and one of its descendants give the node itself. Returns
  `None` when the nodes share no ancestor.

## Drawing

`binarytrees.render.render(tree)` returns an ASCII drawing, one line per
level, each line ending in a newline; values are zero-padded to three digits,
for example `(098)`. An empty tree gives an empty string.
`print_tree(tree, file=None)` writes the drawing to `file`, or to standard
output.

## Example

```python
from binarytrees.node import Node
from binarytrees.render import render
from binarytrees.traversal import inorder
from binarytrees.measure import height

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)

print(render(root))
print(list(inorder(root)))   # [12, 54, 98, 402]
print(height(root))          # 2
```

## Worked examples

`binarytrees.demo` holds numbered examples (0 to 18, and 100) that build small
trees and print what the library reports about them.
`run_example(number)` returns an example's output as a string and raises
`ValueError` for an unknown number. The command runs the examples named on
the command line, or all of them when none are named:

```
binarytrees-demo
binarytrees-demo 0 14 100
```

## Tests

Install the `test` extra and run `pytest`.