# bintree

A small binary tree whose nodes know their parent and their children.
It offers in-place insertion, the three depth-first traversals,
measurements (height, depth, size, leaves, internal nodes, balance),
shape checks (full, perfect), family lookups (sibling, uncle) and an
ASCII renderer.

## Installation

```
pip install .
```

## Building a tree

`bintree.tree.Node` holds an integer `value` and links to `parent`,
`left` and `right`. A node made with `Node(value)` has no parent, so it
is a root.

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`insert_left` and `insert_right` return the new node and put it between
the parent and its current child. The old child becomes a child of the
new node, on the same side.

## Traversals

`preorder`, `inorder` and `postorder` are generators of the values in the
matching order:

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 128, 402, 98]
```

## Measurements and checks

All of these look at the subtree below the node they are called on,
except `depth`, `is_root`, `sibling` and `uncle`, which look upwards.

| Method          | Meaning                                                   |
|-----------------|-----------------------------------------------------------|
| `height()`      | edges on the longest path down to a leaf (a leaf is 0)    |
| `depth()`       | edges up to the root (the root is 0)                      |
| `size()`        | number of nodes in the subtree                            |
| `leaves()`      | number of nodes with no children                          |
| `nodes()`       | number of nodes with at least one child                   |
| `balance()`     | height of the left subtree minus that of the right, each counted in nodes |
| `is_leaf()`     | the node has no children                                  |
| `is_root()`     | the node has no parent                                    |
| `is_full()`     | every node has either zero or two children                |
| `is_perfect()`  | every inner node has two children and all leaves share a level |
| `sibling()`     | the other child of the parent, or `None`                  |
| `uncle()`       | the sibling of the parent, or `None`                      |

## Rendering

```python
from bintree.render import render, print_tree

text = render(root)
print_tree(root)
```

`render` returns the drawing as a string with one line per level, each
ending in a newline; it returns an empty string for `None`. Each node is
drawn as its value, padded to three digits, in parentheses, and lines
link every node to its children. For the tree above:

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

`print_tree` writes the same drawing to standard output, or to the file
object given as its second argument.

## What it does not do

`bintree` is a library only: it has no command-line program. Nodes are
not kept in any order, so there is no searching, sorting, removal of a
single node or rebalancing.

## Running the tests

```
pip install .[test]
pytest
```