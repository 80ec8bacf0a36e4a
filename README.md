# bintree

A small library of linked binary trees. Each `Node` holds an integer
`value`, a `parent` link and `left` and `right` children. The library
provides insertion, family lookups, traversals, measurements and a text
drawing of a tree.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 takes the right slot and 402 becomes its right child
```

`Node.insert_left` and `Node.insert_right` create a new node in the chosen
child slot and return it. If that slot already holds a child, the old child
moves down one level and keeps its side under the new node.

`Node(value, parent=p)` only records the parent; it does not attach the new
node. To attach it, assign it to `p.left` or `p.right` yourself.

## Relatives

```python
from bintree.node import is_leaf, is_root, depth, sibling, uncle, delete

is_root(root)              # True
is_leaf(root.right.right)  # True
depth(root.left.right)     # 2
sibling(root.left)         # the node holding 128
uncle(root.left.right)     # the node holding 128
delete(root)               # detaches every node in the tree
```

- `depth` counts the edges from a node up to its root.
- `sibling` and `uncle` return `None` when there is no such node.
- `delete` unlinks the subtree from its parent and clears every link inside it.

## Traversals and measurements

```python
from bintree.measure import (
    preorder, inorder, postorder,
    height, size, leaves, nodes, balance, is_full, is_perfect,
)

list(preorder(root))   # values, node first, then left and right subtrees
list(inorder(root))    # values, left subtree, node, right subtree
list(postorder(root))  # values, left and right subtrees, then the node
height(root)           # edges on the longest path down to a leaf
size(root)             # number of nodes
leaves(root)           # see below
nodes(root)            # number of nodes with at least one child
balance(root)          # levels in the left subtree minus levels in the right
is_full(root)          # every node has either 0 or 2 children
is_perfect(root)       # full, with every leaf on the same level
```

The traversals are generators of node values. Every function here accepts
`None` as an empty tree: counts and `height` give 0, `balance` gives 0, and
`is_full` and `is_perfect` give `False`.

`leaves` counts any node that is missing at least one child as a single leaf
and does not look below it; only nodes with both children are descended into.

## Rendering

```python
from bintree.render import render, print_tree

print(render(root), end="")
print_tree(root)                 # writes to standard output
print_tree(root, file=some_file) # or to any text stream
```

`render` returns one line per level, each ending in a newline, or an empty
string for `None`. Every value is drawn as a zero-padded field such as
`(098)`; lines of dashes join each parent to its children, with a `.` above
the middle of each child.

## Demonstrations

The package installs a command that builds sample trees, draws them and
prints what the library reports about them:

```
bintree-demo          # run all demonstrations, 0 to 18
bintree-demo 9 10     # run only the chosen ones
```

From Python, `bintree.demo.run_task(number, out)` runs a single
demonstration and writes its output to the text stream `out` (standard
output by default); an unknown number raises `ValueError`.

## What it does not do

The trees are not search trees: insertion goes exactly where you put it, and
there is no ordering, searching, rebalancing or saving to disk.