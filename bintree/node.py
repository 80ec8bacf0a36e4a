"""Binary tree nodes and queries about a node's place in its tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent does not attach it to that parent;
    assign it to ``parent.left`` or ``parent.right`` to do so.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child, pushing any existing one down to its left."""
        node = Node(value, parent=self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child, pushing any existing one down to its right."""
        node = Node(value, parent=self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node


def delete(tree: Optional[Node]) -> None:
    """Take a whole subtree apart, detaching it from its parent."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if the node exists and has no parent."""
    return node is not None and node.parent is None


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root (0 for None)."""
    count = 0
    if node is None:
        return count
    current = node.parent
    while current is not None:
        count += 1
        current = current.parent
    return count


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    parent = node.parent
    grandparent = parent.parent
    if grandparent.right is parent:
        return grandparent.left
    if grandparent.left is parent:
        return grandparent.right
    return None