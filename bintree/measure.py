"""Traversals and whole-tree measurements."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then node, then right subtree."""
    stack: list[Node] = []
    current = tree
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.value
        current = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then right subtree, then node."""
    reversed_order: list[int] = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)


def _levels(tree: Optional[Node]) -> int:
    """Number of levels in the tree, counting nodes along the longest path."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest root-to-leaf path (0 for None)."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in preorder(tree))


def leaves(tree: Optional[Node]) -> int:
    """Count leaves.

    A node missing either child is counted as one leaf and its
    subtrees are not descended into.
    """
    count = 0
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        if node.left is None or node.right is None:
            count += 1
        else:
            stack.append(node.right)
            stack.append(node.left)
    return count


def nodes(tree: Optional[Node]) -> int:
    """Count the nodes that have at least one child."""
    count = 0
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        children = [c for c in (node.left, node.right) if c is not None]
        if children:
            count += 1
            stack.extend(children)
    return count


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right's (0 for None)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two (False for None)."""
    if tree is None:
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            continue
        if node.left is None or node.right is None:
            return False
        stack.append(node.left)
        stack.append(node.right)
    return True


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one level."""
    if tree is None:
        return False
    stack = [(tree, _levels(tree))]
    while stack:
        node, remaining = stack.pop()
        if node.left is None and node.right is None:
            if remaining != 1:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, remaining - 1))
        stack.append((node.right, remaining - 1))
    return True