"""Draw a binary tree as ASCII art."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.measure import height
from bintree.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col < 0:
        return
    if col >= len(row):
        row.extend(" " * (col - len(row) + 1))
    row[col] = char


def _draw(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    """Draw the subtree at the given offset and level; return its width."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, level + 1, rows)
    right = _draw(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            start = offset + left + width // 2
            span = width + right
        else:
            start = offset - width // 2
            span = left + width
        for col in range(start, start + span):
            _put(above, col, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: list[str]) -> str:
    line = "".join(row)
    return line[:2] + line[2:].rstrip(" ")


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, one line per level, or "" for None."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))