"""Demonstration scenarios exercising every tree operation."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from bintree.measure import (
    balance,
    height,
    inorder,
    is_full,
    is_perfect,
    leaves,
    nodes,
    postorder,
    preorder,
    size,
)
from bintree.node import Node, delete, depth, is_leaf, is_root, sibling, uncle
from bintree.render import print_tree

_NULL = "(nil)"

_TASKS: dict[int, Callable[[TextIO], None]] = {}


def _task(number: int) -> Callable[[Callable[[TextIO], None]], Callable[[TextIO], None]]:
    def register(func: Callable[[TextIO], None]) -> Callable[[TextIO], None]:
        _TASKS[number] = func
        return func

    return register


def _attach(parent: Node, value: int, side: str) -> Node:
    child = Node(value, parent=parent)
    setattr(parent, side, child)
    return child


def _seven_node_tree(left_right: int) -> Node:
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 402, "right")
    _attach(left, 6, "left")
    _attach(left, left_right, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


def _four_node_tree() -> Node:
    root = Node(98)
    _attach(root, 12, "left")
    _attach(root, 402, "right")
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _eight_node_tree() -> Node:
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 128, "right")
    _attach(left, 54, "right")
    far = _attach(right, 402, "right")
    _attach(left, 10, "left")
    _attach(right, 110, "left")
    _attach(far, 200, "left")
    _attach(far, 512, "right")
    return root


@_task(0)
def _node_task(out: TextIO) -> None:
    print_tree(_seven_node_tree(16), out)


@_task(1)
def _insert_left_task(out: TextIO) -> None:
    root = Node(98)
    _attach(root, 12, "left")
    _attach(root, 402, "right")
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


@_task(2)
def _insert_right_task(out: TextIO) -> None:
    root = Node(98)
    _attach(root, 12, "left")
    _attach(root, 402, "right")
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


@_task(3)
def _delete_task(out: TextIO) -> None:
    root = _four_node_tree()
    print_tree(root, out)
    delete(root)


def _report(out: TextIO, template: str, subjects: Sequence[Node], func) -> None:
    for node in subjects:
        out.write(template.format(node.value, func(node)) + "\n")


@_task(4)
def _is_leaf_task(out: TextIO) -> None:
    root = _four_node_tree()
    print_tree(root, out)
    _report(out, "Is {} a leaf: {}", [root, root.right, root.right.right],
            lambda n: int(is_leaf(n)))


@_task(5)
def _is_root_task(out: TextIO) -> None:
    root = _four_node_tree()
    print_tree(root, out)
    _report(out, "Is {} a root: {}", [root, root.right, root.right.right],
            lambda n: int(is_root(n)))


def _traversal_task(out: TextIO, traverse) -> None:
    root = _seven_node_tree(56)
    print_tree(root, out)
    for value in traverse(root):
        out.write(f"{value}\n")


@_task(6)
def _preorder_task(out: TextIO) -> None:
    _traversal_task(out, preorder)


@_task(7)
def _inorder_task(out: TextIO) -> None:
    _traversal_task(out, inorder)


@_task(8)
def _postorder_task(out: TextIO) -> None:
    _traversal_task(out, postorder)


def _measure_task(out: TextIO, template: str, func) -> None:
    root = _four_node_tree()
    print_tree(root, out)
    _report(out, template, [root, root.right, root.left.right], func)


@_task(9)
def _height_task(out: TextIO) -> None:
    _measure_task(out, "Height from {}: {}", height)


@_task(10)
def _depth_task(out: TextIO) -> None:
    _measure_task(out, "Depth of {}: {}", depth)


@_task(11)
def _size_task(out: TextIO) -> None:
    _measure_task(out, "Size of {}: {}", size)


@_task(12)
def _leaves_task(out: TextIO) -> None:
    _measure_task(out, "Leaves in {}: {}", leaves)


@_task(13)
def _nodes_task(out: TextIO) -> None:
    _measure_task(out, "Nodes in {}: {}", nodes)


@_task(14)
def _balance_task(out: TextIO) -> None:
    root = _four_node_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {balance(node):+d}\n")


@_task(15)
def _is_full_task(out: TextIO) -> None:
    root = _four_node_tree()
    _attach(root.left, 10, "left")
    print_tree(root, out)
    _report(out, "Is {} full: {}", [root, root.left, root.right],
            lambda n: int(is_full(n)))


@_task(16)
def _is_perfect_task(out: TextIO) -> None:
    root = _four_node_tree()
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


def _relative(out: TextIO, label: str, node: Node, other: Optional[Node]) -> None:
    shown = _NULL if other is None else other.value
    out.write(f"{label} of {node.value}: {shown}\n")


@_task(17)
def _sibling_task(out: TextIO) -> None:
    root = _eight_node_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        _relative(out, "Sibling", node, sibling(node))


@_task(18)
def _uncle_task(out: TextIO) -> None:
    root = _eight_node_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        _relative(out, "Uncle", node, uncle(node))


def run_task(number: int, out: Optional[TextIO] = None) -> None:
    """Run the numbered demonstration, writing its output to out."""
    try:
        task = _TASKS[number]
    except KeyError:
        raise ValueError(f"no demonstration numbered {number}") from None
    task(out if out is not None else sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstrations (all of them by default)."""
    parser = argparse.ArgumentParser(description="Binary tree demonstrations.")
    parser.add_argument(
        "tasks",
        nargs="*",
        type=int,
        choices=sorted(_TASKS),
        metavar="TASK",
        help="demonstration numbers from 0 to 18",
    )
    args = parser.parse_args(argv)
    for number in args.tasks or sorted(_TASKS):
        run_task(number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())