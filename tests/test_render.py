import io

import pytest

from bintree.measure import height, size
from bintree.node import Node
from bintree.render import print_tree, render


def _attach(parent, value, side):
    child = Node(value, parent=parent)
    setattr(parent, side, child)
    return child


def _sample():
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 402, "right")
    _attach(left, 6, "left")
    _attach(left, 16, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


def test_render_none_is_empty():
    assert render(None) == ""


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_sample()) == expected


def test_line_count_matches_height():
    root = _sample()
    root.left.left.insert_left(3)
    root.left.left.left.insert_left(1)
    assert len(render(root).splitlines()) == height(root) + 1


def test_every_label_appears():
    root = _sample()
    text = render(root)
    for value in (98, 12, 402, 6, 16, 256, 512):
        assert f"({value:03d})" in text


def test_one_connector_per_child():
    root = _sample()
    root.right.insert_right(128)
    assert render(root).count(".") == size(root) - 1


def test_no_trailing_spaces():
    root = Node(98)
    root.insert_left(12).insert_left(6)
    for line in render(root).splitlines():
        assert line == line.rstrip(" ")


def test_subtree_renders_like_detached_copy():
    root = _sample()
    detached = Node(12)
    _attach(detached, 6, "left")
    _attach(detached, 16, "right")
    assert render(root.left) == render(detached)


@pytest.mark.parametrize("value", [5, 42, 777])
def test_labels_are_zero_padded_to_three_digits(value):
    assert render(Node(value)).strip() == "(" + str(value).zfill(3) + ")"


def test_print_tree_writes_render_output():
    root = _sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = _sample()
    print_tree(root)
    assert capsys.readouterr().out == render(root)