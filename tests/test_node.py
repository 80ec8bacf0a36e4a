import pytest

from bintree.node import Node, delete, depth, is_leaf, is_root, sibling, uncle


@pytest.fixture
def tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_has_no_links():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None and node.left is None and node.right is None


def test_node_constructor_does_not_attach_to_parent():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None


def test_insert_left_into_empty_slot():
    root = Node(98)
    child = root.insert_left(54)
    assert root.left is child
    assert child.parent is root
    assert child.value == 54
    assert child.left is None and child.right is None


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = Node(12, root)
    root.left = old
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_into_empty_slot():
    root = Node(98)
    child = root.insert_right(128)
    assert root.right is child
    assert child.parent is root
    assert child.value == 128


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = Node(402, root)
    root.right = old
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf(tree):
    assert not is_leaf(tree)
    assert not is_leaf(tree.right)
    assert is_leaf(tree.left.left)
    assert not is_leaf(None)


def test_is_root(tree):
    assert is_root(tree)
    assert not is_root(tree.right)
    assert not is_root(tree.right.right)
    assert not is_root(None)


def test_depth_of_root_and_none(tree):
    assert depth(tree) == 0
    assert depth(None) == 0


@pytest.mark.parametrize("length", [1, 2, 5, 20])
def test_depth_of_chain(length):
    root = Node(1)
    node = root
    for value in range(length):
        node = node.insert_left(value)
    assert depth(node) == length


def test_depth_grows_by_one_per_level(tree):
    assert depth(tree.right.right.left) == depth(tree.right.right) + 1
    assert depth(tree.right) == depth(tree) + 1


def test_sibling(tree):
    assert sibling(tree.left) is tree.right
    assert sibling(tree.right.left) is tree.right.right
    assert sibling(tree.left.right) is tree.left.left
    assert sibling(tree) is None
    assert sibling(None) is None


def test_sibling_of_only_child():
    root = Node(1)
    child = root.insert_left(2)
    assert sibling(child) is None


def test_uncle(tree):
    assert uncle(tree.right.left) is tree.left
    assert uncle(tree.left.right) is tree.right
    assert uncle(tree.left) is None
    assert uncle(None) is None


def test_uncle_missing():
    root = Node(1)
    child = root.insert_left(2)
    grandchild = child.insert_right(3)
    assert uncle(grandchild) is None


def test_delete_subtree_detaches_it(tree):
    subtree = tree.right
    inner = subtree.right
    delete(subtree)
    assert tree.right is None
    assert tree.left is not None and tree.left.value == 12
    assert subtree.parent is None
    assert subtree.left is None and subtree.right is None
    assert inner.parent is None and inner.left is None


def test_delete_whole_tree(tree):
    left = tree.left
    delete(tree)
    assert tree.left is None and tree.right is None
    assert left.parent is None
    assert is_leaf(left)