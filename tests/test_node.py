import pytest
from hypothesis import given
from hypothesis import strategies as st

from bintrees_kit.node import (
    Node,
    balance,
    count_internal,
    count_leaves,
    depth,
    detach,
    height,
    inorder,
    insert_left,
    insert_right,
    is_full,
    is_leaf,
    is_perfect,
    is_root,
    postorder,
    preorder,
    sibling,
    size,
    uncle,
)


def _sample():
    root = Node(98)
    a = insert_left(root, 12)
    b = insert_right(root, 402)
    c = insert_left(a, 6)
    d = insert_right(a, 56)
    e = insert_left(b, 256)
    f = insert_right(b, 512)
    return root, a, b, c, d, e, f


def _build(values):
    """Arrange values into a tree whose shape follows the comparisons."""
    if not values:
        return None
    root = Node(values[0])
    for value in values[1:]:
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value, node)
                    break
                node = node.right
    return root


def _chain(values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = insert_right(node, value)
    return root, node


def test_node_starts_unlinked():
    parent = Node(1)
    child = Node(2, parent)
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None


def test_insert_left_pushes_old_child_down():
    root = Node(98)
    old = insert_left(root, 12)
    new = insert_left(root, 54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_old_child_down():
    root = Node(98)
    old = insert_right(root, 402)
    new = insert_right(root, 128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new


def test_insert_requires_parent():
    with pytest.raises(ValueError):
        insert_left(None, 1)
    with pytest.raises(ValueError):
        insert_right(None, 1)


def test_traversals_on_sample():
    root, *_ = _sample()
    assert list(preorder(root)) == [98, 12, 6, 56, 402, 256, 512]
    assert list(inorder(root)) == [6, 12, 56, 98, 256, 402, 512]
    assert list(postorder(root)) == [6, 56, 12, 256, 512, 402, 98]


def test_traversals_of_none_are_empty():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []


def test_leaf_and_root():
    root, a, _, c, *_ = _sample()
    assert is_leaf(c) is True
    assert is_leaf(a) is False
    assert is_leaf(None) is False
    assert is_root(root) is True
    assert is_root(a) is False
    assert is_root(None) is False


@pytest.mark.parametrize("count", [1, 2, 5, 9])
def test_chain_height_and_depth(count):
    values = list(range(count))
    root, tail = _chain(values)
    assert height(root) == count - 1
    assert depth(tail) == count - 1
    assert depth(root) == 0
    assert size(root) == count
    assert balance(root) == -(count - 1)


def test_empty_measures():
    assert height(None) == 0
    assert depth(None) == 0
    assert size(None) == 0
    assert count_leaves(None) == 0
    assert count_internal(None) == 0
    assert balance(None) == 0


def test_counts_on_sample():
    root, *_ = _sample()
    assert size(root) == 7
    assert count_leaves(root) == 4
    assert count_internal(root) == 3


def test_full_and_perfect_on_sample():
    root, a, b, c, d, e, f = _sample()
    assert is_full(root) and is_perfect(root)
    insert_left(c, 1)
    assert not is_full(root)
    assert not is_perfect(root)
    assert is_full(None) is False
    assert is_perfect(None) is False


def test_perfect_subtree_is_measured_from_itself():
    root, a, *_ = _sample()
    assert is_perfect(a)


def test_full_but_not_perfect():
    root, a, b, c, d, e, f = _sample()
    insert_left(c, 1)
    insert_right(c, 2)
    assert is_full(root)
    assert not is_perfect(root)


def test_sibling_and_uncle():
    root, a, b, c, d, e, f = _sample()
    assert sibling(a) is b
    assert sibling(b) is a
    assert sibling(root) is None
    assert sibling(None) is None
    assert uncle(c) is b
    assert uncle(f) is a
    assert uncle(a) is None
    assert uncle(None) is None


def test_detach_cuts_subtree():
    root, a, b, c, d, e, f = _sample()
    cut = detach(b)
    assert cut is b
    assert root.right is None
    assert b.parent is None
    assert list(preorder(b)) == [402, 256, 512]
    assert list(preorder(root)) == [98, 12, 6, 56]
    assert detach(None) is None


@given(st.lists(st.integers(-1000, 1000), max_size=40))
def test_traversal_invariants(values):
    tree = _build(values)
    assert sorted(preorder(tree)) == sorted(values)
    assert list(inorder(tree)) == sorted(values)
    assert sorted(postorder(tree)) == sorted(values)
    assert size(tree) == len(values)
    assert count_leaves(tree) + count_internal(tree) == len(values)


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40))
def test_shape_invariants(values):
    tree = _build(values)
    assert height(tree) < len(values)
    assert is_perfect(tree) == (size(tree) == 2 ** (height(tree) + 1) - 1)
    if is_perfect(tree):
        assert is_full(tree)
    assert preorder(tree).__next__() == values[0]
    assert list(postorder(tree))[-1] == values[0]