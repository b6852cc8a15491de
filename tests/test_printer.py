import io

from hypothesis import given
from hypothesis import strategies as st

from bintrees_kit.node import Node, height, insert_left, insert_right
from bintrees_kit.printer import print_tree, render


def _build(values):
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


def test_empty_tree_renders_nothing():
    assert render(None) == ""


def test_single_node():
    assert render(Node(98)) == "(098)\n"


def test_negative_value_is_padded():
    assert render(Node(-5)) == "(-05)\n"


def test_three_nodes():
    root = Node(98)
    insert_left(root, 12)
    insert_right(root, 402)
    assert render(root).splitlines() == ["  .--(098)--.", "(012)     (402)"]


def test_print_tree_writes_render():
    root = Node(98)
    insert_left(root, 12)
    stream = io.StringIO()
    print_tree(root, stream)
    assert stream.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(7))
    assert capsys.readouterr().out == render(Node(7))


def test_wide_tree_grows_past_fixed_width():
    root = _build(list(range(60)))
    lines = render(root).splitlines()
    assert len(lines) == height(root) + 1
    assert lines[-1].endswith("(059)")


@given(st.lists(st.integers(0, 999), min_size=1, max_size=30))
def test_render_shape(values):
    tree = _build(values)
    text = render(tree)
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == height(tree) + 1
    assert all(line == line.rstrip() for line in lines)
    assert lines[0].count("(") == 1
    for value in values:
        assert f"({value:03d})" in text
    assert text.count("(") == len(values)