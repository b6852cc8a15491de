"""Binary tree nodes and the basic queries and edits on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _nodes(tree: Node | None) -> Iterator[Node]:
    """Yield the nodes of a tree in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest path from the root down, 0 for None."""
    count = 0
    frontier = [tree] if tree is not None else []
    while frontier:
        count += 1
        frontier = [child for node in frontier for child in _children(node)]
    return count


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new left child; any old left child becomes its left child."""
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new right child; any old right child becomes its right child."""
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def detach(tree: Node | None) -> Node | None:
    """Cut a subtree loose from its parent and return it."""
    if tree is None:
        return None
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
        tree.parent = None
    return tree


def is_leaf(node: Node | None) -> bool:
    """True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """True if the node exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order."""
    for node in _nodes(tree):
        yield node.value


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order."""
    order: list[int] = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        order.append(node.value)
        stack.extend(_children(node))
    yield from reversed(order)


def height(tree: Node | None) -> int:
    """Edges on the longest downward path; 0 for a leaf or None."""
    return max(_levels(tree) - 1, 0)


def depth(node: Node | None) -> int:
    """Number of edges from the node up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def count_leaves(tree: Node | None) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def count_internal(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def balance(tree: Node | None) -> int:
    """Left subtree height minus right subtree height; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """True if every inner node has two children and all leaves share a level."""
    if tree is None:
        return False
    leaf_level = 0
    probe = tree
    while not is_leaf(probe):
        probe = probe.left if probe.left is not None else probe.right
        leaf_level += 1
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if is_leaf(node):
            if level != leaf_level:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, level + 1))
        stack.append((node.right, level + 1))
    return True


def sibling(node: Node | None) -> Node | None:
    """The other child of the node's parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """The sibling of the node's parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)