"""Structural queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """The deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    ancestors: set[Node] = set()
    node: Node | None = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue: deque[Node] = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def is_complete(tree: Node | None) -> bool:
    """True if every level is full except the last, filled from the left."""
    if tree is None:
        return False
    seen_gap = False
    queue: deque[Node] = deque([tree])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True


def _relink_parent(old: Node, new: Node, parent: Node | None) -> None:
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node) -> Node:
    """Left-rotate the subtree and return its new root."""
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    _relink_parent(tree, pivot, parent)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Right-rotate the subtree and return its new root."""
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    _relink_parent(tree, pivot, parent)
    return pivot