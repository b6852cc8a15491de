"""Binary search trees over the shared node type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .node import Node, inorder, size


class DuplicateValueError(ValueError):
    """Raised when inserting a value already present in a search tree."""


def is_bst(tree: Node | None) -> bool:
    """True if the tree is a valid binary search tree with distinct values."""
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting values in order, skipping repeats."""
        tree = cls()
        for value in values:
            if value not in tree:
                tree.insert(value)
        return tree

    def insert(self, value: int) -> Node:
        """Insert a value and return its new node."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                raise DuplicateValueError(value)

    def search(self, value: int) -> Node | None:
        """Return the node holding the value, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def remove(self, value: int) -> None:
        """Remove a value; a node with two children takes its in-order successor."""
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)