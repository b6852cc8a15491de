"""AVL trees: self-balancing binary search trees over the shared node type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .bst import DuplicateValueError, is_bst
from .node import Node, _nodes, balance, inorder, size
from .structure import rotate_left, rotate_right


def is_avl(tree: Node | None) -> bool:
    """True if the tree is a valid search tree whose nodes are all height-balanced."""
    if not is_bst(tree):
        return False
    return all(abs(balance(node)) <= 1 for node in _nodes(tree))


class AVLTree:
    """An AVL tree of distinct integers."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> AVLTree:
        """Build a tree by inserting values in order, skipping repeats."""
        tree = cls()
        seen: set[int] = set()
        for value in values:
            if value not in seen:
                seen.add(value)
                tree.insert(value)
        return tree

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a balanced tree from ascending values without rotations.

        For an even count the lower of the two middle values becomes the root.
        """

        def build(low: int, high: int, parent: Node | None) -> Node | None:
            count = high - low
            if count == 0:
                return None
            middle = low + (count // 2 if count % 2 else count // 2 - 1)
            node = Node(values[middle], parent)
            node.left = build(low, middle, node)
            node.right = build(middle + 1, high, node)
            return node

        return cls(build(0, len(values), None))

    def _rebalance(self, node: Node | None) -> None:
        """Restore the balance of every node from the given one up to the root."""
        while node is not None:
            factor = balance(node)
            if factor > 1:
                if balance(node.left) < 0:
                    rotate_left(node.left)
                node = rotate_right(node)
            elif factor < -1:
                if balance(node.right) > 0:
                    rotate_right(node.right)
                node = rotate_left(node)
            if node.parent is None:
                self.root = node
            node = node.parent

    def _find(self, value: int) -> Node | None:
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def insert(self, value: int) -> Node:
        """Insert a value, rebalance, and return the node that holds it."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        parent = self.root
        while True:
            if value == parent.value:
                raise DuplicateValueError(value)
            child = parent.left if value < parent.value else parent.right
            if child is None:
                break
            parent = child
        new = Node(value, parent)
        if value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._rebalance(parent)
        return new

    def remove(self, value: int) -> None:
        """Remove a value; a node with two children takes its in-order successor."""
        node = self._find(value)
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
        self._rebalance(parent)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)