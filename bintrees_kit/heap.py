"""Max binary heaps stored as linked complete binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from .node import Node, _nodes, size
from .structure import is_complete


def is_heap(tree: Node | None) -> bool:
    """True if the tree is complete and every parent is greater than its children."""
    if tree is None or not is_complete(tree):
        return False
    return all(
        child is None or node.value > child.value
        for node in _nodes(tree)
        for child in (node.left, node.right)
    )


class MaxHeap:
    """A max binary heap of integers kept as a complete binary tree."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> MaxHeap:
        """Build a heap by inserting values in order."""
        heap = cls()
        for value in values:
            heap.insert(value)
        return heap

    def _at(self, index: int) -> Node:
        """Node at a 1-based level-order position; each bit after the first picks a side."""
        node = self.root
        for bit in bin(index)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert a value and return the node it settles in."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        index = size(self.root) + 1
        parent = self._at(index // 2)
        node = Node(value, parent)
        if index & 1:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value."""
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        count = size(self.root)
        if count == 1:
            self.root = None
            return top
        last = self._at(count)
        self.root.value = last.value
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        node = self.root
        while node.left is not None:
            child = node.left
            if node.right is not None and node.right.value >= child.value:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child
        return top

    def drain_sorted(self) -> list[int]:
        """Extract every value, emptying the heap; largest first."""
        values = []
        while self.root is not None:
            values.append(self.extract())
        return values

    def __len__(self) -> int:
        return size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None