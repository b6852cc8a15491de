"""Text drawing of a binary tree, one row per level."""

from __future__ import annotations

import sys
from typing import TextIO

from .node import Node, height


class _Canvas:
    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col - len(line) + 1))
        line[col] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _draw(tree: Node | None, offset: int, level: int, canvas: _Canvas) -> int:
    """Draw a subtree at the given offset and return the width it takes."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, level + 1, canvas)
    right = _draw(tree.right, offset + left + width, level + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)
    if level:
        if is_left:
            for i in range(width + right):
                canvas.put(level - 1, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                canvas.put(level - 1, offset - width // 2 + i, "-")
        canvas.put(level - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of a tree, each row ending in a newline."""
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of a tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))