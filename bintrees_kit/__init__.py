"""Linked binary trees: traversals, structural checks, BST, AVL, max-heap and printing."""

__version__ = "0.1.0"
__all__ = ["node", "printer", "structure", "bst", "avl", "heap"]