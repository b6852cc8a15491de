# bintrees_kit

Linked binary trees of integers. Every node holds a `value` and links to its
`parent`, `left` and `right`, so a tree can be walked upwards as well as
downwards. The package has no third-party dependencies.

## Modules

- `bintrees_kit.node`: the `Node` class and the basic operations on it.
  - Building: `insert_left(parent, value)` and `insert_right(parent, value)`. Each
    puts a new node in the child slot, and the old child, if there was one, moves
    one level down under the new node. `detach(tree)` cuts a subtree away from its
    parent and returns it.
  - Predicates: `is_leaf`, `is_root`, `is_full`, `is_perfect`.
  - Traversals, each a generator of values: `preorder`, `inorder`, `postorder`.
  - Measures: `height` counts edges and is 0 for a leaf. `depth` counts edges up to
    the root. `size`, `count_leaves` and `count_internal` count nodes. `balance`
    gives the number of levels in the left subtree minus the number in the right
    subtree.
  - Relatives: `sibling` and `uncle`. Each returns `None` when there is no such node.
- `bintrees_kit.structure`: `lowest_common_ancestor`, `levelorder` (a generator),
  `is_complete`, `rotate_left` and `rotate_right`. A rotation returns the new root
  of the subtree and also updates the link from the old parent. It raises
  `ValueError` if the child it needs is missing.
- `bintrees_kit.bst`: `is_bst` and `BinarySearchTree`, which has `insert`,
  `search`, `remove`, `in`, iteration in ascending order and `len`. Inserting a
  value that is already there raises `DuplicateValueError`, a subclass of
  `ValueError`. Removing a value that is absent raises `KeyError`. When a node with
  two children is removed, its in-order successor takes its place.
- `bintrees_kit.avl`: `is_avl` and `AVLTree`, a self-balancing search tree. It
  rebalances after each insert and after each remove. `AVLTree.from_sorted` builds
  a balanced tree from ascending values and does no rotations. When the count is
  even, the lower of the two middle values becomes the root.
- `bintrees_kit.heap`: `is_heap` and `MaxHeap`, a max binary heap kept as a
  complete tree of linked nodes. It has `insert`, `extract`, `drain_sorted`, `len`
  and truth testing. `extract` on an empty heap raises `IndexError`.
- `bintrees_kit.printer`: `render(tree)` returns an ASCII drawing of a tree, with
  each row ending in a newline. `print_tree(tree, file=None)` writes that drawing
  to a stream, which is standard output unless you pass another.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## A quick look

```python
from bintrees_kit.node import Node, insert_left, insert_right, height, size
from bintrees_kit.node import preorder
from bintrees_kit.printer import print_tree

root = Node(98)
insert_left(root, 12)
insert_right(root, 402)
insert_left(root.left, 6)

print(list(preorder(root)))   # [98, 12, 6, 402]
print(height(root), size(root))  # 2 4
print_tree(root)
```

In the drawing, each value is padded to three digits and put in parentheses. A
dot marks the place where each child hangs from its parent's row:

```
       .--(098)--.
  .--(012)     (402)
(006)
```

## Search trees and heaps

```python
from bintrees_kit.bst import BinarySearchTree
from bintrees_kit.avl import AVLTree
from bintrees_kit.heap import MaxHeap

bst = BinarySearchTree.from_values([98, 402, 12, 46, 128])
bst.remove(98)
print(46 in bst, list(bst))  # True [12, 46, 128, 402]

avl = AVLTree.from_values(range(10))
print(list(avl), len(avl))   # [0, 1, ..., 9] 10

heap = MaxHeap.from_values([79, 47, 68, 87, 84, 91, 21, 32])
print(heap.extract())        # 91
print(heap.drain_sorted())   # [87, 84, 79, 68, 47, 32, 21]
```

`BinarySearchTree.from_values` and `AVLTree.from_values` skip repeated values.
`MaxHeap` keeps every value it is given.

## What it does not do

This is a library only. It has no command-line program, and it does not save
trees to disk or load them from disk.