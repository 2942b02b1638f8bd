# arbor

Binary trees whose nodes link to their parent as well as their children. The
package also provides three tree structures built on those nodes: binary search
trees, AVL trees and max binary heaps. All values are integers.

## Nodes

```python
from arbor.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
leaf = left.insert_right(54)

leaf.depth()                                 # 2
leaf.uncle() is right                        # True
left.sibling() is right                      # True
lowest_common_ancestor(leaf, right) is root  # True
```

- `insert_left` and `insert_right` add a new child and return it. An existing
  child on that side moves down to become the same-side child of the new node.
- `is_leaf()` and `is_root()` report whether a node has no children or no parent.
- `depth()` counts the edges between a node and the root.
- `sibling()` and `uncle()` return `None` when there is no such node.
- `rotate_left()` and `rotate_right()` rotate the subtree rooted at the node,
  update the parent's child link, and return the subtree's new root. They raise
  `ValueError` when there is no right (or left) child to rotate with.
- `lowest_common_ancestor(first, second)` returns the lowest node that is an
  ancestor of both, where a node counts as its own ancestor. It returns `None`
  if either argument is `None` or the two nodes are in different trees.

## Traversals

`arbor.traversal` provides generators that yield node values:

```python
from arbor.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(postorder(root))   # [54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54]
```

Each one yields nothing for `None`.

## Measures and shape checks

`arbor.measures` works on any node taken as the root of a tree:

| Function | Result |
| --- | --- |
| `height(tree)` | edges on the longest downward path; 0 for a single node or `None` |
| `size(tree)` | number of nodes |
| `leaves(tree)` | nodes with no children |
| `inner_nodes(tree)` | nodes with at least one child |
| `balance(tree)` | left subtree height minus right subtree height; 0 for `None` |
| `is_full(tree)` | every node has zero or two children |
| `is_perfect(tree)` | full, with all leaves on the same level |
| `is_complete(tree)` | every level full except the last, filled from the left |
| `is_bst(tree)` | a binary search tree with no duplicate values |
| `is_avl(tree)` | a BST where sibling subtree heights differ by at most 1 |
| `is_heap(tree)` | complete, and no child is greater than its parent |

All the `is_` checks return `False` for `None`.

## Binary search trees

```python
from arbor.bst import BinarySearchTree

bst = BinarySearchTree.from_values([98, 402, 12, 46, 128])
bst.search(46)      # the Node holding 46, or None
bst.insert(46)      # None: duplicates are not stored
bst.remove(98)      # True
bst.remove(7)       # False
list(bst)           # [12, 46, 128, 402]
len(bst), 46 in bst
```

`insert` returns the new node. Removing a value held by a node with two children
moves the in-order successor's value into that node. The tree's root node is
available as `bst.root`.

## AVL trees

`AVLTree` is a `BinarySearchTree` that rebalances itself with rotations after each
`insert` and `remove`.

```python
from arbor.avl import AVLTree

avl = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
avl.insert(8)
avl.remove(4)
avl.root.value
```

`from_sorted` builds a balanced tree directly and raises `ValueError` unless the
values are strictly ascending. `from_values` is inherited and inserts values one
at a time.

## Max heaps

```python
from arbor.heap import MaxHeap

heap = MaxHeap.from_values([79, 47, 68, 87, 84, 91])
heap.extract()   # 91
heap.drain()     # [87, 84, 79, 68, 47]
len(heap)        # 0
```

The heap is a linked complete binary tree rooted at `heap.root`. `insert` returns
the node that holds the new value once it has moved up into place. `extract`
raises `IndexError` on an empty heap. `drain` extracts every value, largest first.

## What it does not do

The package has no command-line interface, and it does not print or draw trees;
inspect them through the traversals, the measures or the node links.

## Tests

The test suite uses pytest and hypothesis, both listed in the `test` extra.