"""Self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from arbor.bst import BinarySearchTree
from arbor.measures import balance
from arbor.node import Node


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced after every change."""

    def _rebalance_from(self, node: Optional[Node]) -> None:
        while node is not None:
            factor = balance(node)
            if factor > 1:
                if balance(node.left) < 0:
                    node.left.rotate_left()
                node = node.rotate_right()
            elif factor < -1:
                if balance(node.right) > 0:
                    node.right.rotate_right()
                node = node.rotate_left()
            if node.parent is None:
                self.root = node
            node = node.parent

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value`` and rebalance; None if it was already present."""
        new = super().insert(value)
        if new is not None:
            self._rebalance_from(new.parent)
        return new

    def remove(self, value: int) -> bool:
        """Remove ``value`` and rebalance; return True if it was present."""
        node = self.search(value)
        if node is None:
            return False
        self._rebalance_from(self._unlink(node))
        return True

    @classmethod
    def from_sorted(cls, values: Iterable[int]) -> AVLTree:
        """Build a balanced tree from strictly ascending values.

        Raises ValueError if the values are not strictly ascending.
        """
        items = list(values)
        if any(a >= b for a, b in zip(items, items[1:])):
            raise ValueError("values must be strictly ascending")
        tree = cls()
        if not items:
            return tree
        middle = (len(items) - 1) // 2
        tree.root = Node(items[middle])

        def build(parent: Node, lo: int, hi: int) -> None:
            if hi - lo <= 1:
                return
            mid = (hi - lo) // 2 + lo
            child = Node(items[mid], parent)
            if child.value > parent.value:
                parent.right = child
            else:
                parent.left = child
            build(child, lo, mid)
            build(child, mid, hi)

        build(tree.root, -1, middle)
        build(tree.root, middle, len(items))
        return tree