"""Binary search tree without duplicate values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from arbor.measures import size
from arbor.node import Node
from arbor.traversal import inorder


class BinarySearchTree:
    """A binary search tree of integers; duplicate values are ignored."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value`` and return its new node, or None if already present."""
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
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None if there is none."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def _unlink(self, node: Node) -> Optional[Node]:
        """Remove ``node``'s value from the tree.

        A node with two children takes the value of its in-order successor,
        which is then unlinked instead. Returns the parent of the node that
        was physically removed.
        """
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
        return parent

    def remove(self, value: int) -> bool:
        """Remove ``value``; return True if it was present."""
        node = self.search(value)
        if node is None:
            return False
        self._unlink(node)
        return True

    @classmethod
    def from_values(cls, values: Iterable[int]):
        """Build a tree by inserting ``values`` in order."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree