"""Max binary heap stored as a linked complete binary tree."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from arbor.node import Node


class MaxHeap:
    """A max binary heap of integers; the largest value sits at the root."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _node_at(self, path: str) -> Node:
        """Follow a path of '0' (left) and '1' (right) steps from the root."""
        node = self.root
        for step in path:
            node = node.right if step == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node that holds it afterwards."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        path = bin(self._size + 1)[3:]
        parent = self._node_at(path[:-1])
        node = Node(value, parent)
        if path[-1] == "1":
            parent.right = node
        else:
            parent.left = node
        self._size += 1
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        if self._size == 1:
            self.root = None
            self._size = 0
            return top
        last = self._node_at(bin(self._size)[3:])
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self._size -= 1
        self.root.value = last.value
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            if node.right is None or node.left.value > node.right.value:
                child = node.left
            else:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    @classmethod
    def from_values(cls, values: Iterable[int]) -> MaxHeap:
        """Build a heap by inserting ``values`` in order."""
        heap = cls()
        for value in values:
            heap.insert(value)
        return heap

    def drain(self) -> list[int]:
        """Extract every value, largest first, leaving the heap empty."""
        return [self.extract() for _ in range(self._size)]