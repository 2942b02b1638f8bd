"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def _ancestors(self) -> Iterator[Node]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        return sum(1 for _ in self._ancestors())

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _replace_in_parent(self, other: Node) -> None:
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = other
        elif parent.right is self:
            parent.right = other

    def rotate_left(self) -> Node:
        """Rotate the subtree rooted here to the left and return its new root.

        Raises ValueError if the node has no right child.
        """
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left: node has no right child")
        self.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = self
        pivot.left = self
        pivot.parent = self.parent
        self._replace_in_parent(pivot)
        self.parent = pivot
        return pivot

    def rotate_right(self) -> Node:
        """Rotate the subtree rooted here to the right and return its new root.

        Raises ValueError if the node has no left child.
        """
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right: node has no left child")
        self.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = self
        pivot.right = self
        pivot.parent = self.parent
        self._replace_in_parent(pivot)
        self.parent = pivot
        return pivot


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the lowest node that is an ancestor of both (or either itself).

    Returns None if either node is None or they share no ancestor.
    """
    if first is None or second is None:
        return None
    lineage = {id(first)}
    lineage.update(id(node) for node in first._ancestors())
    node: Optional[Node] = second
    while node is not None:
        if id(node) in lineage:
            return node
        node = node.parent
    return None