"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from enum import Enum
from typing import Optional

from arbor.node import Node


class _Order(Enum):
    PRE = "pre"
    IN = "in"
    POST = "post"


def _walk(tree: Optional[Node], order: _Order) -> Iterator[int]:
    stack: list[tuple[Optional[Node], bool]] = [(tree, False)]
    while stack:
        node, ready = stack.pop()
        if node is None:
            continue
        if ready:
            yield node.value
            continue
        # Pushed in reverse of the order in which they are visited.
        if order is _Order.PRE:
            stack += [(node.right, False), (node.left, False), (node, True)]
        elif order is _Order.IN:
            stack += [(node.right, False), (node, True), (node.left, False)]
        else:
            stack += [(node, True), (node.right, False), (node.left, False)]


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    return _walk(tree, _Order.PRE)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    return _walk(tree, _Order.IN)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    return _walk(tree, _Order.POST)


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)