"""Measurements and shape properties of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from arbor.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the tree in pre-order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.append(node.right)
        stack.append(node.left)


def _levels(tree: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield each node with its distance in edges from ``tree``."""
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node is None:
            continue
        yield node, level
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))


def _postorder_nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node after both of its subtrees."""
    stack: list[tuple[Optional[Node], bool]] = [(tree, False)]
    while stack:
        node, ready = stack.pop()
        if node is None:
            continue
        if ready:
            yield node
        else:
            stack += [(node, True), (node.right, False), (node.left, False)]


def _node_heights(tree: Optional[Node]) -> dict[int, int]:
    """Map each node's id to its height counted in nodes (a leaf is 1)."""
    heights: dict[int, int] = {}
    for node in _postorder_nodes(tree):
        left = heights[id(node.left)] if node.left is not None else 0
        right = heights[id(node.right)] if node.right is not None else 0
        heights[id(node)] = 1 + max(left, right)
    return heights


def height(tree: Optional[Node]) -> int:
    """Number of edges on the longest path down from ``tree``; 0 for None."""
    return max((level for _, level in _levels(tree)), default=0)


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def inner_nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Height of the left subtree minus height of the right; 0 for None."""
    if tree is None:
        return 0
    heights = _node_heights(tree)
    left = heights[id(tree.left)] if tree.left is not None else 0
    right = heights[id(tree.right)] if tree.right is not None else 0
    return left - right


def is_full(tree: Optional[Node]) -> bool:
    """True if every node has either zero or two children; False for None."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """True if every inner node has two children and all leaves share a level.

    False for None.
    """
    if tree is None:
        return False
    leaf_level: Optional[int] = None
    for node, level in _levels(tree):
        if node.is_leaf():
            if leaf_level is None:
                leaf_level = level
            elif level != leaf_level:
                return False
        elif node.left is None or node.right is None:
            return False
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """True if every level is full except the last, filled from the left.

    False for None.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def _within_bounds(tree: Node) -> bool:
    """True if values strictly increase in-order (no duplicates)."""
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def is_bst(tree: Optional[Node]) -> bool:
    """True if the tree is a binary search tree without duplicates.

    False for None.
    """
    if tree is None:
        return False
    return _within_bounds(tree)


def is_avl(tree: Optional[Node]) -> bool:
    """True if the tree is a BST whose subtrees differ in height by at most 1.

    False for None.
    """
    if tree is None or not _within_bounds(tree):
        return False
    heights = _node_heights(tree)
    for node in _nodes(tree):
        left = heights[id(node.left)] if node.left is not None else 0
        right = heights[id(node.right)] if node.right is not None else 0
        if abs(left - right) > 1:
            return False
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """True if the tree is complete and no child exceeds its parent.

    False for None.
    """
    if tree is None or not is_complete(tree):
        return False
    return all(
        child.value <= node.value
        for node in _nodes(tree)
        for child in (node.left, node.right)
        if child is not None
    )