import pytest
from hypothesis import given
from hypothesis import strategies as st

from arbor.avl import AVLTree
from arbor.measures import is_avl, is_perfect, size
from arbor.traversal import preorder


def _links_consistent(node):
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.parent is not node:
            return False
    return _links_consistent(node.left) and _links_consistent(node.right)


def test_ascending_inserts_stay_balanced():
    tree = AVLTree.from_values(range(1, 8))
    assert is_avl(tree.root)
    assert is_perfect(tree.root)
    assert list(tree) == list(range(1, 8))
    assert tree.root.parent is None


def test_left_right_case_rotates():
    tree = AVLTree.from_values([30, 10, 20])
    assert tree.root.value == 20
    assert is_avl(tree.root)


def test_insert_returns_node_holding_value():
    tree = AVLTree.from_values([5, 3, 8])
    node = tree.insert(9)
    assert node.value == 9
    assert tree.search(9) is node


def test_insert_duplicate_returns_none():
    tree = AVLTree.from_values([5, 3, 8])
    assert tree.insert(3) is None
    assert len(tree) == 3


def test_remove_absent_returns_false():
    tree = AVLTree.from_values([5, 3, 8])
    assert not tree.remove(4)
    assert list(tree) == [3, 5, 8]


def test_remove_rebalances():
    tree = AVLTree.from_values([20, 10, 30, 5, 15, 40, 3])
    assert tree.remove(30)
    assert tree.remove(40)
    assert is_avl(tree.root)
    assert list(tree) == [3, 5, 10, 15, 20]
    assert _links_consistent(tree.root)


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=80))
def test_random_inserts_are_avl(values):
    tree = AVLTree.from_values(values)
    assert is_avl(tree.root)
    assert list(tree) == sorted(set(values))
    assert _links_consistent(tree.root)


@given(st.lists(st.integers(-200, 200), max_size=60), st.data())
def test_random_removals_stay_avl(values, data):
    tree = AVLTree.from_values(values)
    doomed = data.draw(st.lists(st.sampled_from(values), max_size=30) if values else st.just([]))
    for value in doomed:
        tree.remove(value)
    remaining = sorted(set(values) - set(doomed))
    assert list(tree) == remaining
    assert tree.root is None or is_avl(tree.root)
    assert _links_consistent(tree.root)


def test_from_sorted_shape():
    tree = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
    assert list(preorder(tree.root)) == [4, 2, 1, 3, 6, 5, 7]
    assert is_avl(tree.root)


def test_from_sorted_empty():
    tree = AVLTree.from_sorted([])
    assert tree.root is None
    assert len(tree) == 0


def test_from_sorted_rejects_unsorted():
    with pytest.raises(ValueError):
        AVLTree.from_sorted([3, 1, 2])


def test_from_sorted_rejects_duplicates():
    with pytest.raises(ValueError):
        AVLTree.from_sorted([1, 2, 2, 3])


@given(st.sets(st.integers(-1000, 1000), min_size=1, max_size=100))
def test_from_sorted_is_avl(values):
    ordered = sorted(values)
    tree = AVLTree.from_sorted(ordered)
    assert list(tree) == ordered
    assert size(tree.root) == len(ordered)
    assert is_avl(tree.root)
    assert _links_consistent(tree.root)


def test_from_sorted_tree_accepts_inserts():
    tree = AVLTree.from_sorted([10, 20, 30])
    tree.insert(40)
    tree.insert(50)
    assert list(tree) == [10, 20, 30, 40, 50]
    assert is_avl(tree.root)