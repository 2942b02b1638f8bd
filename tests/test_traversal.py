from hypothesis import given
from hypothesis import strategies as st

from arbor.node import Node
from arbor.traversal import inorder, levelorder, postorder, preorder


def _sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def _search_tree(values):
    root = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    break
                node = node.right
            else:
                break
    return root


def test_preorder_sample():
    assert list(preorder(_sample())) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_sample():
    assert list(inorder(_sample())) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder_sample():
    assert list(postorder(_sample())) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder_sample():
    assert list(levelorder(_sample())) == [98, 12, 402, 6, 56, 256, 512]


def test_empty_tree_yields_nothing():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []
    assert list(levelorder(None)) == []


def test_single_node():
    node = Node(5)
    assert list(preorder(node)) == [5]
    assert list(postorder(node)) == [5]
    assert list(levelorder(node)) == [5]


def test_deep_chain_does_not_recurse():
    root = Node(0)
    node = root
    for value in range(1, 5000):
        node = node.insert_right(value)
    assert list(inorder(root)) == list(range(5000))
    assert list(postorder(root)) == list(range(4999, -1, -1))


@given(st.lists(st.integers(), min_size=1))
def test_inorder_of_search_tree_is_sorted(values):
    root = _search_tree(values)
    assert list(inorder(root)) == sorted(set(values))


@given(st.lists(st.integers(), min_size=1))
def test_all_orders_visit_every_node_once(values):
    root = _search_tree(values)
    expected = sorted(set(values))
    for walk in (preorder, inorder, postorder, levelorder):
        assert sorted(walk(root)) == expected


@given(st.lists(st.integers(), min_size=1))
def test_root_position(values):
    root = _search_tree(values)
    assert next(preorder(root)) == root.value
    assert next(levelorder(root)) == root.value
    assert list(postorder(root))[-1] == root.value


@given(st.lists(st.integers(), min_size=1))
def test_levelorder_depths_never_decrease(values):
    root = _search_tree(values)
    nodes = {}
    stack = [root]
    while stack:
        node = stack.pop()
        nodes[node.value] = node
        stack.extend(c for c in (node.left, node.right) if c is not None)
    depths = [nodes[value].depth() for value in levelorder(root)]
    assert depths == sorted(depths)