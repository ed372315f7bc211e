import pytest

from bintree.tree import Node


def sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def chain(count):
    root = Node(0)
    node = root
    for value in range(1, count):
        node = node.insert_left(value)
    return root, node


def test_new_node_is_lone_root_and_leaf():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None and node.left is None and node.right is None
    assert node.is_root() and node.is_leaf()


def test_node_with_parent_is_not_attached():
    root = Node(1)
    child = Node(2, root)
    assert child.parent is root
    assert root.left is None and root.right is None
    assert not child.is_root()
    assert child.sibling() is None


def test_insert_left_into_empty_slot():
    root = Node(98)
    child = root.insert_left(12)
    assert root.left is child
    assert child.parent is root
    assert child.value == 12
    assert not root.is_leaf()


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_preorder():
    assert list(sample().preorder()) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_of_search_tree_is_sorted():
    values = list(sample().inorder())
    assert values == sorted(values)
    assert sorted(values) == sorted(sample().preorder())


def test_postorder():
    assert list(sample().postorder()) == [6, 56, 12, 256, 512, 402, 98]


def test_traversals_are_iterative_on_deep_trees():
    root, _ = chain(5000)
    assert len(list(root.preorder())) == 5000
    assert list(root.inorder()) == list(root.postorder())
    assert root.size() == 5000


def test_height_of_leaf_and_chain():
    assert Node(1).height() == 0
    root, bottom = chain(6)
    assert root.height() == bottom.depth()
    assert sample().height() == 2


def test_depth():
    root = sample()
    assert root.depth() == 0
    assert root.left.depth() == 1
    assert root.left.right.depth() == root.height()


def test_size_matches_traversal():
    root = sample()
    assert root.size() == len(list(root.preorder()))
    assert Node(3).size() == 1


def test_leaves_and_inner_nodes_partition_tree():
    root = sample()
    assert root.leaves() + root.nodes() == root.size()
    assert root.leaves() == len([v for v in (6, 56, 256, 512)])
    assert Node(3).nodes() == 0
    assert Node(3).leaves() == 1


def test_balance():
    root = sample()
    assert root.balance() == 0
    root.left.left.insert_left(1)
    assert root.balance() > 0
    assert root.right.right.balance() == 0


def test_balance_is_antisymmetric():
    left_heavy = Node(1)
    left_heavy.insert_left(2).insert_left(3)
    right_heavy = Node(1)
    right_heavy.insert_right(2).insert_right(3)
    assert left_heavy.balance() == -right_heavy.balance()
    assert left_heavy.balance() == left_heavy.height()


def test_is_full():
    root = sample()
    assert root.is_full()
    root.left.left.insert_left(1)
    assert not root.is_full()
    assert Node(1).is_full()


def test_is_perfect():
    root = sample()
    assert root.is_perfect()
    assert Node(1).is_perfect()
    root.left.left.insert_left(1)
    assert not root.is_perfect()


def test_full_but_not_perfect():
    root = Node(1)
    root.insert_left(2)
    right = root.insert_right(3)
    right.insert_left(4)
    right.insert_right(5)
    assert root.is_full()
    assert not root.is_perfect()


def test_sibling():
    root = sample()
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.sibling() is None
    lone = Node(1)
    only = lone.insert_left(2)
    assert only.sibling() is None


def test_uncle():
    root = sample()
    assert root.left.left.uncle() is root.right
    assert root.right.right.uncle() is root.left
    assert root.left.uncle() is None
    assert root.uncle() is None


@pytest.mark.parametrize("count", [1, 2, 5])
def test_chain_is_never_full_beyond_one_child(count):
    root, _ = chain(count)
    assert root.is_full() == (count == 1)
    assert root.leaves() == 1