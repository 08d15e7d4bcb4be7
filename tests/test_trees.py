import random

import pytest

from dsakit.trees import BinarySearchTree, BinaryTree, NodeExistsError, TreeNode


@pytest.fixture
def sample_bst():
    tree = BinarySearchTree()
    for value in (30, 20, 40, 10, 25):
        tree.insert(value)
    return tree


@pytest.fixture
def sample_tree():
    tree = BinaryTree()
    root = tree.create_root(10)
    left = tree.add_left(root, 5)
    right = tree.add_right(root, 15)
    tree.add_left(left, 2)
    tree.add_right(left, 7)
    tree.add_left(right, 12)
    tree.add_right(right, 20)
    return tree


def test_bst_inorder_is_sorted(sample_bst):
    assert sample_bst.inorder() == sorted([30, 20, 40, 10, 25])


def test_bst_reverse_inorder_is_descending(sample_bst):
    assert sample_bst.reverse_inorder() == sorted([30, 20, 40, 10, 25], reverse=True)


def test_bst_preorder(sample_bst):
    assert sample_bst.preorder() == [30, 20, 10, 25, 40]


def test_bst_size(sample_bst):
    assert len(sample_bst) == 5


def test_bst_duplicate_goes_left(sample_bst):
    node = sample_bst.insert(20)
    assert len(sample_bst) == 6
    assert sample_bst.inorder() == sorted([30, 20, 40, 10, 25, 20])
    assert node.parent.data == 10
    assert node.parent.right is node


def test_bst_parent_links(sample_bst):
    root = sample_bst.root
    assert root.data == 30
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.parent is root


def test_bst_empty():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.root is None
    assert len(tree) == 0


def test_bst_random_invariant():
    rng = random.Random(7)
    values = [rng.randrange(100) for _ in range(200)]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)
    assert tree.reverse_inorder() == sorted(values, reverse=True)
    assert sorted(tree.preorder()) == sorted(values)
    assert list(tree) == sorted(values)


def test_bst_deep_tree_does_not_overflow():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert tree.inorder() == values
    assert tree.preorder() == values


def test_binary_tree_inorder(sample_tree):
    assert sample_tree.inorder() == [2, 5, 7, 10, 12, 15, 20]


def test_binary_tree_preorder(sample_tree):
    assert sample_tree.preorder() == [10, 5, 2, 7, 15, 12, 20]


def test_binary_tree_postorder(sample_tree):
    assert sample_tree.postorder() == [2, 7, 5, 12, 20, 15, 10]


def test_binary_tree_root_exists_error(sample_tree):
    with pytest.raises(NodeExistsError, match="Root already exists"):
        sample_tree.create_root(1)
    assert sample_tree.root.data == 10


def test_binary_tree_child_exists_errors(sample_tree):
    root = sample_tree.root
    with pytest.raises(NodeExistsError, match="Left child already exists"):
        sample_tree.add_left(root, 1)
    with pytest.raises(NodeExistsError, match="Right child already exists"):
        sample_tree.add_right(root, 1)
    assert root.left.data == 5
    assert root.right.data == 15


def test_binary_tree_children_know_parent(sample_tree):
    root = sample_tree.root
    assert root.left.parent is root
    assert root.left.left.parent is root.left


def test_binary_tree_str(sample_tree):
    lines = str(sample_tree).splitlines()
    assert lines[0] == "Inorder: " + " ".join(str(v) for v in sample_tree.inorder())
    assert lines[1].startswith("Preorder:")
    assert lines[2].startswith("Postorder:")


def test_empty_binary_tree_traversals():
    tree = BinaryTree()
    assert tree.inorder() == []
    assert tree.postorder() == []


def test_tree_node_defaults():
    node = TreeNode(3)
    assert (node.left, node.right, node.parent) == (None, None, None)
    assert node.data == 3