import io
import sys

import pytest

from dsakit.avl import AVLNode, AVLTree, main


def _checked_height(node):
    if node is None:
        return 0
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    if node.left is not None:
        assert node.left.value < node.value
    if node.right is not None:
        assert node.right.value > node.value
    return node.height


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []


def test_single_rotation_on_ascending_insert():
    tree = AVLTree([1, 2, 3])
    assert tree.preorder() == [2, 1, 3]
    assert tree.height() == 2


@pytest.mark.parametrize(
    "values",
    [
        list(range(100)),
        list(range(100, 0, -1)),
        [50, 20, 80, 10, 30, 25, 27, 26, 90, 85, 87],
        [3, 1, 2],
        [1, 3, 2],
    ],
)
def test_tree_stays_balanced(values):
    tree = AVLTree(values)
    assert _checked_height(tree.root) == tree.height()
    assert tree.inorder() == sorted(set(values))


def test_duplicates_are_ignored():
    tree = AVLTree([5, 5, 3, 3, 8])
    assert tree.inorder() == [3, 5, 8]


def test_traversal_orders_agree():
    values = [40, 10, 60, 5, 20, 50, 70, 15]
    tree = AVLTree(values)
    pre, post = tree.preorder(), tree.postorder()
    assert pre[0] == tree.root.value
    assert post[-1] == tree.root.value
    assert sorted(pre) == sorted(post) == sorted(values)


def test_node_defaults():
    node = AVLNode(7)
    assert (node.value, node.height, node.left, node.right) == (7, 1, None, None)


def test_main_inserts_and_prints(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 5 y 1 3 y 3 n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Welcome to AVL Tree Program :)" in out
    assert "Inorder Traversal: 3 5" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 9 y 2"))
    assert main([]) == 0
    assert "Preorder Traversal: 9" in capsys.readouterr().out