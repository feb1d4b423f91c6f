"""Self-balancing AVL search tree with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from dsakit.bst import (
    _format,
    _inorder,
    _next_int,
    _next_token,
    _postorder,
    _preorder,
    _tokens,
)


@dataclass(slots=True)
class AVLNode:
    """A node of an AVL tree; ``height`` counts a leaf as 1."""

    value: int
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: AVLNode) -> AVLNode:
    child = node.left
    node.left = child.right
    child.right = node
    _refresh(node)
    _refresh(child)
    return child


def _rotate_left(node: AVLNode) -> AVLNode:
    child = node.right
    node.right = child.left
    child.left = node
    _refresh(node)
    _refresh(child)
    return child


def _insert(node: AVLNode | None, value: int) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value > node.value:
        node.right = _insert(node.right, value)
    elif value < node.value:
        node.left = _insert(node.left, value)

    _refresh(node)
    balance = _height(node.left) - _height(node.right)

    if balance > 1 and value < node.left.value:
        return _rotate_right(node)
    if balance < -1 and value > node.right.value:
        return _rotate_left(node)
    if balance > 1 and value > node.left.value:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and value < node.right.value:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """An AVL tree of integers; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: AVLNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value``, rebalancing on the way back up."""
        self.root = _insert(self.root, value)

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def preorder(self) -> list[int]:
        """Values in node-left-right order."""
        return _preorder(self.root)

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return _inorder(self.root)

    def postorder(self) -> list[int]:
        """Values in left-right-node order."""
        return _postorder(self.root)


_MENU = (
    "\n\t1. Insert Value\n"
    "\t2. Preorder Recursive\n"
    "\t3. Inorder Recursive\n"
    "\t4. Postorder Recursive\n"
    "\t5. Non recursive Preorder\n"
    "\t6. Non recursive Inorder\n"
    "\t7. Non recursive Postorder\n"
    "\t-> "
)


def main(argv=None) -> int:
    """Run the interactive AVL tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive AVL tree.").parse_args(argv)
    tree = AVLTree()
    tokens = _tokens(sys.stdin)
    labels = {}
    for offset, prefix in ((2, ""), (5, "Non Recursive ")):
        labels[offset] = (f"{prefix}Preorder Traversal", tree.preorder)
        labels[offset + 1] = (f"{prefix}Inorder Traversal", tree.inorder)
        labels[offset + 2] = (f"{prefix}Postorder Traversal", tree.postorder)
    print("Welcome to AVL Tree Program :)")
    try:
        while True:
            print(_MENU, end="")
            choice = _next_int(tokens)
            if choice == 1:
                print("\tEnter value to insert: ", end="")
                value = _next_int(tokens)
                if value is not None:
                    tree.insert(value)
            elif choice in labels:
                label, traversal = labels[choice]
                print(f"\t{label}: {_format(traversal())}", end="")
            print("\n\tDo You want to continue?(Y/N): ", end="")
            if _next_token(tokens)[0] not in "Yy":
                break
    except EOFError:
        pass
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())