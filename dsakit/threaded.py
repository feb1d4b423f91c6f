"""Threaded binary search tree whose empty links point to in-order neighbours."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

from dsakit.bst import _format, _next_int, _postorder, _tokens


@dataclass(eq=False, slots=True)
class ThreadedNode:
    """A node whose ``left``/``right`` are threads when the flag is set."""

    value: int
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    left_thread: bool = True
    right_thread: bool = True


def _children(node: ThreadedNode) -> tuple[ThreadedNode | None, ThreadedNode | None]:
    return (
        None if node.left_thread else node.left,
        None if node.right_thread else node.right,
    )


def _successor(node: ThreadedNode) -> ThreadedNode | None:
    if node.right_thread:
        return node.right
    node = node.right
    while not node.left_thread:
        node = node.left
    return node


class ThreadedBinaryTree:
    """A search tree of integers; equal values go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: ThreadedNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` as a new leaf, keeping the threads correct."""
        node = ThreadedNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left_thread:
                    node.left, node.right = current.left, current
                    current.left, current.left_thread = node, False
                    return
                current = current.left
            else:
                if current.right_thread:
                    node.right, node.left = current.right, current
                    current.right, current.right_thread = node, False
                    return
                current = current.right

    def inorder(self) -> list[int]:
        """Values in ascending order, following the threads."""
        if self.root is None:
            return []
        node: ThreadedNode | None = self.root
        while not node.left_thread:
            node = node.left
        result: list[int] = []
        while node is not None:
            result.append(node.value)
            node = _successor(node)
        return result

    def preorder(self) -> list[int]:
        """Values in node-left-right order, following the threads."""
        result: list[int] = []
        node = self.root
        while node is not None:
            result.append(node.value)
            if not node.left_thread:
                node = node.left
            elif not node.right_thread:
                node = node.right
            else:
                while node is not None and node.right_thread:
                    node = node.right
                if node is not None:
                    node = node.right
        return result

    def postorder(self) -> list[int]:
        """Values in left-right-node order."""
        return _postorder(self.root, _children)


_MENU = (
    "\n1. Insert into threaded tree"
    "\n2. Print Inorder Traversal"
    "\n3. Print Preorder Traversal"
    "\n4. Print Postorder Traversal"
    "\n5. Print Non-Recursive Inorder Traversal"
    "\n6. Print Non-Recursive Preorder Traversal"
    "\n7. Print Non-Recursive Postorder Traversal"
    "\n8. Exit"
    "\nEnter your choice: "
)


def main(argv=None) -> int:
    """Run the interactive threaded tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive threaded binary tree.").parse_args(argv)
    tree = ThreadedBinaryTree()
    tokens = _tokens(sys.stdin)
    traversals = {}
    for offset, prefix in ((2, ""), (5, "Non-Recursive ")):
        traversals[offset] = (f"{prefix}Inorder Traversal", tree.inorder)
        traversals[offset + 1] = (f"{prefix}Preorder Traversal", tree.preorder)
        traversals[offset + 2] = (f"{prefix}Postorder Traversal", tree.postorder)
    try:
        while True:
            print(_MENU, end="")
            choice = _next_int(tokens)
            if choice == 1:
                print("Enter value to insert: ", end="")
                value = _next_int(tokens)
                if value is not None:
                    tree.insert(value)
            elif choice in traversals:
                label, traversal = traversals[choice]
                values = traversal()
                print(f"{label}: {_format(values) if values else 'Tree is empty'}")
            elif choice == 8:
                print("Exiting...")
                break
            else:
                print("Invalid choice!", end="")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())