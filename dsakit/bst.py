"""Unbalanced binary search tree with an interactive menu.

Besides the tree itself this module holds the traversal and input-reading
helpers that the other tree and menu modules of the package share.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class BSTNode:
    """A node of a binary search tree."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None


def _links(node: Any) -> tuple[Any, Any]:
    return node.left, node.right


def _preorder(root: Any, links: Callable[[Any], tuple[Any, Any]] = _links) -> list[int]:
    """Node-left-right values of the tree below ``root``."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        left, right = links(node)
        stack.extend(child for child in (right, left) if child is not None)
    return result


def _postorder(root: Any, links: Callable[[Any], tuple[Any, Any]] = _links) -> list[int]:
    """Left-right-node values of the tree below ``root``."""
    pending = [root] if root is not None else []
    collected: list[int] = []
    while pending:
        node = pending.pop()
        collected.append(node.value)
        pending.extend(child for child in links(node) if child is not None)
    return collected[::-1]


def _inorder(root: Any) -> list[int]:
    """Left-node-right values of the tree below ``root``."""
    result: list[int] = []
    stack: list[Any] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.value)
        current = current.right
    return result


def _tokens(stream) -> Iterator[str]:
    """Whitespace-separated tokens of a text stream."""
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    """The next token; raises EOFError when the input is exhausted."""
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _next_int(tokens: Iterator[str]) -> int | None:
    """The next token as an integer, or None when it is not one."""
    try:
        return int(_next_token(tokens))
    except ValueError:
        return None


def _format(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


class BinarySearchTree:
    """A binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: BSTNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` as a new leaf."""
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return whether one was found."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            elif node.left is not None and node.right is not None:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.value = successor.value
                value = successor.value
                parent, node = node, node.right
            else:
                child = node.left if node.left is not None else node.right
                if parent is None:
                    self.root = child
                elif parent.left is node:
                    parent.left = child
                else:
                    parent.right = child
                return True
        return False

    def contains(self, value: int) -> bool:
        """Whether ``value`` is stored in the tree."""
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    __contains__ = contains

    def _extreme(self, attribute: str) -> int:
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while getattr(node, attribute) is not None:
            node = getattr(node, attribute)
        return node.value

    def minimum(self) -> int:
        """Smallest value; raises ValueError on an empty tree."""
        return self._extreme("left")

    def maximum(self) -> int:
        """Largest value; raises ValueError on an empty tree."""
        return self._extreme("right")

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return _inorder(self.root)

    def preorder(self) -> list[int]:
        """Values in node-left-right order."""
        return _preorder(self.root)

    def postorder(self) -> list[int]:
        """Values in left-right-node order."""
        return _postorder(self.root)

    def level_order(self) -> list[int]:
        """Values breadth first, left to right."""
        result: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in _links(node) if child is not None)
        return result


def _display(tree: BinarySearchTree, tokens: Iterator[str]) -> None:
    print("1. In-order 2. Pre-order 3. Post-order 4. Level-order ", end="")
    order = _next_int(tokens)
    if order == 4:
        print(f"Level Order: {_format(tree.level_order())}", end="")
        return
    print("1. Recursive 2. Iterative ", end="")
    style = "Recursive" if _next_int(tokens) == 1 else "Iterative"
    traversals = {
        1: ("In-order", tree.inorder),
        2: ("Pre-order", tree.preorder),
        3: ("Post-order", tree.postorder),
    }
    if order not in traversals:
        print("Invalid choice ", end="")
        return
    label, traversal = traversals[order]
    print(f"{style} {label}: {_format(traversal())}", end="")


def _insert_and_show(tree: BinarySearchTree, tokens: Iterator[str]) -> None:
    print("Enter value to insert: ", end="")
    value = _next_int(tokens)
    if value is not None:
        tree.insert(value)
    print(f"Tree after insertion: {_format(tree.inorder())}")


def _delete_and_show(tree: BinarySearchTree, tokens: Iterator[str]) -> None:
    print("Enter value to delete: ", end="")
    value = _next_int(tokens)
    if value is not None:
        tree.delete(value)
    print(f"Tree after deletion: {_format(tree.inorder())}")


def _create(tree: BinarySearchTree, tokens: Iterator[str]) -> None:
    print("Enter number of nodes: ", end="")
    for _ in range(_next_int(tokens) or 0):
        print("Enter value: ", end="")
        value = _next_int(tokens)
        if value is not None:
            tree.insert(value)


def _search(tree: BinarySearchTree, tokens: Iterator[str]) -> None:
    print("Enter value to search: ", end="")
    value = _next_int(tokens)
    print("1. Recursive 2. Iterative ", end="")
    _next_int(tokens)
    found = value is not None and tree.contains(value)
    print(f"{value} {'found' if found else 'not found'}.")


def main(argv=None) -> int:
    """Run the interactive binary search tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive binary search tree.").parse_args(argv)
    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    actions = {1: _create, 2: _display, 3: _search, 4: _insert_and_show, 5: _delete_and_show}
    try:
        while True:
            print(
                "\n1. Create Tree\n2. Display Tree\n3. Search"
                "\n4. Insert\n5. Delete\n6. Exit",
                end="",
            )
            choice = _next_int(tokens)
            if choice == 6:
                break
            action = actions.get(choice)
            if action is None:
                print("Invalid choice ", end="")
            else:
                action(tree, tokens)
    except EOFError:
        pass
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())