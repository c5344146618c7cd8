"""A binary search tree of integers with recursive and iterative traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _delete(node: Optional[_Node], value: int) -> tuple[Optional[_Node], bool]:
    """Remove one occurrence of ``value`` below ``node``.

    Returns the new subtree root and whether a node was removed.
    """
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if value > node.value:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    node.right, _ = _delete(node.right, successor.value)
    return node, True


def _preorder(node: Optional[_Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[_Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


class BinarySearchTree:
    """A binary search tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        self._size += 1
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; absent values are ignored.

        A node with two children takes the value of its in-order successor.
        """
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order (recursive walk)."""
        return list(_preorder(self._root))

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order (recursive walk)."""
        return list(_inorder(self._root))

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order (recursive walk)."""
        return list(_postorder(self._root))

    def iterative_preorder(self) -> list[int]:
        """Return the preorder sequence using an explicit stack."""
        if self._root is None:
            return []
        order: list[int] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            order.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def iterative_inorder(self) -> list[int]:
        """Return the inorder sequence using an explicit stack."""
        order: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            order.append(node.value)
            node = node.right
        return order

    def iterative_postorder(self) -> list[int]:
        """Return the postorder sequence using an explicit stack.

        Nodes are collected in node, right, left order and then reversed.
        """
        if self._root is None:
            return []
        collected: list[int] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            collected.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        collected.reverse()
        return collected

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in ascending order."""
        return _inorder(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False