"""Binary search tree of unique values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree; inserting a value already present does nothing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._walk_in_order()

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"

    def insert(self, value: Any) -> None:
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove ``value``; a node with two children takes its in-order successor."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and value != node.value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def minimum(self) -> Any:
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def _walk_in_order(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def in_order(self) -> list[Any]:
        return list(self._walk_in_order())

    def pre_order(self) -> list[Any]:
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> list[Any]:
        reversed_result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reversed_result.reverse()
        return reversed_result