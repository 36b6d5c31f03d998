"""Singly linked list with positional and key-based insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Student:
    """A record keyed by roll number."""

    roll: int
    age: int
    name: str


@dataclass
class Node:
    value: Any
    next: Optional["Node"] = None


class SinglyLinkedList:
    """Singly linked list; positions are 1-based and ``key`` picks the matching field."""

    def __init__(
        self,
        items: Iterable[Any] = (),
        key: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        self._key = key
        tail: Optional[Node] = None
        for value in items:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _key_of(self, value: Any) -> Any:
        return value if self._key is None else self._key(value)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} not in list")

    def _find_node(self, key: Any) -> Node:
        for node in self._nodes():
            if self._key_of(node.value) == key:
                return node
        raise KeyError(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_start(self, value: Any) -> None:
        self._head = Node(value, self._head)
        self._size += 1

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert after the first item whose key equals ``key``."""
        node = self._find_node(key)
        node.next = Node(value, node.next)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert so that the value occupies ``position``; valid positions are 1..len."""
        if position == 1:
            self.insert_start(value)
            return
        if not 1 < position <= self._size:
            raise IndexError(f"position {position} not in list")
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def insert_end(self, value: Any) -> None:
        node = Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size).next = node
        self._size += 1

    def delete_start(self) -> Any:
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_at(self, position: int) -> Any:
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} not in list")
        if position == 1:
            return self.delete_start()
        previous = self._node_at(position - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def delete_where(self, key: Any) -> Any:
        """Remove and return the first item whose key equals ``key``."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if self._key_of(node.value) == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return node.value
            previous = node
        raise KeyError(key)

    def delete_end(self) -> Any:
        if self._head is None:
            raise IndexError("delete from empty list")
        if self._size == 1:
            return self.delete_start()
        previous = self._node_at(self._size - 1)
        node = previous.next
        previous.next = None
        self._size -= 1
        return node.value

    def find(self, key: Any) -> Any:
        return self._find_node(key).value

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Optional[Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous