"""A fixed-capacity LIFO stack."""

from __future__ import annotations

from typing import Any, Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """Bounded stack; iteration runs from the bottom to the top."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items[-1]