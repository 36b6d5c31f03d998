"""Bounded and unbounded FIFO queues built on different storage strategies."""

from __future__ import annotations

from itertools import chain, islice
from typing import Any, Iterator


class QueueFullError(Exception):
    """Raised when an item is added to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when an item is requested from a queue that holds nothing."""


class CircularQueue:
    """Fixed-capacity ring buffer that tracks its head and its size."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        ring = chain(self._slots[self._head:], self._slots[: self._head])
        return islice(ring, self._size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def enqueue(self, item: Any) -> None:
        """Add an item at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._head + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return item

    def front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[(self._head + self._size - 1) % self.capacity]


class ReservedSlotQueue:
    """Ring buffer of ``size`` slots that keeps one slot free to tell full from empty.

    It therefore holds at most ``size - 1`` items.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return len(self._slots) - 1

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        start = (self._front + 1) % len(self._slots)
        ring = chain(self._slots[start:], self._slots[:start])
        return islice(ring, len(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % len(self._slots) == self._front

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear = (self._rear + 1) % len(self._slots)
        self._slots[self._rear] = item

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front = (self._front + 1) % len(self._slots)
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item


class ShiftingQueue:
    """Bounded queue that keeps its items packed at the start of its storage."""

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

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove the front item, shifting the rest forward, and return it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.pop(0)

    def front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[-1]


class LinearQueue:
    """Array queue whose front and rear only move forward.

    Slots freed by dequeuing are never reused: once the rear has reached the
    last slot the queue refuses further items even if it has been drained.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = -1

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._rear - self._front + 1

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front : self._rear + 1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._front > self._rear

    def enqueue(self, item: Any) -> None:
        if self._rear == len(self._slots) - 1:
            raise QueueFullError("queue overflow")
        self._rear += 1
        self._slots[self._rear] = item

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue underflow")
        item = self._slots[self._front]
        self._front += 1
        return item


class StackQueue:
    """Unbounded queue kept in one stack, with a second stack used while enqueuing."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def __len__(self) -> int:
        return len(self._main)

    def enqueue(self, item: Any) -> None:
        """Place the item beneath everything already stored."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(item)
        while self._spare:
            self._main.append(self._spare.pop())

    def dequeue(self) -> Any:
        if not self._main:
            raise QueueEmptyError("queue is empty")
        return self._main.pop()