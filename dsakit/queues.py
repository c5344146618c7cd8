"""First-in, first-out queues backed by linked nodes or a fixed array."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class QueueOverflow(Exception):
    """Raised when enqueuing into a full queue."""


class QueueUnderflow(Exception):
    """Raised when dequeuing from an empty queue."""


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedQueue(Generic[T]):
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._head is None:
            raise QueueUnderflow("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class ArrayQueue(Generic[T]):
    """A linear queue over ``capacity`` slots.

    Slots are never reused: once ``capacity`` values have been enqueued the
    queue is full, even if some of them have since been dequeued.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back; raise QueueOverflow when no slot is left."""
        if len(self._slots) >= self.capacity:
            raise QueueOverflow("no free slot at the rear of the queue")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueUnderflow("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._slots[self._front:])