"""Stacks and queues backed by fixed arrays or linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


class Overflow(Exception):
    """Raised when adding to a container that has no room left."""


class Underflow(IndexError):
    """Raised when reading or removing from an empty container."""


class ArrayStack:
    """Stack stored in a fixed-capacity list."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[int] = []
        self.capacity = capacity

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise Overflow(f"stack is full at {self.capacity} items")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise Underflow("pop from an empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise Underflow("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class BoundedQueue:
    """Linear array queue: freed slots are reused only once it empties completely."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise Overflow(f"queue is full, cannot enqueue {value}")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self.is_empty():
            raise Underflow("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front > self._rear:
            self._front = self._rear = -1
        return value

    def front(self) -> int:
        """Return the front value without removing it."""
        if self.is_empty():
            raise Underflow("front of an empty queue")
        return self._slots[self._front]

    def is_full(self) -> bool:
        return self._rear == self.capacity - 1

    def is_empty(self) -> bool:
        return self._front == -1

    def __iter__(self) -> Iterator[int]:
        if self.is_empty():
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self.is_empty() else self._rear - self._front + 1


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedStack:
    """Unbounded stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise Underflow("pop from an empty stack")
        node = self._top
        self._top = node.next
        return node.value

    def peek(self) -> int:
        if self._top is None:
            raise Underflow("peek at an empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None


class LinkedQueue:
    """Unbounded queue of linked nodes with front and rear pointers."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._front is None:
            raise Underflow("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.value

    def peek(self) -> int:
        if self._front is None:
            raise Underflow("peek at an empty queue")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None