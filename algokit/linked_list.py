"""Singly linked list with positional and value-based insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def remove_head(self) -> Optional[int]:
        """Remove the first node and return its value; an empty list is left alone."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        return node.value

    def remove_tail(self) -> Optional[int]:
        """Remove the last node and return its value; an empty list is left alone."""
        if self._head is None:
            return None
        if self._head.next is None:
            value = self._head.value
            self._head = None
            return value
        node = self._head
        while node.next.next is not None:
            node = node.next
        value = node.next.value
        node.next = None
        return value

    def remove_at(self, k: int) -> Optional[int]:
        """Remove the k-th node and return its value; positions past the end do nothing."""
        if self._head is None:
            return None
        if k == 1:
            return self.remove_head()
        previous: Optional[_Node] = None
        for position, node in enumerate(self._nodes(), start=1):
            if position == k:
                previous.next = node.next
                return node.value
            previous = node
        return None

    def remove_value(self, value: int) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        previous: Optional[_Node] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def insert_head(self, value: int) -> None:
        """Put ``value`` in front of the first node."""
        self._head = _Node(value, self._head)

    def insert_tail(self, value: int) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_at(self, k: int, value: int) -> None:
        """Insert ``value`` so that it becomes the k-th node.

        Valid positions run from 1 to one past the end; others raise IndexError.
        """
        if k < 1:
            raise IndexError(f"position {k} is out of bounds")
        if k == 1:
            self.insert_head(value)
            return
        previous = self._head
        count = 1
        while previous is not None and count < k - 1:
            previous = previous.next
            count += 1
        if previous is None:
            raise IndexError(f"position {k} is out of bounds")
        previous.next = _Node(value, previous.next)

    def insert_after(self, target: int, value: int) -> bool:
        """Insert ``value`` after the first ``target``; append it if there is none.

        Returns whether ``target`` was found.
        """
        for node in self._nodes():
            if node.value == target:
                node.next = _Node(value, node.next)
                return True
        self.insert_tail(value)
        return False