"""Circular singly linked list whose last node points back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class CircularList:
    """Circular list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Optional[_Node] = None
        for value in values:
            self.insert_tail(value)

    def _link_first(self, value: int) -> None:
        node = _Node(value)
        node.next = node
        self._tail = node

    def insert_head(self, value: int) -> None:
        """Put ``value`` before the current head."""
        if self._tail is None:
            self._link_first(value)
            return
        self._tail.next = _Node(value, self._tail.next)

    def insert_tail(self, value: int) -> None:
        """Put ``value`` after the last node."""
        if self._tail is None:
            self._link_first(value)
            return
        node = _Node(value, self._tail.next)
        self._tail.next = node
        self._tail = node

    def delete_head(self) -> Optional[int]:
        """Remove the head and return its value; an empty list is left alone."""
        if self._tail is None:
            return None
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        return head.value

    def delete_at(self, position: int) -> Optional[int]:
        """Remove the node at ``position`` and return its value.

        An empty list is left alone; a position outside the list raises IndexError.
        """
        if self._tail is None:
            return None
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.delete_head()
        head = self._tail.next
        previous = head
        count = 1
        while count < position - 1 and previous.next is not head:
            previous = previous.next
            count += 1
        if previous.next is head:
            raise IndexError(f"invalid position {position}")
        doomed = previous.next
        previous.next = doomed.next
        if doomed is self._tail:
            self._tail = previous
        return doomed.value

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.value
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        if self._tail is None:
            return "List is empty!"
        return "".join(f"{value} -> " for value in self) + "(head)"

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"