"""Doubly linked list with head, tail and positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(
        self,
        value: int,
        next: Optional[_Node] = None,
        prev: Optional[_Node] = None,
    ) -> None:
        self.value = value
        self.next = next
        self.prev = prev


class DoublyLinkedList:
    """Doubly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        for value in values:
            node = _Node(value, prev=self._tail)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, k: int) -> Optional[_Node]:
        if k < 1:
            return None
        for position, node in enumerate(self._nodes(), start=1):
            if position == k:
                return node
        return None

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _unlink(self, node: _Node) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        return node.value

    def delete_head(self) -> Optional[int]:
        """Remove the first node and return its value; an empty list is left alone."""
        if self._head is None:
            return None
        return self._unlink(self._head)

    def delete_tail(self) -> Optional[int]:
        """Remove the last node and return its value; an empty list is left alone."""
        if self._tail is None:
            return None
        return self._unlink(self._tail)

    def delete_at(self, k: int) -> Optional[int]:
        """Remove the k-th node and return its value.

        An empty list is left alone; a position outside the list raises IndexError.
        """
        if self._head is None:
            return None
        node = self._node_at(k)
        if node is None:
            raise IndexError(f"position {k} is out of bounds")
        return self._unlink(node)

    def insert_before_head(self, value: int) -> None:
        """Put ``value`` in front of the first node."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def _insert_before_node(self, node: _Node, value: int) -> None:
        if node.prev is None:
            self.insert_before_head(value)
            return
        new = _Node(value, next=node, prev=node.prev)
        node.prev.next = new
        node.prev = new

    def insert_before_tail(self, value: int) -> None:
        """Put ``value`` just before the last node (at the front of an empty list)."""
        if self._tail is None:
            self.insert_before_head(value)
            return
        self._insert_before_node(self._tail, value)

    def insert_before(self, k: int, value: int) -> None:
        """Put ``value`` before the k-th node; positions outside the list raise IndexError."""
        if k == 1:
            self.insert_before_head(value)
            return
        node = self._node_at(k)
        if node is None:
            raise IndexError(f"position {k} is out of bounds")
        self._insert_before_node(node, value)

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        node = self._head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self._head, self._tail = self._tail, self._head