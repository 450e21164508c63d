"""Circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class CNode:
    """A node of a circular list; compared by identity."""

    data: int = 0
    next: Optional[CNode] = None

    def __repr__(self) -> str:
        return f"CNode({self.data!r})"


class CircularLinkedList:
    """A circular singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[CNode] = None
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[CNode]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def _tail(self) -> CNode:
        tail = self.head
        while tail.next is not self.head:
            tail = tail.next
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def _link_new(self, data: int) -> Optional[CNode]:
        """Append a node before the head; return it, or None if it became the head."""
        new_node = CNode(data)
        new_node.next = new_node
        if self.head is None:
            self.head = new_node
            return None
        self._tail().next = new_node
        new_node.next = self.head
        return new_node

    def insert_at_end(self, data: int) -> None:
        self._link_new(data)

    def insert_at_front(self, data: int) -> None:
        new_node = self._link_new(data)
        if new_node is not None:
            self.head = new_node

    def delete_first(self) -> None:
        if self.head is None:
            return
        if self.head.next is self.head:
            self.head = None
            return
        self._tail().next = self.head.next
        self.head = self.head.next

    def delete_last(self) -> None:
        if self.head is None:
            return
        if self.head.next is self.head:
            self.head = None
            return
        node = self.head
        while node.next.next is not self.head:
            node = node.next
        node.next = self.head