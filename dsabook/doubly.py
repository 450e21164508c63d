"""Doubly linked list nodes and a list built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list; compared by identity."""

    data: int = 0
    next: Optional[DNode] = None
    prev: Optional[DNode] = None


class DoublyLinkedList:
    """A doubly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[DNode] = None
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[DNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> Optional[DNode]:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail()
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def insert_at_start(self, data: int) -> None:
        new_node = DNode(data, self.head, None)
        if self.head is not None:
            self.head.prev = new_node
        self.head = new_node

    def insert_at_end(self, data: int) -> None:
        tail = self._tail()
        new_node = DNode(data, None, tail)
        if tail is None:
            self.head = new_node
        else:
            tail.next = new_node

    def insert_at(self, data: int, position: int) -> None:
        """Insert at ``position``; a position past the end leaves the list unchanged."""
        if position == 0:
            self.insert_at_start(data)
            return
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            return
        new_node = DNode(data, node.next, node)
        if node.next is not None:
            node.next.prev = new_node
        node.next = new_node

    def delete_at_start(self) -> None:
        if self.head is None:
            return
        self.head = self.head.next
        if self.head is not None:
            self.head.prev = None

    def delete_at_end(self) -> None:
        tail = self._tail()
        if tail is None:
            return
        if tail.prev is not None:
            tail.prev.next = None
        else:
            self.head = None

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``; out-of-range positions are ignored."""
        if position == 0:
            self.delete_at_start()
            return
        node = self.head
        for _ in range(position):
            if node is None:
                break
            node = node.next
        if node is None:
            return
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev