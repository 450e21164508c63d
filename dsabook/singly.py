"""Singly linked list nodes and a list built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list; compared by identity."""

    data: int = 0
    next: Optional[Node] = None


def _walk(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a chain of nodes holding ``values``; None when there are none."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_values(head: Optional[Node]) -> list[int]:
    """Return the data of every node from ``head`` to the end."""
    return [node.data for node in _walk(head)]


def node_count(head: Optional[Node]) -> int:
    """Return the number of nodes from ``head`` to the end."""
    return sum(1 for _ in _walk(head))


def find(head: Optional[Node], data: int) -> Optional[Node]:
    """Return the first node holding ``data``, or None."""
    return next((node for node in _walk(head) if node.data == data), None)


class SinglyLinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = from_values(values)

    def __len__(self) -> int:
        return node_count(self.head)

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _walk(self.head))

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def search(self, data: int) -> Optional[Node]:
        """Return the first node holding ``data``, or None."""
        return find(self.head, data)

    def insert_at_start(self, data: int) -> None:
        self.head = Node(data, self.head)

    def insert_at_end(self, data: int) -> None:
        new_node = Node(data)
        if self.head is None:
            self.head = new_node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
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
        node.next = Node(data, node.next)

    def delete_at_start(self) -> None:
        if self.head is not None:
            self.head = self.head.next

    def delete_at_end(self) -> None:
        if self.head is None:
            return
        if self.head.next is None:
            self.head = None
            return
        node = self.head
        while node.next.next is not None:
            node = node.next
        node.next = None

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``; out-of-range positions are ignored."""
        if position == 0:
            self.delete_at_start()
            return
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None or node.next is None:
            return
        node.next = node.next.next