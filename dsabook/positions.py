"""Locating nodes of a singly linked chain by position."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from dsabook.singly import Node, node_count


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _check_k(k: int) -> None:
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")


def fractional_node(head: Optional[Node], k: int) -> Optional[int]:
    """Return the data of the n/k-th node, or None when there is no such node."""
    _check_k(k)
    result: Optional[Node] = None
    length = 0
    for index, _ in enumerate(_nodes(head)):
        if index % k == 0:
            result = head if result is None else result.next
        length = index + 1
    if result is None:
        return None
    if length % k == 0:
        result = result.next
    return None if result is None else result.data


def modular_node(head: Optional[Node], k: int) -> Optional[int]:
    """Return the data of the last node whose zero-based index is a multiple of k."""
    _check_k(k)
    result: Optional[Node] = None
    for index, node in enumerate(_nodes(head)):
        if index % k == 0:
            result = node
    return None if result is None else result.data


def modular_node_from_end(head: Optional[Node], k: int) -> Optional[int]:
    """Return the data of the k-th node from the end, or None for fewer than k nodes."""
    _check_k(k)
    lead = head
    for _ in range(k):
        if lead is None:
            return None
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail.data


def nth_from_end_brute_force(head: Optional[Node], n: int) -> Optional[int]:
    """Return the data of the n-th node from the end by recounting from each node."""
    length = node_count(head)
    if length < n or head is None:
        return None
    current = head
    while current.next is not None and length > n:
        current = current.next
        length = node_count(current)
    return current.data if length == n else None


def nth_from_end_hashing(head: Optional[Node], n: int) -> Optional[int]:
    """Return the data of the n-th node from the end using a position table."""
    length = node_count(head)
    if length < n:
        return None
    by_position = {position: node for position, node in enumerate(_nodes(head), 1)}
    node = by_position.get(length - n + 1)
    return None if node is None else node.data


def nth_from_end_two_pointer(head: Optional[Node], n: int) -> Optional[int]:
    """Return the data of the n-th node from the end with a lead and a trailing walker."""
    if n < 0:
        return None
    lead = head
    for _ in range(1, n):
        if lead is None:
            break
        lead = lead.next
    if lead is None:
        return None
    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    return trail.data


def nth_from_end_recursive(head: Optional[Node], n: int) -> Optional[int]:
    """Return the data of the n-th node from the end, counting on the way back."""

    def visit(node: Optional[Node]) -> tuple[int, Optional[Node]]:
        if node is None:
            return 0, None
        count, found = visit(node.next)
        count += 1
        return count, node if count == n else found

    _, found = visit(head)
    return None if found is None else found.data


def middle_brute_force(head: Optional[Node]) -> Optional[int]:
    """Return the data of the middle node by recounting the rest from each node."""
    length = node_count(head)
    wanted = length - length // 2
    for node in _nodes(head):
        if node_count(node) == wanted:
            return node.data
    return None


def middle_by_length(head: Optional[Node]) -> Optional[int]:
    """Return the data of the middle node after counting the chain once."""
    length = node_count(head)
    if length == 0:
        return None
    node = head
    for _ in range(length // 2):
        node = node.next
    return node.data


def middle_two_pointer(head: Optional[Node]) -> Optional[int]:
    """Return the data of the middle node using a slow and a fast walker."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return None if slow is None else slow.data


def middle_hashing(head: Optional[Node]) -> Optional[int]:
    """Return the data of the middle node using a position table."""
    by_position = {position: node for position, node in enumerate(_nodes(head), 1)}
    if not by_position:
        return None
    return by_position[len(by_position) // 2 + 1].data


def is_even_length(head: Optional[Node]) -> bool:
    """Return True when the chain holds an even number of nodes."""
    fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
    return fast is None