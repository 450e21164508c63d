"""Operations that combine or rebuild singly linked chains."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from dsabook.singly import Node, node_count


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def add_numbers(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Add two numbers stored least significant digit first; return the sum's chain."""
    if first is None:
        return second
    if second is None:
        return first
    dummy = Node()
    tail = dummy
    carry = 0
    a: Optional[Node] = first
    b: Optional[Node] = second
    while a is not None or b is not None or carry:
        total = carry
        if a is not None:
            total += a.data
            a = a.next
        if b is not None:
            total += b.data
            b = b.next
        carry, digit = divmod(total, 10)
        tail.next = Node(digit)
        tail = tail.next
    return dummy.next


def merge_sorted_recursive(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two ascending chains by recursion, relinking their nodes."""
    if first is None:
        return second
    if second is None:
        return first
    if first.data < second.data:
        first.next = merge_sorted_recursive(first.next, second)
        return first
    second.next = merge_sorted_recursive(first, second.next)
    return second


def merge_sorted_iterative(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two ascending chains in one pass, relinking their nodes."""
    dummy = Node()
    tail = dummy
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def intersection_brute_force(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the first node of ``first`` that also lies on ``second``, checking every pair."""
    for candidate in _nodes(first):
        if any(other is candidate for other in _nodes(second)):
            return candidate
    return None


def intersection_stacks(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Find the merge point by walking both chains back from their ends.

    Returns None when no difference is met before the shorter chain runs out.
    """
    back_first = list(_nodes(first))[::-1]
    back_second = list(_nodes(second))[::-1]
    for index, (one, two) in enumerate(zip(back_first, back_second)):
        if one is not two:
            return back_first[index - 1] if index > 0 else None
    return None


def intersection_two_pointer(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Find the merge point after lining up both chains by their lengths."""
    length_first = node_count(first)
    length_second = node_count(second)
    longer, shorter = (second, first) if length_second > length_first else (first, second)
    for _ in range(abs(length_first - length_second)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer
        longer = longer.next
        shorter = shorter.next
    return None


def insert_sorted(head: Optional[Node], data: int) -> Node:
    """Insert ``data`` before the first node not smaller than it; return the head."""
    new_node = Node(data)
    previous: Optional[Node] = None
    current = head
    while current is not None and current.data < data:
        previous = current
        current = current.next
    new_node.next = current
    if previous is None:
        return new_node
    previous.next = new_node
    return head


def remove_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Unlink every node whose data appeared earlier; return the head."""
    seen: set[int] = set()
    previous: Optional[Node] = None
    for node in _nodes(head):
        if node.data in seen:
            previous.next = node.next
        else:
            seen.add(node.data)
            previous = node
    return head