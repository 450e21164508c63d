"""Reversal of singly linked chains, whole, in pairs and in blocks."""

from __future__ import annotations

from typing import Optional

from dsabook.singly import Node


def reverse_iterative(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place by relinking each node; return the new head."""
    prev: Optional[Node] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place by recursion; return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_pairs_recursive(head: Optional[Node]) -> Optional[Node]:
    """Swap each pair of neighbouring nodes by recursion; return the new head."""
    if head is None or head.next is None:
        return head
    second = head.next
    head.next = reverse_pairs_recursive(second.next)
    second.next = head
    return second


def reverse_pairs_iterative(head: Optional[Node]) -> Optional[Node]:
    """Swap each pair of neighbouring nodes in one pass; return the new head."""
    new_head: Optional[Node] = None
    last_pair: Optional[Node] = None
    node = head
    while node is not None and node.next is not None:
        second = node.next
        if last_pair is not None:
            last_pair.next.next = second
        node.next = second.next
        second.next = node
        if new_head is None:
            new_head = second
        last_pair = second
        node = node.next
    return head if new_head is None else new_head


def reverse_in_blocks(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse every full block of ``k`` nodes; a shorter tail keeps its order."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    dummy = Node(0, head)
    group_prev = dummy
    while True:
        kth: Optional[Node] = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        prev, node = group_next, group_prev.next
        while node is not group_next:
            node.next, prev, node = prev, node, node.next
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def swap_adjacent(head: Optional[Node]) -> Optional[Node]:
    """Exchange neighbouring nodes pairwise using a leading dummy node."""
    dummy = Node(0, head)
    previous = dummy
    current = head
    while current is not None and current.next is not None:
        second = current.next
        current.next = second.next
        second.next = current
        previous.next = second
        previous = current
        current = current.next
    return dummy.next