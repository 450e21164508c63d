"""Reordering, rotation, partitioning and palindrome checks of singly linked chains."""

from __future__ import annotations

from typing import Optional

from dsabook.singly import Node, node_count


def _reverse(head: Optional[Node]) -> Optional[Node]:
    prev: Optional[Node] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reorder(head: Optional[Node]) -> Optional[Node]:
    """Relink L1, L2, ..., Ln as L1, Ln, L2, Ln-1, ...; return the head."""
    if head is None:
        return None
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    back = _reverse(slow.next)
    slow.next = None

    front = head.next
    tail = head
    while front is not None and back is not None:
        tail.next = back
        back = back.next
        tail = tail.next
        tail.next = front
        front = front.next
        tail = tail.next
    tail.next = front if front is not None else back
    return head


def rotate_right(head: Optional[Node], k: int) -> Optional[Node]:
    """Rotate the chain ``k`` places to the right; return the new head."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if head is None or head.next is None:
        return head
    length = node_count(head)
    shift = k % length
    if shift == 0:
        return head
    new_tail = head
    for _ in range(length - shift - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    old_tail = new_head
    while old_tail.next is not None:
        old_tail = old_tail.next
    old_tail.next = head
    return new_head


def partition(head: Optional[Node], k: int) -> Optional[Node]:
    """Move nodes below ``k`` before the rest, keeping relative order on both sides."""
    if head is None or head.next is None:
        return head
    low = Node(0)
    high = Node(k)
    low_tail, high_tail = low, high
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.data >= k:
            high_tail.next = node
            high_tail = node
        else:
            low_tail.next = node
            low_tail = node
        node = following
    low_tail.next = high.next
    return low.next


def is_palindrome(head: Optional[Node]) -> bool:
    """Return True when the chain reads the same both ways; the chain is left as found."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    before_middle = head
    while before_middle.next is not slow:
        before_middle = before_middle.next

    back_head = _reverse(slow)
    try:
        front, back = head, back_head
        while back is not None:
            if front.data != back.data:
                return False
            front = front.next
            back = back.next
        return True
    finally:
        before_middle.next = _reverse(back_head)