"""Detection and measurement of loops in singly linked chains."""

from __future__ import annotations

from typing import Optional

from dsabook.singly import Node


def has_cycle_hashing(head: Optional[Node]) -> bool:
    """Return True when the chain revisits a node, tracking visited nodes in a set."""
    seen: set[Node] = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    """Return the node where a slow and a fast walker meet, or None if the chain ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return fast
    return None


def has_cycle_floyd(head: Optional[Node]) -> bool:
    """Return True when the chain ends in a loop, using two walkers at different speeds."""
    return _meeting_point(head) is not None


def loop_start(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the loop, or None when the chain ends."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def loop_length(head: Optional[Node]) -> Optional[int]:
    """Return the number of nodes in the loop, or None when the chain ends."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    count = 1
    node = meeting.next
    while node is not meeting:
        node = node.next
        count += 1
    return count