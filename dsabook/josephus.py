"""The Josephus elimination game on a circular list."""

from __future__ import annotations

from dsabook.circular import CircularLinkedList


def josephus_survivor(n: int, m: int) -> int:
    """Return the number left after repeatedly skipping ahead and removing in a circle of n.

    Each round moves ``m - 1`` places forward and unlinks the node after the
    current one; the walker stays where it is after a removal.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    node = CircularLinkedList(range(1, n + 1)).head
    for _ in range(n - 1):
        for _ in range(m - 1):
            node = node.next
        node.next = node.next.next
    return node.data