"""Order-insensitive comparison of sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Hashable


def same_elements(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    """Return True when both iterables hold the same items with the same counts."""
    return Counter(first) == Counter(second)