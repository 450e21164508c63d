"""Generation of fixed-length strings over small alphabets."""

from __future__ import annotations

from itertools import product


def _strings(pool_size: int, length: int) -> list[str]:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length == 0:
        return []
    # The first position varies fastest, so each tuple is read back to front.
    return [
        "".join(str(digit) for digit in reversed(combo))
        for combo in product(range(pool_size), repeat=length)
    ]


def n_bit_strings(size: int) -> list[str]:
    """Return every string of ``size`` bits; empty for size 0."""
    return _strings(2, size)


def n_char_strings(pool_size: int, length: int) -> list[str]:
    """Return every string of ``length`` digits drawn from 0..pool_size-1."""
    return _strings(pool_size, length)