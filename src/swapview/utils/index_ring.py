"""Index arithmetic over a dynamic-length sequence.

Two policies are supported: saturating (``bound``) where stepping past either
end leaves the index on the boundary, and wrapping where it continues from the
opposite end. Both helpers are pure so the engine can use them for previews and
for committing alike.
"""
from __future__ import annotations


def bound(value: int, low: int, high: int) -> int:
    """Limit ``value`` to ``[low, high]``. ``bound(-4, 0, 10) == 0``."""
    return min(max(value, low), high)


def wrap(value: int, length: int) -> int:
    """Fold ``value`` into ``[0, length)``. ``wrap(-1, 4) == 3``."""
    return value % length


def next_index(current: int, length: int, loop: bool) -> int:
    if length <= 0:
        return current
    if loop:
        return wrap(current + 1, length)
    return bound(current + 1, 0, length - 1)


def previous_index(current: int, length: int, loop: bool) -> int:
    if length <= 0:
        return current
    if loop:
        return wrap(current - 1 + length, length)
    return bound(current - 1, 0, length - 1)
