"""Array rotation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def rotate_left(values: Sequence[T], count: int) -> list[T]:
    """Return *values* rotated left by *count* positions."""
    if count < 0:
        raise ValueError("count must not be negative")
    items = list(values)
    if not items:
        return items
    shift = count % len(items)
    return items[shift:] + items[:shift]


def rotate_left_by_one(values: Sequence[T]) -> list[T]:
    """Return *values* rotated left by a single position."""
    return rotate_left(values, 1)