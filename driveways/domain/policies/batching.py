"""Batch partitioning for rate-limited external calls."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def partition(items: Sequence[T], size: int) -> list[list[T]]:
    """Split `items` into consecutive chunks of at most `size` elements.

    Order is preserved; only the last chunk may be shorter.
    """
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]
