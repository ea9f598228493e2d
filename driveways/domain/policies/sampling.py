"""Random sampling for the initial, unfiltered map view."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def random_subset(items: Sequence[T], size: int, rng: random.Random | None = None) -> list[T]:
    """Return up to `size` distinct items chosen uniformly at random.

    When there are fewer items than requested, all of them are returned in
    shuffled order.
    """
    if size <= 0 or not items:
        return []
    rng = rng or random.Random()
    return rng.sample(list(items), min(size, len(items)))
