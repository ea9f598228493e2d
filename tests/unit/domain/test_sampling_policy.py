"""Tests for the random sample used by the initial map view."""

import random

from driveways.domain.policies.sampling import random_subset


def test_subset_size_and_membership():
    items = list(range(100))
    subset = random_subset(items, 25, random.Random(1))
    assert len(subset) == 25
    assert len(set(subset)) == 25
    assert set(subset) <= set(items)


def test_fewer_items_than_requested_returns_all():
    subset = random_subset([1, 2, 3], 25, random.Random(1))
    assert sorted(subset) == [1, 2, 3]


def test_empty_and_zero():
    assert random_subset([], 5) == []
    assert random_subset([1, 2], 0) == []


def test_seeded_rng_is_reproducible():
    items = list(range(50))
    assert random_subset(items, 10, random.Random(7)) == random_subset(items, 10, random.Random(7))
