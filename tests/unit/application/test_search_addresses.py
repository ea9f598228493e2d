"""Tests for SearchAddressesUseCase."""

import random

import pytest

from driveways.application.use_cases.search_addresses import SearchAddressesUseCase
from driveways.domain.value_objects.enums import SearchDimension


@pytest.mark.asyncio
async def test_empty_query_returns_nothing(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    assert await uc.search("", SearchDimension.ADDRESS) == []
    assert await uc.search("   ", SearchDimension.STREET_NAME) == []


@pytest.mark.asyncio
async def test_unknown_street_returns_nothing(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    assert await uc.search("NONEXISTENTSTREET", SearchDimension.STREET_NAME) == []


@pytest.mark.asyncio
async def test_query_is_upper_cased(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    results = await uc.search("apollo", SearchDimension.STREET_NAME)
    assert [r.address for r in results] == ["11 APOLLO ST"]


@pytest.mark.asyncio
async def test_unlocated_results_are_dropped(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    results = await uc.search("ACADEMY", SearchDimension.STREET_NAME)
    # "250 ACADEMY ST" matches but has no coordinates
    assert [r.address for r in results] == ["312 ACADEMY ST"]


@pytest.mark.asyncio
async def test_address_dimension_is_prefix_only(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    assert await uc.search("ACADEMY", SearchDimension.ADDRESS) == []
    results = await uc.search("400 arl", SearchDimension.ADDRESS)
    assert [r.address for r in results] == ["400 ARLINGTON AVE"]


@pytest.mark.asyncio
async def test_dimension_accepts_plain_string(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    results = await uc.search("ARLINGTON", "street_name")
    assert [r.address for r in results] == ["400 ARLINGTON AVE"]


@pytest.mark.asyncio
async def test_results_in_lexicographic_order(empty_repo, record_factory):
    for address in ["9 ARLINGTON AVE", "1 ARCH ST", "5 ARDEN CT"]:
        empty_repo._store(record_factory(address, [-74.0, 40.7]))
    uc = SearchAddressesUseCase(empty_repo)

    results = await uc.search("AR", SearchDimension.STREET_NAME)
    assert [r.street_name for r in results] == ["ARCH ST", "ARDEN CT", "ARLINGTON AVE"]


@pytest.mark.asyncio
async def test_default_sample_only_located(fake_repo):
    uc = SearchAddressesUseCase(fake_repo, rng=random.Random(3))
    sample = await uc.default_sample(25)
    assert len(sample) == 3
    assert all(r.is_displayable() for r in sample)


@pytest.mark.asyncio
async def test_default_sample_respects_size(empty_repo, record_factory):
    for i in range(40):
        empty_repo._store(record_factory(f"{i} ACADEMY ST", [-74.0, 40.7]))
    uc = SearchAddressesUseCase(empty_repo, rng=random.Random(3))
    sample = await uc.default_sample(25)
    assert len(sample) == 25
    assert len({r.id for r in sample}) == 25


@pytest.mark.asyncio
async def test_default_sample_on_empty_store(empty_repo):
    assert await SearchAddressesUseCase(empty_repo).default_sample() == []


@pytest.mark.asyncio
async def test_explicit_zero_limit_is_respected(fake_repo):
    uc = SearchAddressesUseCase(fake_repo)
    assert await uc.search("ARLINGTON", SearchDimension.STREET_NAME, limit=0) == []
    assert len(await uc.search("ARLINGTON", SearchDimension.STREET_NAME)) == 1


@pytest.mark.asyncio
async def test_all_located_returns_every_located_record(empty_repo, record_factory):
    for i in range(600):
        empty_repo._store(record_factory(f"{i} ACADEMY ST", [-74.0, 40.7]))
    empty_repo._store(record_factory("1 APOLLO ST"))
    uc = SearchAddressesUseCase(empty_repo, sample_pool_size=500)

    located = await uc.all_located()

    assert len(located) == 600
    assert all(r.is_displayable() for r in located)
