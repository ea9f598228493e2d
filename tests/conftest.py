"""Pytest configuration and shared fixtures."""

import os

# Must be set before driveways.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest

from driveways.application.ports.address_repo import AddressRepository
from driveways.domain.entities.address_record import AddressRecord
from driveways.domain.value_objects.coordinates import Coordinates
from driveways.domain.value_objects.enums import SearchDimension


class FakeAddressRepository(AddressRepository):
    """In-memory store with the same prefix and null-guard semantics as SQL."""

    def __init__(self, records: list[AddressRecord] | None = None):
        self.records: dict[str, AddressRecord] = {}
        self.writes: list[tuple[str, Coordinates]] = []
        self.insert_calls = 0
        for r in records or []:
            self._store(r)

    def _store(self, record: AddressRecord) -> None:
        if record.id is None:
            record.id = f"rec-{len(self.records) + 1}"
        self.records[record.id] = record

    async def bulk_insert(self, records):
        self.insert_calls += 1
        if self.records:
            return 0
        for r in records:
            self._store(r)
        return len(records)

    async def find_missing_coordinates(self):
        return [r for r in self.records.values() if r.coordinates is None]

    async def count(self):
        return len(self.records)

    async def range_query(self, field, prefix, limit=None):
        attr = SearchDimension(field).value
        hits = [
            r for r in self.records.values()
            if getattr(r, attr) is not None and prefix <= getattr(r, attr) < prefix + "\uf8ff"
        ]
        hits.sort(key=lambda r: getattr(r, attr))
        return hits[:limit] if limit is not None else hits

    async def with_coordinates_only(self, limit):
        located = [r for r in self.records.values() if r.coordinates is not None]
        return sorted(located, key=lambda r: r.id)[:limit]

    async def update_coordinates(self, record_id, coordinates):
        record = self.records.get(record_id)
        if record is None or record.coordinates is not None:
            return False
        record.coordinates = coordinates
        self.writes.append((record_id, coordinates))
        return True

    async def get_by_id(self, record_id):
        return self.records.get(record_id)


def make_record(address: str, coordinates=None, record_id=None, date="2021-08-27") -> AddressRecord:
    street_no, _, street_name = address.partition(" ")
    return AddressRecord(
        id=record_id,
        address=address,
        street_name=street_name,
        street_no=street_no,
        date=date,
        coordinates=Coordinates.from_pair(coordinates) if coordinates else None,
    )


@pytest.fixture
def sample_records() -> list[AddressRecord]:
    return [
        make_record("250 ACADEMY ST", record_id="a1"),
        make_record("312 ACADEMY ST", [-74.0712, 40.7201], record_id="a2"),
        make_record("11 APOLLO ST", [-74.08, 40.72], record_id="a3"),
        make_record("400 ARLINGTON AVE", [-74.0745, 40.7108], record_id="a4"),
        make_record("223 ARLINGTON AVE", record_id="a5"),
    ]


@pytest.fixture
def fake_repo(sample_records) -> FakeAddressRepository:
    return FakeAddressRepository(sample_records)


@pytest.fixture
def empty_repo() -> FakeAddressRepository:
    return FakeAddressRepository()


@pytest.fixture
def record_factory():
    return make_record
