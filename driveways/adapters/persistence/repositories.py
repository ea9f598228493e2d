"""SQLAlchemy repository implementations."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from driveways.adapters.persistence.models import AddressModel
from driveways.application.ports.address_repo import AddressRepository
from driveways.domain.entities.address_record import AddressRecord
from driveways.domain.value_objects.coordinates import Coordinates
from driveways.domain.value_objects.enums import SearchDimension

logger = logging.getLogger(__name__)

# Top of the Basic Multilingual Plane private-use block; sorts after any address text
MAX_SUFFIX = "\uf8ff"

# asyncpg raises raw OSError subclasses (e.g. ConnectionRefusedError) that
# SQLAlchemy does not wrap
STORE_ERRORS = (SQLAlchemyError, OSError)

_SEARCH_COLUMNS = {
    SearchDimension.ADDRESS: AddressModel.address,
    SearchDimension.STREET_NAME: AddressModel.street_name,
}

# ─── Mappers ─────────────────────────────────────────────────────────


def _address_to_domain(m: AddressModel) -> AddressRecord:
    coordinates = None
    if m.longitude is not None and m.latitude is not None:
        coordinates = Coordinates(longitude=m.longitude, latitude=m.latitude)
    return AddressRecord(
        id=m.id,
        address=m.address,
        street_name=m.street_name,
        street_no=m.street_no,
        street_initial=m.street_initial,
        date=m.date,
        coordinates=coordinates,
    )


def _address_to_model(record: AddressRecord) -> AddressModel:
    m = AddressModel(
        address=record.address,
        street_name=record.street_name,
        street_no=record.street_no,
        street_initial=record.street_initial,
        date=record.date,
        longitude=record.coordinates.longitude if record.coordinates else None,
        latitude=record.coordinates.latitude if record.coordinates else None,
    )
    if record.id:
        m.id = record.id
    return m


# ─── Repositories ────────────────────────────────────────────────────


class SqlAddressRepository(AddressRepository):
    """Address store backed by one `AsyncSession`.

    Store failures are logged and turned into empty results, so callers
    should read an empty answer as "try again later". Access to the session
    is serialised because an AsyncSession cannot be shared by concurrent
    tasks.
    """

    def __init__(self, session: AsyncSession):
        self._s = session
        self._lock = asyncio.Lock()

    async def bulk_insert(self, records: list[AddressRecord]) -> int:
        async with self._lock:
            try:
                existing = await self._s.scalar(select(func.count()).select_from(AddressModel))
                if existing:
                    logger.info("Addresses already seeded (%d records), skipping insert", existing)
                    return 0

                models = [_address_to_model(r) for r in records]
                self._s.add_all(models)
                await self._s.flush()
                ids = [m.id for m in models]
                await self._s.commit()
                for record, record_id in zip(records, ids):
                    record.id = record_id
                logger.info("Inserted %d address records", len(models))
                return len(models)
            except STORE_ERRORS:
                await self._rollback()
                logger.exception("Bulk insert of %d records failed", len(records))
                return 0

    async def find_missing_coordinates(self) -> list[AddressRecord]:
        return await self._fetch(
            select(AddressModel)
            .where(AddressModel.longitude.is_(None))
            .order_by(AddressModel.address),
            "find_missing_coordinates",
        )

    async def count(self) -> int:
        async with self._lock:
            try:
                total = await self._s.scalar(select(func.count()).select_from(AddressModel))
                return total or 0
            except STORE_ERRORS:
                await self._rollback()
                logger.exception("Counting addresses failed")
                return 0

    async def range_query(
        self, field: SearchDimension, prefix: str, limit: int | None = None
    ) -> list[AddressRecord]:
        column = _SEARCH_COLUMNS[SearchDimension(field)]
        stmt = (
            select(AddressModel)
            .where(column >= prefix, column < prefix + MAX_SUFFIX)
            .order_by(column, AddressModel.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch(stmt, f"range_query({field!s}, {prefix!r})")

    async def with_coordinates_only(self, limit: int | None) -> list[AddressRecord]:
        stmt = (
            select(AddressModel)
            .where(AddressModel.longitude.is_not(None), AddressModel.latitude.is_not(None))
            .order_by(AddressModel.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch(stmt, "with_coordinates_only")

    async def update_coordinates(self, record_id: str, coordinates: Coordinates) -> bool:
        async with self._lock:
            try:
                result = await self._s.execute(
                    update(AddressModel)
                    .where(AddressModel.id == record_id, AddressModel.longitude.is_(None))
                    .values(longitude=coordinates.longitude, latitude=coordinates.latitude)
                )
                await self._s.commit()
                return result.rowcount > 0
            except STORE_ERRORS:
                await self._rollback()
                logger.exception("Updating coordinates of %s failed", record_id)
                return False

    async def get_by_id(self, record_id: str) -> AddressRecord | None:
        async with self._lock:
            try:
                m = await self._s.get(AddressModel, record_id)
                return _address_to_domain(m) if m else None
            except STORE_ERRORS:
                await self._rollback()
                logger.exception("Loading address %s failed", record_id)
                return None

    async def _rollback(self) -> None:
        try:
            await self._s.rollback()
        except STORE_ERRORS:
            logger.warning("Rollback failed, session connection is unusable")

    async def _fetch(self, stmt, operation: str) -> list[AddressRecord]:
        async with self._lock:
            try:
                result = await self._s.execute(stmt)
                return [_address_to_domain(m) for m in result.scalars()]
            except STORE_ERRORS:
                await self._rollback()
                logger.exception("Address query %s failed", operation)
                return []
