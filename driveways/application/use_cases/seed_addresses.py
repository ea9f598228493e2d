"""SeedAddressesUseCase — one-off import of the permit export."""

from __future__ import annotations

import logging

from driveways.application.ports.address_repo import AddressRepository
from driveways.domain.entities.address_record import AddressRecord

logger = logging.getLogger(__name__)


class SeedAddressesUseCase:
    """Insert permit rows as ungeocoded records, once."""

    def __init__(self, address_repo: AddressRepository):
        self._addresses = address_repo

    async def execute(self, rows: list[dict]) -> int:
        records = [
            AddressRecord(
                id=None,
                address=row["address"],
                street_name=row.get("street_name"),
                street_no=row.get("street_no"),
                street_initial=row.get("street_initial"),
                date=row.get("date"),
                coordinates=None,
            )
            for row in rows
            if row.get("address")
        ]
        skipped = len(rows) - len(records)
        if skipped:
            logger.warning("Skipping %d permit rows without an address", skipped)

        inserted = await self._addresses.bulk_insert(records)
        if not inserted and records:
            logger.info("Seed skipped: address collection is not empty")
        return inserted
