"""GeocodeAddressesUseCase — fill in missing coordinates, batch by batch."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from driveways.application.ports.address_repo import AddressRepository
from driveways.application.ports.geocoder_port import GeocoderPort
from driveways.domain.entities.address_record import AddressRecord
from driveways.domain.policies.batching import partition

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_DELAY_SECONDS = 1.0


@dataclass
class GeocodeRunResult:
    """Summary of one pipeline run."""

    pending: int = 0
    attempted: int = 0
    resolved: int = 0
    failed: int = 0
    batches: int = 0
    delays: int = 0


class GeocodeAddressesUseCase:
    """Geocode every stored record that has no coordinates yet.

    Records are processed in fixed-size batches. Inside a batch all lookups
    run concurrently; batches run strictly one after another with a pause
    in between to stay under the provider's rate limit. A record that
    cannot be resolved is logged and left untouched, so the run can simply
    be repeated later.
    """

    def __init__(
        self,
        geocoder: GeocoderPort,
        address_repo: AddressRepository,
        batch_size: int = DEFAULT_BATCH_SIZE,
        delay_seconds: float = DEFAULT_BATCH_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {batch_size}")
        self._geocoder = geocoder
        self._addresses = address_repo
        self._batch_size = batch_size
        self._delay = delay_seconds
        self._sleep = sleep

    async def execute(self) -> GeocodeRunResult:
        pending = await self._addresses.find_missing_coordinates()
        result = GeocodeRunResult(pending=len(pending))
        logger.info("Found %d addresses to geocode", len(pending))

        batches = partition(pending, self._batch_size)
        for index, batch in enumerate(batches):
            outcomes = await asyncio.gather(*(self._geocode_one(r) for r in batch))
            result.batches += 1
            result.attempted += len(batch)
            result.resolved += sum(1 for ok in outcomes if ok)
            result.failed += sum(1 for ok in outcomes if not ok)
            logger.info(
                "Batch %d/%d: %d/%d resolved",
                index + 1, len(batches), sum(outcomes), len(batch),
            )

            if index + 1 < len(batches):
                await self._sleep(self._delay)
                result.delays += 1

        logger.info(
            "Geocoding complete: %d/%d resolved, %d failed",
            result.resolved, result.attempted, result.failed,
        )
        return result

    async def _geocode_one(self, record: AddressRecord) -> bool:
        coordinates = await self._geocoder.resolve(record.address)
        if coordinates is None:
            logger.warning("Failed to geocode %s", record.address)
            return False

        written = await self._addresses.update_coordinates(record.id, coordinates)
        if not written:
            logger.warning("Could not store coordinates for %s (%s)", record.address, record.id)
            return False

        logger.info(
            "Successfully geocoded %s to [%f, %f]",
            record.address, coordinates.longitude, coordinates.latitude,
        )
        return True
