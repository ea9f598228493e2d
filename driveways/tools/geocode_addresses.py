"""Geocode every stored address that has no coordinates yet.

Safe to re-run: only records still missing coordinates are touched.

Usage:
    python -m driveways.tools.geocode_addresses
    python -m driveways.tools.geocode_addresses --batch-size 5 --delay 1.0
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from driveways.adapters.geocoder.mapbox_adapter import MapboxAdapter
from driveways.adapters.persistence.database import async_session_factory, engine
from driveways.adapters.persistence.repositories import SqlAddressRepository
from driveways.application.use_cases.geocode_addresses import (
    GeocodeAddressesUseCase,
    GeocodeRunResult,
)
from driveways.config import settings
from driveways.domain.errors import ConfigurationError

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def run(batch_size: int, delay: float) -> GeocodeRunResult:
    geocoder = MapboxAdapter()
    try:
        async with async_session_factory() as session:
            use_case = GeocodeAddressesUseCase(
                geocoder=geocoder,
                address_repo=SqlAddressRepository(session),
                batch_size=batch_size,
                delay_seconds=delay,
            )
            return await use_case.execute()
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Geocode addresses without coordinates")
    parser.add_argument(
        "--batch-size", type=int, default=settings.geocode_batch_size,
        help=f"Concurrent lookups per batch (default: {settings.geocode_batch_size})",
    )
    parser.add_argument(
        "--delay", type=float, default=settings.geocode_batch_delay_seconds,
        help=f"Seconds to wait between batches (default: {settings.geocode_batch_delay_seconds})",
    )
    args = parser.parse_args()

    try:
        result = asyncio.run(run(args.batch_size, args.delay))
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    print(
        f"Geocoded {result.resolved}/{result.pending} addresses "
        f"in {result.batches} batches ({result.failed} failed)"
    )


if __name__ == "__main__":
    main()
