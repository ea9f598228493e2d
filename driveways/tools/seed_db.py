"""Seed the address store from the permit export.

Usage:
    python -m driveways.tools.seed_db
    python -m driveways.tools.seed_db --data-file data/zoning-driveways-and-carports.json
    python -m driveways.tools.seed_db --verify-only
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import func, select

from driveways.adapters.persistence.database import async_session_factory
from driveways.adapters.persistence.models import AddressModel
from driveways.adapters.persistence.repositories import SqlAddressRepository
from driveways.adapters.seed_loader.loader import load_permits
from driveways.application.use_cases.seed_addresses import SeedAddressesUseCase
from driveways.config import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def seed(data_file: Path) -> dict[str, int]:
    """Main seed function. Returns counts of loaded and inserted records."""
    rows = load_permits(data_file)
    async with async_session_factory() as session:
        inserted = await SeedAddressesUseCase(SqlAddressRepository(session)).execute(rows)

    logger.info("Seed complete: %d of %d permit records inserted", inserted, len(rows))
    return {"loaded": len(rows), "inserted": inserted}


async def _verify_data() -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        total = await session.scalar(select(func.count()).select_from(AddressModel))
        located = await session.scalar(
            select(func.count()).select_from(AddressModel).where(AddressModel.longitude.is_not(None))
        )
        streets = await session.scalar(select(func.count(func.distinct(AddressModel.street_name))))

        print(f"\n{'='*50}")
        print("SEED VERIFICATION")
        print(f"{'='*50}")
        print(f"Addresses:      {total}")
        print(f"With location:  {located}/{total}")
        print(f"Distinct streets: {streets}")
        print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed the driveway address store")
    parser.add_argument(
        "--data-file", type=str, default=settings.seed_data_path,
        help=f"Permit export, JSON or CSV (default: {settings.seed_data_path})",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_file = Path(args.data_file)
    if not args.verify_only and not data_file.exists():
        logger.error("Data file not found: %s", data_file)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_file)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
