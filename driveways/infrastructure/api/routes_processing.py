"""Processing endpoints — seed the store, geocode missing coordinates."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from driveways.adapters.seed_loader.loader import load_permits
from driveways.application.use_cases.geocode_addresses import GeocodeAddressesUseCase
from driveways.application.use_cases.seed_addresses import SeedAddressesUseCase
from driveways.config import settings
from driveways.infrastructure.api.dependencies import get_geocode_uc, get_seed_uc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/process", tags=["processing"])


@router.post("/seed")
async def seed_addresses(seed_uc: SeedAddressesUseCase = Depends(get_seed_uc)):
    """Load the permit export into an empty store."""
    data_file = Path(settings.seed_data_path)
    if not data_file.exists():
        raise HTTPException(status_code=400, detail=f"Data file not found: {data_file}")

    try:
        rows = load_permits(data_file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    inserted = await seed_uc.execute(rows)
    return {
        "status": "ok",
        "loaded": len(rows),
        "inserted": inserted,
        "message": "Addresses seeded" if inserted else "Nothing inserted",
    }


@router.post("/geocode")
async def geocode_addresses(geocode_uc: GeocodeAddressesUseCase = Depends(get_geocode_uc)):
    """Geocode every address that has no coordinates yet."""
    try:
        result = await geocode_uc.execute()
    except Exception:
        logger.exception("Geocoding run failed")
        raise HTTPException(status_code=500, detail="Geocoding failed, please try again later")
    return {"status": "ok", **asdict(result)}
