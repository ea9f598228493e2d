"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from driveways.adapters.persistence.database import get_session
from driveways.adapters.persistence.models import AddressModel
from driveways.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report store connectivity and whether geocoding can run."""
    addresses = None
    try:
        addresses = await session.scalar(select(func.count()).select_from(AddressModel))
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e.__class__.__name__}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "addresses": addresses,
        "geocoder_configured": bool(settings.mapbox_access_token),
        "service": "Driveway permit lookup",
    }
