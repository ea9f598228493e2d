"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from driveways.adapters.geocoder.mapbox_adapter import MapboxAdapter
from driveways.adapters.persistence.database import get_session
from driveways.adapters.persistence.repositories import SqlAddressRepository
from driveways.application.ports.geocoder_port import GeocoderPort
from driveways.application.use_cases.geocode_addresses import GeocodeAddressesUseCase
from driveways.application.use_cases.search_addresses import SearchAddressesUseCase
from driveways.application.use_cases.seed_addresses import SeedAddressesUseCase
from driveways.config import settings
from driveways.domain.errors import ConfigurationError

# Re-export session dependency
get_db_session = get_session

# Built lazily so the API can serve searches without a geocoder token
_geocoder_adapter: GeocoderPort | None = None


def get_geocoder() -> GeocoderPort:
    global _geocoder_adapter
    if _geocoder_adapter is None:
        try:
            _geocoder_adapter = MapboxAdapter()
        except ConfigurationError as e:
            raise HTTPException(status_code=503, detail=str(e))
    return _geocoder_adapter


def get_address_repo(session: AsyncSession = Depends(get_session)) -> SqlAddressRepository:
    return SqlAddressRepository(session)


def get_search_uc(
    repo: SqlAddressRepository = Depends(get_address_repo),
) -> SearchAddressesUseCase:
    return SearchAddressesUseCase(
        address_repo=repo,
        limit=settings.search_limit,
        sample_pool_size=settings.sample_pool_size,
    )


def get_seed_uc(
    repo: SqlAddressRepository = Depends(get_address_repo),
) -> SeedAddressesUseCase:
    return SeedAddressesUseCase(address_repo=repo)


def get_geocode_uc(
    geocoder: GeocoderPort = Depends(get_geocoder),
    repo: SqlAddressRepository = Depends(get_address_repo),
) -> GeocodeAddressesUseCase:
    return GeocodeAddressesUseCase(
        geocoder=geocoder,
        address_repo=repo,
        batch_size=settings.geocode_batch_size,
        delay_seconds=settings.geocode_batch_delay_seconds,
    )
