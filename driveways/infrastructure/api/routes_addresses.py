"""Address endpoints: located listing, sample view, search, count, detail."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from driveways.adapters.persistence.repositories import SqlAddressRepository
from driveways.application.use_cases.search_addresses import SearchAddressesUseCase
from driveways.config import settings
from driveways.domain.value_objects.enums import SearchDimension
from driveways.infrastructure.api.dependencies import get_address_repo, get_search_uc
from driveways.infrastructure.api.serializers import default_center, serialize_address

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("")
async def list_located_addresses(
    search_uc: SearchAddressesUseCase = Depends(get_search_uc),
):
    """Every located address, for the map's "show all" mode."""
    records = await search_uc.all_located()
    return {
        "total": len(records),
        "center": default_center(),
        "addresses": [serialize_address(r) for r in records],
    }


@router.get("/sample")
async def sample_addresses(
    size: int = Query(default=settings.sample_size, ge=0, le=500),
    search_uc: SearchAddressesUseCase = Depends(get_search_uc),
):
    """Random located addresses for the initial, unfiltered map."""
    records = await search_uc.default_sample(size)
    return {
        "total": len(records),
        "center": default_center(),
        "addresses": [serialize_address(r) for r in records],
    }


@router.get("/search")
async def search_addresses(
    q: str = "",
    by: SearchDimension = SearchDimension.ADDRESS,
    limit: int = Query(default=settings.search_limit, ge=1, le=1000),
    search_uc: SearchAddressesUseCase = Depends(get_search_uc),
):
    """Prefix search by full address or by street name."""
    records = await search_uc.search(q, by, limit)
    return {
        "query": q,
        "by": by.value,
        "total": len(records),
        "addresses": [serialize_address(r) for r in records],
    }


@router.get("/count")
async def count_addresses(repo: SqlAddressRepository = Depends(get_address_repo)):
    return {"total": await repo.count()}


@router.get("/{record_id}")
async def get_address(record_id: str, repo: SqlAddressRepository = Depends(get_address_repo)):
    record = await repo.get_by_id(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Address not found")
    return serialize_address(record)
