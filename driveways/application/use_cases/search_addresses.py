"""Search use cases — prefix search, initial sample view, client flow."""

from __future__ import annotations

import logging
import random

from driveways.application.ports.address_repo import AddressRepository
from driveways.domain.entities.address_record import AddressRecord
from driveways.domain.errors import InvalidStateTransition
from driveways.domain.policies.sampling import random_subset
from driveways.domain.value_objects.enums import SearchDimension, SearchState

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 100
DEFAULT_SAMPLE_SIZE = 25
DEFAULT_SAMPLE_POOL_SIZE = 500


class SearchAddressesUseCase:
    """Prefix search over the stored addresses.

    Stored text is upper case, so queries are upper-cased before the range
    scan. Only records with coordinates are returned, since anything else
    cannot be shown on the map.
    """

    def __init__(
        self,
        address_repo: AddressRepository,
        limit: int = DEFAULT_SEARCH_LIMIT,
        sample_pool_size: int = DEFAULT_SAMPLE_POOL_SIZE,
        rng: random.Random | None = None,
    ):
        self._addresses = address_repo
        self._limit = limit
        self._pool_size = sample_pool_size
        self._rng = rng or random.Random()

    async def search(
        self,
        query: str,
        dimension: SearchDimension = SearchDimension.ADDRESS,
        limit: int | None = None,
    ) -> list[AddressRecord]:
        prefix = (query or "").strip().upper()
        if not prefix:
            return []

        dimension = SearchDimension(dimension)
        if limit is None:
            limit = self._limit
        records = await self._addresses.range_query(dimension, prefix, limit)
        located = [r for r in records if r.is_displayable()]
        logger.debug(
            "Search %s=%r: %d results (%d without coordinates dropped)",
            dimension.value, prefix, len(located), len(records) - len(located),
        )
        return located

    async def default_sample(self, size: int = DEFAULT_SAMPLE_SIZE) -> list[AddressRecord]:
        """Random subset of located records for the unfiltered view."""
        pool = await self._addresses.with_coordinates_only(self._pool_size)
        return random_subset(pool, size, self._rng)

    async def all_located(self) -> list[AddressRecord]:
        """Every record that can be placed on the map, for the "show all" view."""
        return await self._addresses.with_coordinates_only(None)


class SearchSession:
    """State of one map client: initial sample, then successive searches.

    IDLE → LOADING → READY; from READY a query goes SEARCHING → READY, or
    ERROR on failure. ERROR only leaves through `retry()`.
    """

    def __init__(self, search_uc: SearchAddressesUseCase, sample_size: int = DEFAULT_SAMPLE_SIZE):
        self._search = search_uc
        self._sample_size = sample_size
        self.state = SearchState.IDLE
        self.results: list[AddressRecord] = []
        self.sample: list[AddressRecord] = []
        self.query = ""
        self.error: str | None = None

    async def load_initial(self) -> list[AddressRecord]:
        if self.state not in (SearchState.IDLE, SearchState.ERROR):
            raise InvalidStateTransition(f"Cannot load initial view from {self.state.value}")

        self.state = SearchState.LOADING
        try:
            self.sample = await self._search.default_sample(self._sample_size)
        except Exception as e:
            logger.exception("Loading initial addresses failed")
            self._fail(e)
            return []

        self.results = list(self.sample)
        self.query = ""
        self.error = None
        self.state = SearchState.READY
        return self.results

    async def submit(
        self, query: str, dimension: SearchDimension = SearchDimension.ADDRESS
    ) -> list[AddressRecord]:
        if self.state != SearchState.READY:
            raise InvalidStateTransition(f"Cannot search from {self.state.value}")

        self.state = SearchState.SEARCHING
        self.query = query or ""
        if not self.query.strip():
            self.results = list(self.sample)
            self.state = SearchState.READY
            return self.results

        try:
            self.results = await self._search.search(self.query, dimension)
        except Exception as e:
            logger.exception("Search for %r failed", self.query)
            self._fail(e)
            return []

        self.state = SearchState.READY
        return self.results

    async def retry(self) -> list[AddressRecord]:
        if self.state != SearchState.ERROR:
            raise InvalidStateTransition(f"Nothing to retry from {self.state.value}")
        return await self.load_initial()

    def _fail(self, exc: Exception) -> None:
        self.state = SearchState.ERROR
        self.error = str(exc) or exc.__class__.__name__
        self.results = []
