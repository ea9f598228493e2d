"""Port interface for address record persistence."""

from abc import ABC, abstractmethod

from driveways.domain.entities.address_record import AddressRecord
from driveways.domain.value_objects.coordinates import Coordinates
from driveways.domain.value_objects.enums import SearchDimension


class AddressRepository(ABC):
    @abstractmethod
    async def bulk_insert(self, records: list[AddressRecord]) -> int:
        """Insert `records` only if the collection is empty.

        Returns the number of records written (0 when the collection was
        already seeded).
        """
        ...

    @abstractmethod
    async def find_missing_coordinates(self) -> list[AddressRecord]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def range_query(
        self, field: SearchDimension, prefix: str, limit: int | None = None
    ) -> list[AddressRecord]:
        """Return records whose `field` starts with `prefix`, ordered by `field`."""
        ...

    @abstractmethod
    async def with_coordinates_only(self, limit: int | None) -> list[AddressRecord]:
        """Located records in id order; `limit=None` returns all of them."""
        ...

    @abstractmethod
    async def update_coordinates(self, record_id: str, coordinates: Coordinates) -> bool:
        """Attach coordinates to a record that has none yet.

        Returns False if nothing was written.
        """
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> AddressRecord | None:
        ...
