"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from driveways.domain.value_objects.coordinates import Coordinates


class GeocoderPort(ABC):
    @abstractmethod
    async def resolve(self, address_text: str) -> Coordinates | None:
        """Convert an address string to a (longitude, latitude) pair.

        Returns None if the address cannot be resolved. Implementations
        must not raise on provider failures.
        """
        ...
