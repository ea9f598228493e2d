"""Mapbox geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from driveways.application.ports.geocoder_port import GeocoderPort
from driveways.config import settings
from driveways.domain.errors import ConfigurationError
from driveways.domain.value_objects.coordinates import Coordinates

logger = logging.getLogger(__name__)

MAPBOX_GEOCODE_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places/{query}.json"


class MapboxAdapter(GeocoderPort):
    """Mapbox forward geocoding, scoped to one locality, with caching.

    Every failure mode (transport, HTTP status, malformed payload) is
    reported as an unresolved address rather than raised.
    """

    def __init__(
        self,
        access_token: str | None = None,
        locality: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._access_token = access_token if access_token is not None else settings.mapbox_access_token
        if not self._access_token:
            raise ConfigurationError(
                "Mapbox access token is not set (MAPBOX_ACCESS_TOKEN)"
            )
        self._locality = locality if locality is not None else settings.geocoder_locality
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        self._transport = transport
        self._cache: dict[str, Coordinates | None] = {}

    def build_query(self, address_text: str) -> str:
        """Append the locality so same-named streets elsewhere don't match."""
        address_text = address_text.strip()
        if not self._locality:
            return address_text
        return f"{address_text}, {self._locality}"

    async def resolve(self, address_text: str) -> Coordinates | None:
        """Geocode an address using the Mapbox Geocoding API."""
        if not address_text or not address_text.strip():
            return None

        cache_key = address_text.strip().lower()
        if cache_key in self._cache:
            logger.debug("Cache hit for '%s'", address_text)
            return self._cache[cache_key]

        query = self.build_query(address_text)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    MAPBOX_GEOCODE_URL.format(query=quote(query, safe="")),
                    params={"access_token": self._access_token, "limit": 1},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()

            features = data.get("features") or []
            if not features:
                logger.warning("No results found for '%s'", address_text)
                self._cache[cache_key] = None
                return None

            point = Coordinates.from_pair(features[0]["center"])
            logger.info(
                "Mapbox resolved '%s' → (%f, %f)",
                address_text, point.longitude, point.latitude,
            )
            self._cache[cache_key] = point
            return point

        except Exception:
            logger.exception("Mapbox geocoding error for '%s'", address_text)
            return None
