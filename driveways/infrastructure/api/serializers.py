"""API response shapes for the map front end."""

from __future__ import annotations

from driveways.config import settings
from driveways.domain.entities.address_record import AddressRecord


def default_center() -> list[float]:
    return [settings.default_center_longitude, settings.default_center_latitude]


def serialize_address(record: AddressRecord) -> dict:
    """Convert an AddressRecord to an API response dict.

    `coordinates` mirrors the stored value (null until geocoded); `position`
    is where the marker goes, falling back to the map centre so the client
    never has to invent a location itself.
    """
    coordinates = record.coordinates.as_pair() if record.coordinates else None
    return {
        "id": record.id,
        "address": record.address,
        "street_name": record.street_name,
        "street_no": record.street_no,
        "street_initial": record.street_initial,
        "date": record.date,
        "label": record.marker_label(),
        "coordinates": coordinates,
        "position": coordinates or default_center(),
        "located": coordinates is not None,
    }
