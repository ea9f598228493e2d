"""Coordinates value object — immutable (longitude, latitude) pair."""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        for name in ("longitude", "latitude"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Coordinates":
        """Build from a `[longitude, latitude]` pair, as Mapbox returns it."""
        if isinstance(pair, (str, bytes)) or len(pair) != 2:
            raise ValueError(f"Expected a [longitude, latitude] pair, got {pair!r}")
        return cls(longitude=pair[0], latitude=pair[1])

    def as_pair(self) -> list[float]:
        return [self.longitude, self.latitude]
