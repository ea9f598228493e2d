"""AddressRecord entity — one permitted driveway / curb cut."""

from dataclasses import dataclass

from driveways.domain.value_objects.coordinates import Coordinates


@dataclass
class AddressRecord:
    id: str | None
    address: str
    street_name: str | None
    street_no: str | None
    date: str | None
    street_initial: str | None = None
    coordinates: Coordinates | None = None

    def __post_init__(self) -> None:
        if not self.street_initial and self.street_name:
            self.street_initial = self.street_name.strip()[:1] or None

    def is_displayable(self) -> bool:
        """Only records with a location can be placed on the map."""
        return self.coordinates is not None

    def marker_label(self) -> str:
        parts = [p.strip() for p in (self.street_no, self.street_name) if p and p.strip()]
        return " ".join(parts) if parts else self.address
