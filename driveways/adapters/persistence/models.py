"""SQLAlchemy ORM models — maps to the addresses table."""

from uuid import uuid4

from sqlalchemy import Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from driveways.adapters.persistence.database import Base


def _new_id() -> str:
    return uuid4().hex


class AddressModel(Base):
    __tablename__ = "addresses"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    street_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    street_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_initial: Mapped[str | None] = mapped_column(String(1), nullable=True)
    date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    # NULL together until geocoded
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("idx_addresses_address", "address"),
        Index("idx_addresses_street_name", "street_name"),
    )
