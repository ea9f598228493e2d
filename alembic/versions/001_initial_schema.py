"""Initial schema — addresses table.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "addresses",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("street_name", sa.String(200), nullable=True),
        sa.Column("street_no", sa.String(50), nullable=True),
        sa.Column("street_initial", sa.String(1), nullable=True),
        sa.Column("date", sa.String(10), nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
    )
    op.create_index("idx_addresses_address", "addresses", ["address"])
    op.create_index("idx_addresses_street_name", "addresses", ["street_name"])


def downgrade() -> None:
    op.drop_index("idx_addresses_street_name", table_name="addresses")
    op.drop_index("idx_addresses_address", table_name="addresses")
    op.drop_table("addresses")
