"""Create vehicles table

Revision ID: 3f1c9a27b604
Revises:
Create Date: 2026-10-19 10:02:11.418233

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a27b604"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("make", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.BigInteger(), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("fuel_type", sa.String(length=20), nullable=True),
        sa.Column("transmission", sa.String(length=20), nullable=True),
        sa.Column("drivetrain", sa.String(length=10), nullable=True),
        sa.Column(
            "status", sa.String(length=20), nullable=False, server_default=sa.text("'available'")
        ),
        sa.Column("exterior_color", sa.String(length=50), nullable=True),
        sa.Column("interior_color", sa.String(length=50), nullable=True),
        sa.Column("engine", sa.String(length=100), nullable=True),
        sa.Column("seating", sa.Integer(), nullable=True),
        sa.Column("doors", sa.Integer(), nullable=True),
        sa.Column("body_style", sa.String(length=50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("vin", sa.String(length=50), nullable=True),
        sa.Column(
            "images", postgresql.ARRAY(sa.Text()), nullable=False, server_default=sa.text("'{}'")
        ),
        sa.Column(
            "features", postgresql.ARRAY(sa.Text()), nullable=False, server_default=sa.text("'{}'")
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    # Listing is always newest first
    op.create_index("ix_vehicles_created_at", "vehicles", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_vehicles_created_at", table_name="vehicles")
    op.drop_table("vehicles")
