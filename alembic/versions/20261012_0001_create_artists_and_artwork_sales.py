"""create artists and artwork_sales tables

Revision ID: 20261012_0001
Revises:
Create Date: 2026-10-12 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "20261012_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "artists",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_artists_last_name", "artists", ["last_name"], unique=False)

    op.create_table(
        "artwork_sales",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("artist_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=500), nullable=False, comment="Title of the work as catalogued"),
        sa.Column("height", sa.Numeric(12, 2), nullable=False),
        sa.Column("width", sa.Numeric(12, 2), nullable=False),
        sa.Column("year_created", sa.Integer(), nullable=True),
        sa.Column("sale_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("technique", sa.String(length=255), nullable=True),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=True, comment="ISO 4217 code"),
        sa.Column("low_estimate", sa.Numeric(18, 2), nullable=False),
        sa.Column("high_estimate", sa.Numeric(18, 2), nullable=False),
        sa.Column("hammer_price", sa.Numeric(18, 2), nullable=False),
        sa.Column("sold", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["artist_id"], ["artists.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_artwork_sales_artist_id_sale_date",
        "artwork_sales",
        ["artist_id", "sale_date"],
        unique=False,
    )
    op.create_index("ix_artwork_sales_sale_date", "artwork_sales", ["sale_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_artwork_sales_sale_date", table_name="artwork_sales")
    op.drop_index("ix_artwork_sales_artist_id_sale_date", table_name="artwork_sales")
    op.drop_table("artwork_sales")
    op.drop_index("ix_artists_last_name", table_name="artists")
    op.drop_table("artists")
