"""create inflation_index table

Revision ID: 20261012_0002
Revises: 20261012_0001
Create Date: 2026-10-12 09:30:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "20261012_0002"
down_revision = "20261012_0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "inflation_index",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column(
            "index_value",
            sa.Numeric(18, 4),
            nullable=False,
            comment="Index level for the month (2015 = 100 for HICP)",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("year", "month", name="uq_inflation_index_year_month"),
        sa.CheckConstraint("month BETWEEN 1 AND 12", name="ck_inflation_index_month"),
        sa.CheckConstraint("year BETWEEN 1900 AND 3000", name="ck_inflation_index_year"),
    )


def downgrade() -> None:
    op.drop_table("inflation_index")
