"""
db/models/inflation_index.py

Monthly price-level index (ECB HICP) used to restate hammer prices.
One row per (year, month).
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin

_UPSERT_CONSTRAINT = "uq_inflation_index_year_month"


class InflationIndex(Base, TimestampMixin):
    """
    The unique constraint on ``(year, month)`` drives upsert semantics:
    re-running the refresh job updates published values in place.
    """

    __tablename__ = "inflation_index"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    index_value: Mapped[Decimal] = mapped_column(
        Numeric(18, 4),
        nullable=False,
        comment="Index level for the month (2015 = 100 for HICP)",
    )

    __table_args__ = (
        UniqueConstraint("year", "month", name=_UPSERT_CONSTRAINT),
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_inflation_index_month"),
        CheckConstraint("year BETWEEN 1900 AND 3000", name="ck_inflation_index_year"),
    )

    def __repr__(self) -> str:
        return f"<InflationIndex {self.year:04d}-{self.month:02d} value={self.index_value}>"
