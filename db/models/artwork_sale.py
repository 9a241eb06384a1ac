"""
db/models/artwork_sale.py

One auction sale of an artwork. Read by the sales analytics tools.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.artist import Artist

_LENGTH = Numeric(12, 2)


class ArtworkSale(Base, TimestampMixin):
    """
    Stores a single lot result.

    ``hammer_price`` is nominal in ``currency`` at ``sale_date``.  Estimates,
    ``height`` and ``width`` are zero when the auction house did not publish
    them; the analytics layer treats a zero dimension as "no area".
    """

    __tablename__ = "artwork_sales"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    artist_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
        comment="Title of the work as catalogued",
    )
    height: Mapped[Decimal] = mapped_column(_LENGTH, nullable=False, default=Decimal(0))
    width: Mapped[Decimal] = mapped_column(_LENGTH, nullable=False, default=Decimal(0))
    year_created: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sale_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    technique: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    currency: Mapped[str | None] = mapped_column(
        String(3),
        nullable=True,
        comment="ISO 4217 code",
    )
    low_estimate: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal(0))
    high_estimate: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal(0))
    hammer_price: Mapped[Decimal] = mapped_column(nullable=False)
    sold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # ── Relationships ──────────────────────────────────────────────────────────

    artist: Mapped["Artist"] = relationship("Artist", back_populates="sales")

    # ── Indexes ────────────────────────────────────────────────────────────────

    __table_args__ = (
        Index("ix_artwork_sales_artist_id_sale_date", "artist_id", "sale_date"),
        Index("ix_artwork_sales_sale_date", "sale_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<ArtworkSale id={self.id} artist_id={self.artist_id} "
            f"sale_date={self.sale_date!s} hammer_price={self.hammer_price}>"
        )
