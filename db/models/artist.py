"""
db/models/artist.py

Artist model — the creator of the works sold at auction.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.artwork_sale import ArtworkSale


class Artist(Base, TimestampMixin):
    """
    An artist whose works appear in ``artwork_sales``.

    The size-bracket and price-vs-estimate tools are scoped to one artist.
    """

    __tablename__ = "artists"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)

    first_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # ── Relationships ──────────────────────────────────────────────────────────

    sales: Mapped[list["ArtworkSale"]] = relationship(
        "ArtworkSale",
        back_populates="artist",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # ── Indexes ────────────────────────────────────────────────────────────────

    __table_args__ = (
        Index("ix_artists_last_name", "last_name"),
    )

    def __repr__(self) -> str:
        return f"<Artist id={self.id} last_name={self.last_name!r}>"
