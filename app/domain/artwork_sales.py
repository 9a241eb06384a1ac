"""
app/domain/artwork_sales.py

Domain models shared by the sales repository, analytics service and tools.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from analytics.brackets import area_of


@dataclass(frozen=True)
class SaleRecord:
    """
    Read-only auction sale fact as seen by the analytics engine.

    ``hammer_price`` is nominal at ``sale_date``.  Estimates and dimensions
    may be zero when the auction house did not publish them.
    """

    sale_date: datetime
    hammer_price: Decimal
    low_estimate: Decimal
    high_estimate: Decimal
    height: Decimal
    width: Decimal
    sold: bool
    name: str = ""
    category: str | None = None
    technique: str | None = None
    currency: str | None = None
    year_created: int | None = None
    artist_id: uuid.UUID | None = None

    @property
    def area(self) -> Decimal | None:
        """``height × width``; ``None`` when either dimension is not positive."""
        return area_of(self.height, self.width)


@dataclass(frozen=True)
class SaleFilter:
    """
    Filter applied to ``artwork_sales`` before any analytics run.

    Unset (``None``) fields do not constrain the query.  Ranges are
    inclusive; ``name``, ``technique`` and ``category`` match substrings;
    ``currency`` matches exactly.
    """

    artist_id: uuid.UUID | None = None
    name: str | None = None
    min_height: Decimal | None = None
    max_height: Decimal | None = None
    min_width: Decimal | None = None
    max_width: Decimal | None = None
    year_created_from: int | None = None
    year_created_to: int | None = None
    sale_date_from: datetime | None = None
    sale_date_to: datetime | None = None
    technique: str | None = None
    category: str | None = None
    currency: str | None = None
    min_low_estimate: Decimal | None = None
    max_low_estimate: Decimal | None = None
    min_high_estimate: Decimal | None = None
    max_high_estimate: Decimal | None = None
    min_hammer_price: Decimal | None = None
    max_hammer_price: Decimal | None = None
    sold: bool | None = None
    page: int = 1
