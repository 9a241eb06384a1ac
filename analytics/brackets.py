"""
analytics/brackets.py

Dataset-relative size brackets (Small / Medium / Large) by artwork area.

Cut points are tertiles of the areas in the current result set, so the same
canvas may land in different brackets for different filters.  Thresholds
are recomputed for every request.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

logger = logging.getLogger(__name__)


class SizeBracket(str, enum.Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


@dataclass(frozen=True)
class SizeBracketThresholds:
    """
    Tertile cut points over one result set's areas.

    ``small_max``  — largest area still classified Small (inclusive).
    ``medium_max`` — largest area still classified Medium; anything above
                     is Large.
    """

    small_max: Decimal
    medium_max: Decimal

    def bracket_for(self, area: Decimal) -> SizeBracket:
        if area <= self.small_max:
            return SizeBracket.SMALL
        if area > self.medium_max:
            return SizeBracket.LARGE
        return SizeBracket.MEDIUM

    def range_labels(self) -> dict[SizeBracket, str]:
        """Human-readable area range per bracket."""
        return {
            SizeBracket.SMALL: f"Area 0 – {self.small_max:.2f}",
            SizeBracket.MEDIUM: f"Area {self.small_max:.2f} – {self.medium_max:.2f}",
            SizeBracket.LARGE: f"Area > {self.medium_max:.2f}",
        }


def area_of(height: Decimal | None, width: Decimal | None) -> Decimal | None:
    """
    ``height × width``, or ``None`` when either dimension is missing or ≤ 0.
    """
    if height is None or width is None or height <= 0 or width <= 0:
        return None
    return height * width


def classify(areas: Iterable[Decimal]) -> SizeBracketThresholds:
    """
    Compute tertile thresholds for *areas*.

    With ``n`` areas sorted ascending, ``small_max`` is the value at index
    ``n // 3`` and ``medium_max`` the value at the two-thirds rank, index
    ``(2n - 1) // 3``.  Ties spanning a cut point keep groups only roughly
    equal in size.  Fewer than three areas still produce (degenerate)
    thresholds.

    Raises
    ------
    ValueError
        If *areas* is empty or contains a non-positive value.
    """
    ordered = sorted(areas)
    if not ordered:
        raise ValueError("At least one area is required to compute size brackets.")
    if ordered[0] <= 0:
        raise ValueError(f"Areas must be positive, got {ordered[0]}.")

    n = len(ordered)
    thresholds = SizeBracketThresholds(
        small_max=ordered[n // 3],
        medium_max=ordered[(2 * n - 1) // 3],
    )
    logger.debug(
        "Size brackets over %d areas: small_max=%s medium_max=%s",
        n,
        thresholds.small_max,
        thresholds.medium_max,
    )
    return thresholds
