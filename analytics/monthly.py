"""
analytics/monthly.py

Calendar-month bucketing for irregularly dated sale events.

Sales are grouped by (year, month) of their sale date and averaged per
month.  Every month between the first and last observation is present in
the output, including months without a single sale (``count=0``,
``average=0``), so downstream rolling windows always see a contiguous axis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
_ONE = Decimal(1)


@dataclass(frozen=True, order=True)
class YearMonth:
    """
    A calendar month.  Orders chronologically.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}.")

    @classmethod
    def from_date(cls, value: date | datetime) -> "YearMonth":
        return cls(value.year, value.month)

    def next(self) -> "YearMonth":
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def months_until(self, other: "YearMonth") -> int:
        """Number of month steps from ``self`` to *other* (negative if earlier)."""
        return (other.year - self.year) * 12 + (other.month - self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class MonthlyObservation:
    """
    One value contributed by a sale to its month.

    ``weight`` scales the value's share of the monthly mean; every
    observation still counts as one sale.
    """

    sale_date: date | datetime
    value: Decimal
    weight: Decimal = _ONE


@dataclass(frozen=True)
class MonthlyBucket:
    """
    Aggregate of one calendar month.
    """

    month: YearMonth
    average: Decimal
    count: int


def month_span(first: YearMonth, last: YearMonth) -> list[YearMonth]:
    """
    Every month from *first* to *last*, inclusive, ascending.
    """
    if last < first:
        raise ValueError(f"month span end {last} precedes start {first}.")

    months = [first]
    while months[-1] != last:
        months.append(months[-1].next())
    return months


def bucket_monthly(
    observations: Iterable[MonthlyObservation],
    months: Sequence[YearMonth] | None = None,
) -> list[MonthlyBucket]:
    """
    Group *observations* into calendar-month buckets.

    Parameters
    ----------
    observations:
        Values with their sale dates, in any order.
    months:
        Optional explicit month axis (ascending, contiguous).  When omitted
        the axis spans the earliest to the latest observation.  Supplying it
        lets several sub-series share one axis.

    Returns
    -------
    list[MonthlyBucket]
        One bucket per month of the axis, ascending.  Empty input with no
        explicit axis returns an empty list.

    Raises
    ------
    ValueError
        If an observation falls outside an explicit axis.
    """
    sums: dict[YearMonth, tuple[Decimal, Decimal, int]] = {}
    for observation in observations:
        key = YearMonth.from_date(observation.sale_date)
        weighted_sum, weight_total, count = sums.get(key, (_ZERO, _ZERO, 0))
        sums[key] = (
            weighted_sum + observation.value * observation.weight,
            weight_total + observation.weight,
            count + 1,
        )

    if months is None:
        if not sums:
            return []
        axis = month_span(min(sums), max(sums))
    else:
        axis = list(months)
        outside = set(sums) - set(axis)
        if outside:
            raise ValueError(
                f"{len(outside)} observation month(s) fall outside the supplied axis, "
                f"e.g. {min(outside)}."
            )

    buckets: list[MonthlyBucket] = []
    for month in axis:
        weighted_sum, weight_total, count = sums.get(month, (_ZERO, _ZERO, 0))
        average = weighted_sum / weight_total if weight_total else _ZERO
        buckets.append(MonthlyBucket(month=month, average=average, count=count))

    logger.debug(
        "Bucketed %d populated month(s) onto a %d-month axis",
        len(sums),
        len(buckets),
    )
    return buckets
