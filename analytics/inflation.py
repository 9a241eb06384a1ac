"""
analytics/inflation.py

Monthly inflation index lookup and nominal-to-real price adjustment.

The index is a sparse monthly timeline of price-level values (ECB HICP,
2015=100).  Converting an amount from period A to period B multiplies it by
``index(B) / index(A)``.  All arithmetic stays in :class:`~decimal.Decimal`;
nothing in this module rounds.

Missing months
--------------
``nearest_prior``  (default) — a period without a point resolves to the
                   closest earlier period that has one.
``strict``         — only exact (year, month) matches resolve.

When nothing resolves under the active policy a
:class:`MissingInflationIndexError` is raised so the caller fails the whole
request instead of silently returning an unadjusted series.
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from analytics.monthly import YearMonth

logger = logging.getLogger(__name__)

FALLBACK_NEAREST_PRIOR = "nearest_prior"
FALLBACK_STRICT = "strict"
VALID_FALLBACK_POLICIES: frozenset[str] = frozenset({FALLBACK_NEAREST_PRIOR, FALLBACK_STRICT})


class MissingInflationIndexError(LookupError):
    """
    Raised when no index value resolves for a period under the active policy.
    """

    def __init__(self, period: YearMonth | None, message: str | None = None) -> None:
        self.period = period
        if message is None:
            message = f"No inflation index value available for {period}."
        super().__init__(message)


@dataclass(frozen=True)
class InflationIndexPoint:
    """
    One monthly index observation.
    """

    year: int
    month: int
    index_value: Decimal

    @property
    def period(self) -> YearMonth:
        return YearMonth(self.year, self.month)


class InflationIndexTable:
    """
    Immutable, in-memory view over the monthly index for one request.

    Parameters
    ----------
    points:
        Index observations in any order.  Duplicate periods keep the last
        value seen; non-positive values are skipped with a WARNING.
    fallback_policy:
        ``"nearest_prior"`` or ``"strict"``.
    """

    def __init__(
        self,
        points: Iterable[InflationIndexPoint],
        *,
        fallback_policy: str = FALLBACK_NEAREST_PRIOR,
    ) -> None:
        if fallback_policy not in VALID_FALLBACK_POLICIES:
            raise ValueError(
                f"Unknown inflation fallback policy {fallback_policy!r}. "
                f"Allowed values: {sorted(VALID_FALLBACK_POLICIES)}."
            )

        values: dict[YearMonth, Decimal] = {}
        for point in points:
            if point.index_value <= 0:
                logger.warning(
                    "Skipping non-positive inflation index value %s for %s",
                    point.index_value,
                    point.period,
                )
                continue
            values[point.period] = Decimal(point.index_value)

        self._fallback_policy = fallback_policy
        self._values = values
        self._periods: list[YearMonth] = sorted(values)

    def __len__(self) -> int:
        return len(self._periods)

    @property
    def fallback_policy(self) -> str:
        return self._fallback_policy

    @property
    def current_period(self) -> YearMonth:
        """Most recent period with an index value."""
        if not self._periods:
            raise MissingInflationIndexError(None, "The inflation index table is empty.")
        return self._periods[-1]

    def index_for(self, period: YearMonth) -> Decimal:
        """
        Resolve the index value for *period* under the fallback policy.

        Raises
        ------
        MissingInflationIndexError
            When no value resolves.
        """
        exact = self._values.get(period)
        if exact is not None:
            return exact

        if self._fallback_policy == FALLBACK_NEAREST_PRIOR:
            position = bisect.bisect_left(self._periods, period)
            if position > 0:
                prior = self._periods[position - 1]
                logger.debug("Inflation index for %s resolved from prior month %s", period, prior)
                return self._values[prior]

        raise MissingInflationIndexError(period)

    def ratio(self, from_period: YearMonth, to_period: YearMonth) -> Decimal:
        """
        Adjustment ratio ``index(to_period) / index(from_period)``.
        """
        if from_period == to_period:
            return Decimal(1)
        return self.index_for(to_period) / self.index_for(from_period)

    def adjust(
        self,
        amount: Decimal,
        sale_date: date | datetime,
        target: YearMonth | None = None,
    ) -> Decimal:
        """
        Restate a nominal *amount* from *sale_date*'s month to *target*.

        *target* defaults to :attr:`current_period`.  The multiplication is
        applied before the division so an amount already at the target
        period comes back unchanged.
        """
        amount = Decimal(amount)
        if amount < 0:
            raise ValueError(f"Cannot adjust negative amount {amount}.")

        source = YearMonth.from_date(sale_date)
        target_period = target if target is not None else self.current_period
        if source == target_period:
            return amount
        return amount * self.index_for(target_period) / self.index_for(source)
