"""
analytics/rolling.py

Trailing rolling averages over a contiguous monthly series.

Formula (count-weighted, default)::

    value_i = Σ avg_j · count_j / Σ count_j      for j in [max(0, i-w+1), i]

The window is truncated, not padded, at the start of the series, so the
first ``w-1`` points average over fewer months.  A window whose total count
is zero has no value (``None``): no sales have accumulated yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from analytics.monthly import MonthlyBucket, YearMonth

DEFAULT_WINDOW_MONTHS = 12


@dataclass(frozen=True)
class RollingPoint:
    month: YearMonth
    value: Decimal | None
    count_in_window: int


def rolling_average(
    monthly: Sequence[MonthlyBucket],
    window: int = DEFAULT_WINDOW_MONTHS,
    weight_by_count: bool = True,
) -> list[RollingPoint]:
    """
    Compute one trailing-window point per month of *monthly*.

    Parameters
    ----------
    monthly:
        Contiguous ascending buckets, empty months included.
    window:
        Window length in months; must be positive.
    weight_by_count:
        ``True`` weights each month's average by its sale count.  ``False``
        takes the plain mean of the monthly averages in the window, empty
        months included as zeros; callers wanting to skip empty months must
        filter them out first.

    Returns
    -------
    list[RollingPoint]
        Same length as *monthly*, positionally aligned.
    """
    if window <= 0:
        raise ValueError(f"window must be positive, got {window}.")

    points: list[RollingPoint] = []
    for i, bucket in enumerate(monthly):
        in_window = monthly[max(0, i - window + 1) : i + 1]
        count_sum = sum(b.count for b in in_window)

        value: Decimal | None
        if count_sum == 0:
            value = None
        elif weight_by_count:
            value = sum((b.average * b.count for b in in_window), Decimal(0)) / count_sum
        else:
            value = sum((b.average for b in in_window), Decimal(0)) / len(in_window)

        points.append(RollingPoint(month=bucket.month, value=value, count_in_window=count_sum))

    return points
