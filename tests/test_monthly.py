"""
tests/test_monthly.py

Unit tests for calendar-month bucketing.

Coverage
--------
- YearMonth ordering, stepping and validation
- month_span contiguity and year rollover
- Gap filling with zero-activity buckets
- Mean (and weighted mean) per month
- Explicit shared month axis
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from analytics.monthly import MonthlyObservation, YearMonth, bucket_monthly, month_span


def _obs(day: str, value: str, weight: str = "1") -> MonthlyObservation:
    return MonthlyObservation(date.fromisoformat(day), Decimal(value), Decimal(weight))


# ---------------------------------------------------------------------------
# YearMonth
# ---------------------------------------------------------------------------


class TestYearMonth:
    def test_orders_chronologically(self) -> None:
        assert YearMonth(2020, 12) < YearMonth(2021, 1) < YearMonth(2021, 2)

    def test_next_rolls_over_year(self) -> None:
        assert YearMonth(2020, 12).next() == YearMonth(2021, 1)

    def test_from_datetime_truncates_to_month(self) -> None:
        assert YearMonth.from_date(datetime(2021, 3, 31, 23, 59)) == YearMonth(2021, 3)

    def test_first_day(self) -> None:
        assert YearMonth(2021, 2).first_day() == date(2021, 2, 1)

    def test_months_until(self) -> None:
        assert YearMonth(2020, 1).months_until(YearMonth(2021, 1)) == 12
        assert YearMonth(2021, 1).months_until(YearMonth(2020, 11)) == -2

    def test_str_is_zero_padded(self) -> None:
        assert str(YearMonth(2021, 3)) == "2021-03"

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month_raises(self, month: int) -> None:
        with pytest.raises(ValueError):
            YearMonth(2021, month)


# ---------------------------------------------------------------------------
# month_span
# ---------------------------------------------------------------------------


class TestMonthSpan:
    def test_single_month(self) -> None:
        assert month_span(YearMonth(2021, 5), YearMonth(2021, 5)) == [YearMonth(2021, 5)]

    def test_spans_year_boundary(self) -> None:
        span = month_span(YearMonth(2020, 11), YearMonth(2021, 2))
        assert span == [YearMonth(2020, 11), YearMonth(2020, 12), YearMonth(2021, 1), YearMonth(2021, 2)]

    def test_reversed_bounds_raise(self) -> None:
        with pytest.raises(ValueError):
            month_span(YearMonth(2021, 2), YearMonth(2021, 1))


# ---------------------------------------------------------------------------
# bucket_monthly
# ---------------------------------------------------------------------------


class TestBucketMonthly:
    def test_empty_input_returns_empty_list(self) -> None:
        assert bucket_monthly([]) == []

    def test_covers_every_month_between_first_and_last(self) -> None:
        buckets = bucket_monthly([_obs("2020-01-15", "10"), _obs("2021-03-02", "20")])
        first, last = YearMonth(2020, 1), YearMonth(2021, 3)
        assert len(buckets) == first.months_until(last) + 1
        months = [b.month for b in buckets]
        assert months == month_span(first, last)

    def test_empty_months_have_zero_average_and_count(self) -> None:
        buckets = bucket_monthly([_obs("2020-01-15", "10"), _obs("2020-03-02", "20")])
        gap = buckets[1]
        assert gap.month == YearMonth(2020, 2)
        assert gap.count == 0
        assert gap.average == Decimal(0)

    def test_input_order_does_not_matter(self) -> None:
        forward = bucket_monthly([_obs("2020-01-15", "10"), _obs("2020-03-02", "20")])
        backward = bucket_monthly([_obs("2020-03-02", "20"), _obs("2020-01-15", "10")])
        assert forward == backward

    def test_averages_within_month(self) -> None:
        buckets = bucket_monthly(
            [_obs("2020-01-01", "100"), _obs("2020-01-31", "300"), _obs("2020-01-10", "200")]
        )
        assert len(buckets) == 1
        assert buckets[0].average == Decimal(200)
        assert buckets[0].count == 3

    def test_weighted_mean_counts_records_not_weights(self) -> None:
        buckets = bucket_monthly([_obs("2020-01-01", "10", weight="3"), _obs("2020-01-02", "30", weight="1")])
        assert buckets[0].average == Decimal(15)
        assert buckets[0].count == 2

    def test_explicit_axis_pads_both_ends(self) -> None:
        axis = month_span(YearMonth(2020, 1), YearMonth(2020, 4))
        buckets = bucket_monthly([_obs("2020-02-10", "5")], months=axis)
        assert [b.count for b in buckets] == [0, 1, 0, 0]

    def test_explicit_axis_with_no_observations(self) -> None:
        axis = month_span(YearMonth(2020, 1), YearMonth(2020, 3))
        buckets = bucket_monthly([], months=axis)
        assert [b.count for b in buckets] == [0, 0, 0]

    def test_observation_outside_axis_raises(self) -> None:
        axis = [YearMonth(2020, 1)]
        with pytest.raises(ValueError):
            bucket_monthly([_obs("2020-02-01", "1")], months=axis)
