"""
tests/test_inflation.py

Unit tests for the inflation index lookup and adjustment.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from analytics.inflation import (
    FALLBACK_STRICT,
    InflationIndexPoint,
    InflationIndexTable,
    MissingInflationIndexError,
)
from analytics.monthly import YearMonth


def _point(year: int, month: int, value: str) -> InflationIndexPoint:
    return InflationIndexPoint(year=year, month=month, index_value=Decimal(value))


@pytest.fixture()
def table() -> InflationIndexTable:
    return InflationIndexTable(
        [
            _point(2020, 1, "100"),
            _point(2020, 2, "101"),
            _point(2020, 4, "104"),
            _point(2024, 6, "125"),
        ]
    )


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_exact_match(self, table: InflationIndexTable) -> None:
        assert table.index_for(YearMonth(2020, 2)) == Decimal(101)

    def test_missing_month_uses_nearest_prior(self, table: InflationIndexTable) -> None:
        assert table.index_for(YearMonth(2020, 3)) == Decimal(101)

    def test_month_after_latest_uses_latest(self, table: InflationIndexTable) -> None:
        assert table.index_for(YearMonth(2024, 9)) == Decimal(125)

    def test_month_before_first_raises(self, table: InflationIndexTable) -> None:
        with pytest.raises(MissingInflationIndexError) as excinfo:
            table.index_for(YearMonth(2019, 12))
        assert excinfo.value.period == YearMonth(2019, 12)

    def test_strict_policy_requires_exact_month(self) -> None:
        strict = InflationIndexTable([_point(2020, 1, "100"), _point(2020, 3, "102")], fallback_policy=FALLBACK_STRICT)
        assert strict.index_for(YearMonth(2020, 3)) == Decimal(102)
        with pytest.raises(MissingInflationIndexError):
            strict.index_for(YearMonth(2020, 2))

    def test_unknown_policy_raises(self) -> None:
        with pytest.raises(ValueError):
            InflationIndexTable([], fallback_policy="interpolate")

    def test_current_period_is_latest_point(self, table: InflationIndexTable) -> None:
        assert table.current_period == YearMonth(2024, 6)

    def test_empty_table_has_no_current_period(self) -> None:
        with pytest.raises(MissingInflationIndexError):
            InflationIndexTable([]).current_period

    def test_non_positive_values_are_skipped(self) -> None:
        table = InflationIndexTable([_point(2020, 1, "100"), _point(2020, 2, "0"), _point(2020, 3, "-4")])
        assert len(table) == 1
        assert table.current_period == YearMonth(2020, 1)


# ---------------------------------------------------------------------------
# Adjustment
# ---------------------------------------------------------------------------


class TestAdjust:
    def test_scales_to_current_period(self, table: InflationIndexTable) -> None:
        adjusted = table.adjust(Decimal(100), date(2020, 1, 15))
        assert adjusted == Decimal(100) * Decimal(125) / Decimal(100)

    def test_amount_at_current_period_is_unchanged(self, table: InflationIndexTable) -> None:
        amount = Decimal("1234.5678")
        assert table.adjust(amount, datetime(2024, 6, 30, tzinfo=timezone.utc)) == amount

    def test_explicit_target(self, table: InflationIndexTable) -> None:
        adjusted = table.adjust(Decimal(200), date(2020, 1, 1), target=YearMonth(2020, 4))
        assert adjusted == Decimal(208)

    def test_ratio(self, table: InflationIndexTable) -> None:
        assert table.ratio(YearMonth(2020, 1), YearMonth(2020, 4)) == Decimal("1.04")
        assert table.ratio(YearMonth(2020, 1), YearMonth(2020, 1)) == Decimal(1)

    def test_zero_amount(self, table: InflationIndexTable) -> None:
        assert table.adjust(Decimal(0), date(2020, 2, 1)) == Decimal(0)

    def test_negative_amount_raises(self, table: InflationIndexTable) -> None:
        with pytest.raises(ValueError):
            table.adjust(Decimal(-1), date(2020, 2, 1))

    def test_unresolvable_sale_month_raises(self, table: InflationIndexTable) -> None:
        with pytest.raises(MissingInflationIndexError):
            table.adjust(Decimal(100), date(2010, 5, 1))

    def test_no_rounding(self) -> None:
        table = InflationIndexTable([_point(2020, 1, "3"), _point(2020, 2, "7")])
        adjusted = table.adjust(Decimal(1), date(2020, 1, 1))
        assert adjusted == Decimal(7) / Decimal(3)
