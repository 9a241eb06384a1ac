"""
tests/test_performance_and_pagination.py

Unit tests for the performance factor and page windows.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from analytics.pagination import paginate
from analytics.performance import performance_factor

LOW = Decimal(1000)
HIGH = Decimal(2000)


# ---------------------------------------------------------------------------
# Performance factor
# ---------------------------------------------------------------------------


class TestPerformanceFactor:
    def test_hammer_at_low_is_zero(self) -> None:
        assert performance_factor(LOW, LOW, HIGH) == Decimal(0)

    def test_hammer_at_high_is_one(self) -> None:
        assert performance_factor(HIGH, LOW, HIGH) == Decimal(1)

    def test_midpoint(self) -> None:
        assert performance_factor(Decimal(1500), LOW, HIGH) == Decimal("0.5")

    def test_below_low_is_negative(self) -> None:
        assert performance_factor(LOW - 1, LOW, HIGH) < 0

    def test_above_high_exceeds_one(self) -> None:
        assert performance_factor(HIGH + 1, LOW, HIGH) > 1

    @pytest.mark.parametrize("low, high", [(Decimal(10), Decimal(10)), (Decimal(20), Decimal(10)), (Decimal(0), Decimal(0))])
    def test_empty_or_inverted_band_is_undefined(self, low: Decimal, high: Decimal) -> None:
        assert performance_factor(Decimal(15), low, high) is None


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPaginate:
    def test_total_pages_rounds_up(self) -> None:
        assert paginate(250, 1, 100).total_pages == 3

    @pytest.mark.parametrize("page", [1, 2])
    def test_pages_before_last_announce_next_page(self, page: int) -> None:
        window = paginate(250, page, 100)
        assert window.has_more_results is True
        assert window.next_page_instructions() == (
            f"To get the next page of results, call this tool again with page={page + 1}."
        )
        assert window.merge_instructions() is None

    def test_last_page_of_many_asks_for_merge(self) -> None:
        window = paginate(250, 3, 100)
        assert window.has_more_results is False
        assert window.next_page_instructions() is None
        merge = window.merge_instructions()
        assert merge is not None
        assert "page 3 of 3" in merge
        assert "merge all timeSeries arrays" in merge

    def test_single_page_has_no_continuation(self) -> None:
        window = paginate(50, 1, 100)
        assert window.total_pages == 1
        assert window.next_page_instructions() is None
        assert window.merge_instructions() is None

    def test_skip_and_limit(self) -> None:
        window = paginate(250, 3, 100)
        assert (window.skip, window.limit) == (200, 100)

    @pytest.mark.parametrize("page", [0, -5])
    def test_non_positive_page_is_first_page(self, page: int) -> None:
        window = paginate(250, page, 100)
        assert window.current_page == 1
        assert window.skip == 0

    def test_page_past_end_is_empty_without_continuation(self) -> None:
        window = paginate(250, 7, 100)
        assert window.skip >= 250
        assert window.has_more_results is False
        assert window.next_page_instructions() is None
        assert window.merge_instructions() is None

    def test_no_rows(self) -> None:
        window = paginate(0, 1, 100)
        assert window.total_pages == 0
        assert window.has_more_results is False
        assert window.merge_instructions() is None

    def test_invalid_page_size_raises(self) -> None:
        with pytest.raises(ValueError):
            paginate(10, 1, 0)
