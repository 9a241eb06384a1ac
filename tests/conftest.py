"""
tests/conftest.py

Shared fakes and factories for the analytics tests.  No database.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

import pytest

from analytics.inflation import InflationIndexPoint
from app.config import AnalyticsSettings, InflationSettings
from app.domain.artwork_sales import SaleFilter, SaleRecord
from app.services.sales_analytics_service import SalesAnalyticsService

ARTIST_ID = uuid.UUID("6f1c1e52-4a7e-4c53-9a51-0f3c2b0d7e11")


def make_sale(
    sale_date: str,
    hammer: str | int = 100,
    *,
    height: str | int = 10,
    width: str | int = 10,
    low: str | int = 0,
    high: str | int = 0,
    sold: bool = True,
    category: str | None = "Painting",
    artist_id: uuid.UUID | None = ARTIST_ID,
) -> SaleRecord:
    """Build a SaleRecord from a ``YYYY-MM-DD`` date and plain numbers."""
    return SaleRecord(
        sale_date=datetime.fromisoformat(sale_date).replace(tzinfo=timezone.utc),
        hammer_price=Decimal(str(hammer)),
        low_estimate=Decimal(str(low)),
        high_estimate=Decimal(str(high)),
        height=Decimal(str(height)),
        width=Decimal(str(width)),
        sold=sold,
        name=f"Lot {sale_date}",
        category=category,
        technique="Oil on canvas",
        currency="EUR",
        year_created=1960,
        artist_id=artist_id,
    )


def flat_index(first_year: int = 2019, last_year: int = 2022, value: str = "100") -> list[InflationIndexPoint]:
    return [
        InflationIndexPoint(year=year, month=month, index_value=Decimal(value))
        for year in range(first_year, last_year + 1)
        for month in range(1, 13)
    ]


class FakeSalesRepository:
    """
    In-memory stand-in for ArtworkSaleRepository.  Applies only the filter
    fields the tests exercise and records every filter it receives.
    """

    def __init__(self, sales: list[SaleRecord], categories: list[str] | None = None) -> None:
        self._sales = list(sales)
        self._categories = categories or sorted({s.category for s in sales if s.category})
        self.filters: list[SaleFilter] = []

    def _matching(self, sale_filter: SaleFilter) -> list[SaleRecord]:
        self.filters.append(sale_filter)
        result = self._sales
        if sale_filter.artist_id is not None:
            result = [s for s in result if s.artist_id == sale_filter.artist_id]
        if sale_filter.category:
            result = [s for s in result if s.category and sale_filter.category in s.category]
        if sale_filter.sold is not None:
            result = [s for s in result if s.sold is sale_filter.sold]
        return result

    def count(self, sale_filter: SaleFilter) -> int:
        return len(self._matching(sale_filter))

    def list_page(self, sale_filter: SaleFilter, *, skip: int, limit: int) -> list[SaleRecord]:
        ordered = sorted(self._matching(sale_filter), key=lambda s: s.sale_date, reverse=True)
        return ordered[skip : skip + limit]

    def list_all(self, sale_filter: SaleFilter) -> list[SaleRecord]:
        return sorted(self._matching(sale_filter), key=lambda s: s.sale_date)

    def list_categories(self) -> list[str]:
        return list(self._categories)


class FakeIndexSource:
    def __init__(self, points: list[InflationIndexPoint]) -> None:
        self._points = points
        self.loads = 0

    def load_points(self) -> list[InflationIndexPoint]:
        self.loads += 1
        return list(self._points)


@pytest.fixture()
def sale_factory() -> Callable[..., SaleRecord]:
    return make_sale


@pytest.fixture()
def build_service() -> Callable[..., SalesAnalyticsService]:
    """
    Factory: ``build_service(sales, index_points=None, page_size=1000)``.

    The returned service exposes its fakes as ``service.fake_sales`` and
    ``service.fake_index``.
    """

    def _build(
        sales: list[SaleRecord],
        index_points: list[InflationIndexPoint] | None = None,
        *,
        page_size: int = 1000,
        fallback_policy: str = "nearest_prior",
    ) -> SalesAnalyticsService:
        fake_sales = FakeSalesRepository(sales)
        fake_index = FakeIndexSource(flat_index() if index_points is None else index_points)
        service = SalesAnalyticsService(
            sales=fake_sales,
            index_source=fake_index,
            settings=AnalyticsSettings(page_size=page_size, rolling_window_months=12),
            inflation_settings=InflationSettings(fallback_policy=fallback_policy, refresh_enabled=False),
        )
        service.fake_sales = fake_sales  # type: ignore[attr-defined]
        service.fake_index = fake_index  # type: ignore[attr-defined]
        return service

    return _build
