"""
app/services/sales_analytics_service.py

Request-level orchestration for the artwork sales analytics tools.

Each public method takes a :class:`SaleFilter`, reads what it needs through
the repositories, and hands plain records to :class:`SeriesAssembler`.
The inflation index is loaded once per call and looked up in memory.
"""

from __future__ import annotations

import logging
from typing import Protocol

from analytics.assembler import ARTIST_REQUIRED_DESCRIPTION, SeriesAssembler
from analytics.inflation import InflationIndexPoint, InflationIndexTable
from analytics.pagination import PageWindow, paginate
from app.config import AnalyticsSettings, InflationSettings
from app.domain.artwork_sales import SaleFilter, SaleRecord
from app.schemas.analytics import (
    BracketedResponse,
    HammerPerAreaSalePoint,
    HammerPriceSalePoint,
    PaginatedResponse,
    PerformanceSalePoint,
    RollingHammerPricePoint,
    RollingValuePoint,
    TimeSeriesResponse,
)

logger = logging.getLogger(__name__)


class SalesRepository(Protocol):
    def count(self, sale_filter: SaleFilter) -> int: ...

    def list_page(self, sale_filter: SaleFilter, *, skip: int, limit: int) -> list[SaleRecord]: ...

    def list_all(self, sale_filter: SaleFilter) -> list[SaleRecord]: ...

    def list_categories(self) -> list[str]: ...


class InflationIndexSource(Protocol):
    def load_points(self) -> list[InflationIndexPoint]: ...


class SalesAnalyticsService:
    """
    Serves the six sales analytics tools.

    Parameters
    ----------
    sales:
        Filtered read access to ``artwork_sales``.
    index_source:
        Read access to the monthly inflation index.
    settings, inflation_settings:
        Page size, rolling window and inflation fallback policy.
    """

    def __init__(
        self,
        *,
        sales: SalesRepository,
        index_source: InflationIndexSource,
        settings: AnalyticsSettings,
        inflation_settings: InflationSettings,
    ) -> None:
        self._sales = sales
        self._index_source = index_source
        self._settings = settings
        self._inflation_settings = inflation_settings

    # ------------------------------------------------------------------
    # Paginated per-sale listings
    # ------------------------------------------------------------------

    def hammer_price_timeseries(
        self, sale_filter: SaleFilter
    ) -> PaginatedResponse[HammerPriceSalePoint]:
        page, records = self._load_page(sale_filter)
        response = self._assembler().hammer_price_listing(records, page)
        self._log_page("hammer_price_timeseries", sale_filter, response)
        return response

    def hammer_per_area_timeseries(
        self, sale_filter: SaleFilter
    ) -> PaginatedResponse[HammerPerAreaSalePoint]:
        page, records = self._load_page(sale_filter)
        response = self._assembler().hammer_per_area_listing(records, page)
        self._log_page("hammer_per_area_timeseries", sale_filter, response)
        return response

    def performance_timeseries(
        self, sale_filter: SaleFilter
    ) -> PaginatedResponse[PerformanceSalePoint]:
        page, records = self._load_page(sale_filter)
        response = self._assembler(with_inflation=False).performance_listing(records, page)
        self._log_page("performance_timeseries", sale_filter, response)
        return response

    # ------------------------------------------------------------------
    # Rolling monthly series
    # ------------------------------------------------------------------

    def hammer_price_rolling(
        self, sale_filter: SaleFilter
    ) -> TimeSeriesResponse[RollingHammerPricePoint]:
        records = self._sales.list_all(sale_filter)
        response = self._assembler().hammer_price_rolling(records)
        self._log_series("hammer_price_rolling", sale_filter, len(records), response.count)
        return response

    def hammer_per_area_rolling(
        self, sale_filter: SaleFilter
    ) -> BracketedResponse | TimeSeriesResponse:
        """
        Size-bracketed rolling hammer price per area for one artist's sold
        works, optionally narrowed to a category.
        """
        if sale_filter.artist_id is None:
            return TimeSeriesResponse.empty(ARTIST_REQUIRED_DESCRIPTION)

        records = self._sales.list_all(self._artist_sold_filter(sale_filter))
        response = self._assembler().hammer_per_area_rolling_by_bracket(records)
        self._log_series("hammer_per_area_rolling", sale_filter, len(records), response.count)
        return response

    def price_vs_estimate_rolling(
        self, sale_filter: SaleFilter
    ) -> TimeSeriesResponse[RollingValuePoint]:
        if sale_filter.artist_id is None:
            return TimeSeriesResponse.empty(ARTIST_REQUIRED_DESCRIPTION)

        records = self._sales.list_all(self._artist_sold_filter(sale_filter))
        response = self._assembler(with_inflation=False).price_vs_estimate_rolling(records)
        self._log_series("price_vs_estimate_rolling", sale_filter, len(records), response.count)
        return response

    def categories(self) -> list[str]:
        return self._sales.list_categories()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _assembler(self, *, with_inflation: bool = True) -> SeriesAssembler:
        # Performance factors are unit-free, so those tools skip the index read.
        points = self._index_source.load_points() if with_inflation else []
        table = InflationIndexTable(
            points,
            fallback_policy=self._inflation_settings.fallback_policy,
        )
        return SeriesAssembler(table, window_months=self._settings.rolling_window_months)

    def _load_page(self, sale_filter: SaleFilter) -> tuple[PageWindow, list[SaleRecord]]:
        total = self._sales.count(sale_filter)
        page = paginate(total, sale_filter.page, self._settings.page_size)
        if page.skip >= total:
            return page, []
        return page, self._sales.list_page(sale_filter, skip=page.skip, limit=page.limit)

    @staticmethod
    def _artist_sold_filter(sale_filter: SaleFilter) -> SaleFilter:
        return SaleFilter(
            artist_id=sale_filter.artist_id,
            category=sale_filter.category,
            sold=True,
        )

    @staticmethod
    def _log_page(tool: str, sale_filter: SaleFilter, response: PaginatedResponse) -> None:
        logger.info(
            "%s artist_id=%s page=%d/%d points=%d total_count=%d",
            tool,
            sale_filter.artist_id,
            response.current_page,
            response.total_pages,
            response.count,
            response.total_count,
        )

    @staticmethod
    def _log_series(tool: str, sale_filter: SaleFilter, records: int, points: int) -> None:
        logger.info(
            "%s artist_id=%s records=%d months=%d",
            tool,
            sale_filter.artist_id,
            records,
            points,
        )
