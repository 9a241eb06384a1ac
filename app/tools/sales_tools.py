"""
app/tools/sales_tools.py

The artwork sales analytics tools.

Listings (``*_timeseries``) return one point per sale, newest first, in
pages.  Rolling tools (``*_rolling_12m``) return one point per calendar
month over the full filtered set.
"""

from __future__ import annotations

from app.domain.artwork_sales import SaleFilter
from app.schemas.analytics import AnalyticsResponse
from app.services.sales_analytics_service import SalesAnalyticsService
from app.tools.base import AnalyticsTool
from app.tools.parameters import ALL_FILTER_FIELDS

_ROLLING_FILTER_FIELDS = tuple(field for field in ALL_FILTER_FIELDS if field != "page")
_ARTIST_FILTER_FIELDS = ("artist_id", "category")


class HammerPriceTimeseriesTool(AnalyticsTool):
    name = "get_artwork_sales_hammer_price_timeseries"
    title = "Artwork Sales Hammer Price Time Series"
    description = (
        "Returns a time series of artwork hammer prices with inflation-adjusted values "
        "(to the latest index month's prices) using ECB HICP."
    )

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.hammer_price_timeseries(sale_filter)


class HammerPerAreaTimeseriesTool(AnalyticsTool):
    name = "get_artwork_sales_hammer_per_area_timeseries"
    title = "Artwork Sales Hammer Price per Area Time Series"
    description = (
        "Returns inflation-adjusted hammer price per area for each sale. "
        "Area = height * width in square cm."
    )

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.hammer_per_area_timeseries(sale_filter)


class PerformanceTimeseriesTool(AnalyticsTool):
    name = "get_artwork_sales_performance_timeseries"
    title = "Artwork Sales Performance Time Series"
    description = (
        "Returns a time series showing how hammer prices performed relative to estimate "
        "ranges. Performance factor: 0-1 if within range, >1 if above ceiling, <0 if below floor."
    )

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.performance_timeseries(sale_filter)


class HammerPriceRollingTool(AnalyticsTool):
    name = "get_artwork_sales_hammer_price_rolling_12m"
    title = "Artwork Sales Hammer Price 12-Month Rolling Average"
    description = (
        "Returns a monthly series where each point is the 12-month rolling average of "
        "hammer prices and inflation-adjusted hammer prices."
    )
    filter_fields = _ROLLING_FILTER_FIELDS

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.hammer_price_rolling(sale_filter)


class HammerPerAreaRollingTool(AnalyticsTool):
    name = "get_artwork_sales_hammer_per_area_rolling_12m"
    title = "Artwork Sales Hammer Price per Area 12-Month Rolling Average by Size"
    description = (
        "Returns a monthly series where each point is the 12-month rolling average of "
        "inflation-adjusted hammer price per area (height*width), split into Small, Medium "
        "and Large size brackets. Sold works of one artist only."
    )
    filter_fields = _ARTIST_FILTER_FIELDS
    required_fields = ("artist_id",)

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.hammer_per_area_rolling(sale_filter)


class PriceVsEstimateRollingTool(AnalyticsTool):
    name = "get_artwork_sales_price_vs_estimate_rolling_12m"
    title = "Artwork Sales Price vs Estimate 12-Month Rolling Average"
    description = (
        "Returns a monthly series where each point is the 12-month rolling average of the "
        "hammer price's position within the estimate range. Sold works of one artist only."
    )
    filter_fields = _ARTIST_FILTER_FIELDS
    required_fields = ("artist_id",)

    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        return service.price_vs_estimate_rolling(sale_filter)


SALES_TOOLS: tuple[type[AnalyticsTool], ...] = (
    HammerPriceTimeseriesTool,
    HammerPerAreaTimeseriesTool,
    PerformanceTimeseriesTool,
    HammerPriceRollingTool,
    HammerPerAreaRollingTool,
    PriceVsEstimateRollingTool,
)
