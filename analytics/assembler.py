"""
analytics/assembler.py

Composes the analytics primitives into tool responses.

    sale records ──► inflation adjust ──► monthly buckets ──► rolling average
                           │                    ▲
                           └─► size brackets ───┘ (one shared month axis)

Every method takes records that already passed the caller's filter and
returns one of the response envelopes in ``app.schemas.analytics``.  No I/O
happens here; the inflation index table is handed in pre-loaded.
"""

from __future__ import annotations

import logging
from typing import Sequence

from analytics.brackets import SizeBracket, classify
from analytics.inflation import InflationIndexTable
from analytics.monthly import MonthlyObservation, YearMonth, bucket_monthly, month_span
from analytics.pagination import PageWindow
from analytics.performance import performance_factor
from analytics.rolling import DEFAULT_WINDOW_MONTHS, rolling_average
from app.domain.artwork_sales import SaleRecord
from app.schemas.analytics import (
    BracketedPoint,
    BracketedResponse,
    BracketValue,
    HammerPerAreaSalePoint,
    HammerPriceSalePoint,
    PaginatedResponse,
    PerformanceSalePoint,
    RollingHammerPricePoint,
    RollingValuePoint,
    SizeBreakdown,
    TimeSeriesResponse,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Static descriptions (identical on every response of a given tool)
# ---------------------------------------------------------------------------

HAMMER_PRICE_DESCRIPTION = (
    "HammerPrice is nominal at sale date. HammerPriceInflationAdjusted uses the ECB HICP "
    "monthly index to adjust to the most recent published month's prices."
)

HAMMER_PER_AREA_DESCRIPTION = (
    "HammerPricePerArea = HammerPrice/(height*width). Inflation-adjusted uses ECB HICP to "
    "convert price to today's value before dividing by area. Sales without a positive "
    "height and width are left out."
)

PERFORMANCE_DESCRIPTION = (
    "Performance factor = (HammerPrice - LowEstimate) / (HighEstimate - LowEstimate): "
    "0-1 if within estimate range, >1 if above high estimate, <0 if below low estimate. "
    "Sales whose high estimate does not exceed the low estimate are left out."
)

HAMMER_PRICE_ROLLING_DESCRIPTION = (
    "Each monthly point represents the 12-month rolling average of (a) average monthly "
    "hammer price and (b) average monthly inflation-adjusted hammer price, weighted by the "
    "number of sales per month. Months without sales are included; the rolling values are "
    "null until at least one sale falls inside the window."
)

HAMMER_PER_AREA_ROLLING_DESCRIPTION = (
    "Three size brackets based on area (height×width), with cut points at the tertiles of "
    "the matching sales: Small covers the smallest third, Large the largest third. Each "
    "series shows 12-month rolling averages of inflation-adjusted hammer price per area, "
    "one point per month on an axis shared by all brackets. See 'brackets' and "
    "'sizeBreakdown' for this result's thresholds."
)

PRICE_VS_ESTIMATE_ROLLING_DESCRIPTION = """Each monthly point represents the 12-month rolling average of the 'position-in-estimate-range' value.

The 'position-in-estimate-range' value represents the normalized position of the hammer price within the auction's estimate band.

It is defined as:
(Hammer – LowEstimate) / (HighEstimate – LowEstimate)

A value of:
• 0.0 → hammer equals the low estimate
• 1.0 → hammer equals the high estimate
• values <0 mean below low estimate
• values >1 mean above high estimate

Example: a value of 0.34 means the hammer was 34% of the way from the low to the high estimate — i.e., slightly above the low estimate but below the midpoint."""

NO_DATA_DESCRIPTION = "No data found for the specified filters."
NO_AREA_DESCRIPTION = "No sales with valid area data found."
ARTIST_REQUIRED_DESCRIPTION = "Artist ID is required."


def _month_axis(records: Sequence[SaleRecord]) -> list[YearMonth]:
    months = [YearMonth.from_date(record.sale_date) for record in records]
    return month_span(min(months), max(months))


class SeriesAssembler:
    """
    Builds per-sale listings and rolling monthly series from sale records.

    Parameters
    ----------
    inflation:
        Index table used for every inflation adjustment in this request.
    window_months:
        Rolling window length.
    """

    def __init__(
        self,
        inflation: InflationIndexTable,
        *,
        window_months: int = DEFAULT_WINDOW_MONTHS,
    ) -> None:
        self._inflation = inflation
        self._window_months = window_months

    # ------------------------------------------------------------------
    # Paginated per-sale listings
    # ------------------------------------------------------------------

    def hammer_price_listing(
        self,
        records: Sequence[SaleRecord],
        page: PageWindow,
    ) -> PaginatedResponse[HammerPriceSalePoint]:
        points: list[HammerPriceSalePoint] = []
        for record in records:
            adjusted = self._inflation.adjust(record.hammer_price, record.sale_date)
            area = record.area
            points.append(
                HammerPriceSalePoint(
                    time=record.sale_date,
                    title=record.name,
                    category=record.category,
                    technique=record.technique,
                    year_created=record.year_created,
                    sold=record.sold,
                    hammer_price=record.hammer_price,
                    hammer_price_inflation_adjusted=adjusted,
                    hammer_price_per_area=record.hammer_price / area if area else None,
                    hammer_price_per_area_inflation_adjusted=adjusted / area if area else None,
                )
            )
        return self._page(points, page, HAMMER_PRICE_DESCRIPTION)

    def hammer_per_area_listing(
        self,
        records: Sequence[SaleRecord],
        page: PageWindow,
    ) -> PaginatedResponse[HammerPerAreaSalePoint]:
        points: list[HammerPerAreaSalePoint] = []
        for record in records:
            area = record.area
            if area is None:
                continue
            adjusted = self._inflation.adjust(record.hammer_price, record.sale_date)
            points.append(
                HammerPerAreaSalePoint(
                    time=record.sale_date,
                    category=record.category,
                    technique=record.technique,
                    year_created=record.year_created,
                    sold=record.sold,
                    area=area,
                    hammer_price_per_area_inflation_adjusted=adjusted / area,
                )
            )
        return self._page(points, page, HAMMER_PER_AREA_DESCRIPTION)

    def performance_listing(
        self,
        records: Sequence[SaleRecord],
        page: PageWindow,
    ) -> PaginatedResponse[PerformanceSalePoint]:
        points: list[PerformanceSalePoint] = []
        for record in records:
            factor = performance_factor(record.hammer_price, record.low_estimate, record.high_estimate)
            if factor is None:
                continue
            points.append(
                PerformanceSalePoint(
                    time=record.sale_date,
                    category=record.category,
                    technique=record.technique,
                    year_created=record.year_created,
                    sold=record.sold,
                    hammer_price=record.hammer_price,
                    height=record.height,
                    width=record.width,
                    area=record.area,
                    performance_factor=factor,
                )
            )
        return self._page(points, page, PERFORMANCE_DESCRIPTION)

    @staticmethod
    def _page(points: list, page: PageWindow, description: str) -> PaginatedResponse:
        return PaginatedResponse(
            time_series=points,
            count=len(points),
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            has_more_results=page.has_more_results,
            next_page_instructions=page.next_page_instructions(),
            merge_instructions=page.merge_instructions(),
            description=description,
        )

    # ------------------------------------------------------------------
    # Rolling monthly series
    # ------------------------------------------------------------------

    def hammer_price_rolling(
        self,
        records: Sequence[SaleRecord],
    ) -> TimeSeriesResponse[RollingHammerPricePoint]:
        """
        Nominal and inflation-adjusted rolling hammer price on one month axis.
        """
        if not records:
            return TimeSeriesResponse.empty(NO_DATA_DESCRIPTION)

        axis = _month_axis(records)
        nominal = bucket_monthly(
            (MonthlyObservation(r.sale_date, r.hammer_price) for r in records),
            months=axis,
        )
        adjusted = bucket_monthly(
            (
                MonthlyObservation(r.sale_date, self._inflation.adjust(r.hammer_price, r.sale_date))
                for r in records
            ),
            months=axis,
        )
        rolling_nominal = rolling_average(nominal, window=self._window_months)
        rolling_adjusted = rolling_average(adjusted, window=self._window_months)

        points = [
            RollingHammerPricePoint(
                time=nom.month.first_day(),
                count_in_window=nom.count_in_window,
                rolling12m_hammer_price=nom.value,
                rolling12m_hammer_price_inflation_adjusted=adj.value,
            )
            for nom, adj in zip(rolling_nominal, rolling_adjusted)
        ]
        return TimeSeriesResponse[RollingHammerPricePoint](
            time_series=points,
            count=len(points),
            description=HAMMER_PRICE_ROLLING_DESCRIPTION,
        )

    def hammer_per_area_rolling_by_bracket(
        self,
        records: Sequence[SaleRecord],
    ) -> BracketedResponse | TimeSeriesResponse:
        """
        Rolling inflation-adjusted hammer price per area, one series per size
        bracket.  Records without an area are dropped before the thresholds
        and the shared month axis are computed.
        """
        if not records:
            return TimeSeriesResponse.empty(NO_DATA_DESCRIPTION)

        with_area = [(record, record.area) for record in records if record.area is not None]
        if not with_area:
            return TimeSeriesResponse.empty(NO_AREA_DESCRIPTION)

        thresholds = classify(area for _, area in with_area)
        labels = thresholds.range_labels()
        axis = _month_axis([record for record, _ in with_area])

        observations: dict[SizeBracket, list[MonthlyObservation]] = {
            bracket: [] for bracket in SizeBracket
        }
        for record, area in with_area:
            adjusted = self._inflation.adjust(record.hammer_price, record.sale_date)
            observations[thresholds.bracket_for(area)].append(
                MonthlyObservation(record.sale_date, adjusted / area)
            )

        rolling = {
            bracket: rolling_average(
                bucket_monthly(observations[bracket], months=axis),
                window=self._window_months,
            )
            for bracket in SizeBracket
        }

        points = [
            BracketedPoint(
                time=month.first_day(),
                brackets={
                    bracket: BracketValue(
                        value=rolling[bracket][i].value,
                        count_in_window=rolling[bracket][i].count_in_window,
                        range=labels[bracket],
                    )
                    for bracket in SizeBracket
                },
            )
            for i, month in enumerate(axis)
        ]

        sales_per_bracket = {bracket: len(observations[bracket]) for bracket in SizeBracket}
        logger.debug(
            "Bracketed %d sales over %d months: %s",
            len(with_area),
            len(axis),
            {bracket.value: n for bracket, n in sales_per_bracket.items()},
        )

        return BracketedResponse(
            time_series=points,
            count=len(points),
            description=HAMMER_PER_AREA_ROLLING_DESCRIPTION,
            brackets=labels,
            size_breakdown=SizeBreakdown(
                small_max=thresholds.small_max,
                medium_max=thresholds.medium_max,
                ranges=labels,
                sales=sales_per_bracket,
            ),
        )

    def price_vs_estimate_rolling(
        self,
        records: Sequence[SaleRecord],
    ) -> TimeSeriesResponse[RollingValuePoint]:
        """
        Rolling position-in-estimate-range.  The month axis spans all
        *records*; sales without a usable estimate band add nothing.
        """
        if not records:
            return TimeSeriesResponse.empty(NO_DATA_DESCRIPTION)

        observations: list[MonthlyObservation] = []
        for record in records:
            factor = performance_factor(record.hammer_price, record.low_estimate, record.high_estimate)
            if factor is not None:
                observations.append(MonthlyObservation(record.sale_date, factor))

        monthly = bucket_monthly(observations, months=_month_axis(records))
        points = [
            RollingValuePoint(
                time=point.month.first_day(),
                value=point.value,
                count_in_window=point.count_in_window,
            )
            for point in rolling_average(monthly, window=self._window_months)
        ]
        return TimeSeriesResponse[RollingValuePoint](
            time_series=points,
            count=len(points),
            description=PRICE_VS_ESTIMATE_ROLLING_DESCRIPTION,
        )
