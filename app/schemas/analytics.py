"""
app/schemas/analytics.py

Response variants produced by the sales analytics tools.

Three envelopes cover every tool:

    TimeSeriesResponse — one aligned monthly (or empty) series
    PaginatedResponse  — one page of per-sale points plus continuation text
    BracketedResponse  — Small / Medium / Large series sharing one month axis

All models serialise with camelCase keys (``timeSeries``, ``countInWindow``)
and numbers for Decimal fields.  The ``kind`` tag is for Python callers and
is never written to the wire.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_serializer
from pydantic.alias_generators import to_camel

from analytics.brackets import SizeBracket

JsonDecimal = Annotated[
    Decimal,
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]

PointT = TypeVar("PointT")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Per-sale points (paginated listings)
# ---------------------------------------------------------------------------


class HammerPriceSalePoint(CamelModel):
    time: datetime
    title: str | None = None
    category: str | None = None
    technique: str | None = None
    year_created: int | None = None
    sold: bool
    hammer_price: JsonDecimal
    hammer_price_inflation_adjusted: JsonDecimal
    hammer_price_per_area: JsonDecimal | None = None
    hammer_price_per_area_inflation_adjusted: JsonDecimal | None = None


class HammerPerAreaSalePoint(CamelModel):
    time: datetime
    category: str | None = None
    technique: str | None = None
    year_created: int | None = None
    sold: bool
    area: JsonDecimal
    hammer_price_per_area_inflation_adjusted: JsonDecimal | None = None


class PerformanceSalePoint(CamelModel):
    time: datetime
    category: str | None = None
    technique: str | None = None
    year_created: int | None = None
    sold: bool
    hammer_price: JsonDecimal
    height: JsonDecimal
    width: JsonDecimal
    area: JsonDecimal | None = None
    performance_factor: JsonDecimal


# ---------------------------------------------------------------------------
# Monthly points (rolling series)
# ---------------------------------------------------------------------------


class RollingValuePoint(CamelModel):
    time: date
    value: JsonDecimal | None = None
    count_in_window: int = Field(..., ge=0)


class RollingHammerPricePoint(CamelModel):
    time: date
    count_in_window: int = Field(..., ge=0)
    rolling12m_hammer_price: JsonDecimal | None = Field(
        default=None, alias="rolling12mHammerPrice"
    )
    rolling12m_hammer_price_inflation_adjusted: JsonDecimal | None = Field(
        default=None, alias="rolling12mHammerPriceInflationAdjusted"
    )


class BracketValue(CamelModel):
    value: JsonDecimal | None = None
    count_in_window: int = Field(..., ge=0)
    range: str


class BracketedPoint(CamelModel):
    time: date
    brackets: dict[SizeBracket, BracketValue]


class SizeBreakdown(CamelModel):
    small_max: JsonDecimal
    medium_max: JsonDecimal
    ranges: dict[SizeBracket, str]
    sales: dict[SizeBracket, int]


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class TimeSeriesResponse(CamelModel, Generic[PointT]):
    kind: Literal["time_series"] = Field(default="time_series", exclude=True)
    time_series: list[PointT] = Field(default_factory=list)
    count: int = Field(..., ge=0)
    description: str

    @classmethod
    def empty(cls, description: str) -> "TimeSeriesResponse[Any]":
        return cls(time_series=[], count=0, description=description)


class PaginatedResponse(CamelModel, Generic[PointT]):
    kind: Literal["paginated"] = Field(default="paginated", exclude=True)
    time_series: list[PointT] = Field(default_factory=list)
    count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    current_page: int = Field(..., ge=1)
    has_more_results: bool
    next_page_instructions: str | None = None
    merge_instructions: str | None = None
    description: str

    @model_serializer(mode="wrap")
    def _omit_absent_instructions(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        for key in (
            "next_page_instructions",
            "nextPageInstructions",
            "merge_instructions",
            "mergeInstructions",
        ):
            if key in data and data[key] is None:
                del data[key]
        return data


class BracketedResponse(CamelModel):
    kind: Literal["bracketed"] = Field(default="bracketed", exclude=True)
    time_series: list[BracketedPoint] = Field(default_factory=list)
    count: int = Field(..., ge=0)
    description: str
    brackets: dict[SizeBracket, str]
    size_breakdown: SizeBreakdown


AnalyticsResponse = TimeSeriesResponse[Any] | PaginatedResponse[Any] | BracketedResponse


# ---------------------------------------------------------------------------
# Tool catalogue
# ---------------------------------------------------------------------------


class ToolDefinition(CamelModel):
    name: str
    title: str
    description: str
    input_schema: dict[str, Any]
