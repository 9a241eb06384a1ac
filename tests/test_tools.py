"""
tests/test_tools.py

Tool registry and tool execution against SalesAnalyticsService with
in-memory repositories.
"""

from __future__ import annotations

import pytest

from analytics.assembler import ARTIST_REQUIRED_DESCRIPTION, HAMMER_PER_AREA_ROLLING_DESCRIPTION
from analytics.inflation import MissingInflationIndexError
from app.schemas.analytics import BracketedResponse, PaginatedResponse, TimeSeriesResponse
from app.tools import ToolInvocationError, ToolNotFoundError, ToolRegistry
from tests.conftest import ARTIST_ID, make_sale

HAMMER_PRICE = "get_artwork_sales_hammer_price_timeseries"
PER_AREA = "get_artwork_sales_hammer_per_area_timeseries"
PERFORMANCE = "get_artwork_sales_performance_timeseries"
HAMMER_ROLLING = "get_artwork_sales_hammer_price_rolling_12m"
PER_AREA_ROLLING = "get_artwork_sales_hammer_per_area_rolling_12m"
ESTIMATE_ROLLING = "get_artwork_sales_price_vs_estimate_rolling_12m"


@pytest.fixture()
def registry() -> ToolRegistry:
    return ToolRegistry()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_builtin_tools(self, registry: ToolRegistry) -> None:
        assert sorted(registry.names) == sorted(
            [HAMMER_PRICE, PER_AREA, PERFORMANCE, HAMMER_ROLLING, PER_AREA_ROLLING, ESTIMATE_ROLLING]
        )

    def test_unknown_tool(self, registry: ToolRegistry) -> None:
        with pytest.raises(ToolNotFoundError) as excinfo:
            registry.get("get_everything")
        assert HAMMER_PRICE in str(excinfo.value)

    def test_artist_tools_require_artist(self, registry: ToolRegistry) -> None:
        for name in (PER_AREA_ROLLING, ESTIMATE_ROLLING):
            schema = registry.get(name).input_schema
            assert schema["required"] == ["artist_id"]
            assert set(schema["properties"]) == {"artist_id", "category"}

    def test_rolling_tool_has_no_page(self, registry: ToolRegistry) -> None:
        assert "page" not in registry.get(HAMMER_ROLLING).input_schema["properties"]
        assert "page" in registry.get(HAMMER_PRICE).input_schema["properties"]

    def test_definitions_serialise_camel_case(self, registry: ToolRegistry) -> None:
        definition = registry.definitions()[0].model_dump(by_alias=True)
        assert set(definition) == {"name", "title", "description", "inputSchema"}


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class TestExecution:
    def test_non_object_arguments_rejected(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([])
        with pytest.raises(ToolInvocationError):
            registry.get(HAMMER_PRICE).execute(service, ["artistId"])

    def test_missing_arguments_mean_no_filter(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01"), make_sale("2020-02-01", sold=False)])
        response = registry.get(HAMMER_PRICE).execute(service, None)

        assert isinstance(response, PaginatedResponse)
        assert response.total_count == 2

    def test_listing_is_newest_first(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01"), make_sale("2021-06-01"), make_sale("2020-08-01")])
        response = registry.get(HAMMER_PRICE).execute(service, {})

        times = [point.time for point in response.time_series]
        assert times == sorted(times, reverse=True)

    def test_pages_through_results(self, registry: ToolRegistry, build_service) -> None:
        sales = [make_sale(f"2020-0{month}-01") for month in range(1, 6)]
        service = build_service(sales, page_size=2)
        tool = registry.get(HAMMER_PRICE)

        first = tool.execute(service, {"page": 1})
        last = tool.execute(service, {"page": 3})

        assert first.total_pages == 3
        assert first.has_more_results is True
        assert first.next_page_instructions.endswith("page=2.")
        assert last.count == 1
        assert last.merge_instructions is not None

    def test_page_past_end_is_empty(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01")], page_size=2)
        response = registry.get(HAMMER_PRICE).execute(service, {"page": 9})

        assert response.count == 0
        assert response.time_series == []
        assert response.has_more_results is False

    def test_performance_skips_index_load(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01", 1500, low=1000, high=2000)])
        response = registry.get(PERFORMANCE).execute(service, {})

        assert response.count == 1
        assert service.fake_index.loads == 0

    def test_missing_index_propagates(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01")], index_points=[])
        with pytest.raises(MissingInflationIndexError):
            registry.get(HAMMER_ROLLING).execute(service, {})


# ---------------------------------------------------------------------------
# Artist-scoped rolling tools
# ---------------------------------------------------------------------------


class TestArtistTools:
    @pytest.mark.parametrize("name", [PER_AREA_ROLLING, ESTIMATE_ROLLING])
    def test_artist_required(self, registry: ToolRegistry, build_service, name: str) -> None:
        service = build_service([make_sale("2020-01-01")])
        response = registry.get(name).execute(service, {"category": "Painting"})

        assert isinstance(response, TimeSeriesResponse)
        assert response.count == 0
        assert response.description == ARTIST_REQUIRED_DESCRIPTION
        assert service.fake_sales.filters == []

    def test_only_sold_works_and_other_filters_ignored(self, registry: ToolRegistry, build_service) -> None:
        service = build_service(
            [
                make_sale("2020-01-01", 100),
                make_sale("2020-02-01", 100_000, sold=False),
            ]
        )
        response = registry.get(PER_AREA_ROLLING).execute(
            service, {"artistId": str(ARTIST_ID), "name": "Lot", "minHammerPrice": 500}
        )

        applied = service.fake_sales.filters[-1]
        assert applied.sold is True
        assert applied.name is None
        assert applied.min_hammer_price is None
        assert isinstance(response, BracketedResponse)
        assert response.count == 1

    def test_description_is_static(self, registry: ToolRegistry, build_service) -> None:
        small = build_service([make_sale("2020-01-01", 100, height=5, width=5)])
        large = build_service(
            [
                make_sale("2019-03-01", 900, height=80, width=120),
                make_sale("2021-07-01", 400, height=20, width=30),
                make_sale("2022-02-01", 50, height=10, width=10),
            ]
        )
        tool = registry.get(PER_AREA_ROLLING)
        arguments = {"artistId": str(ARTIST_ID)}

        first = tool.execute(small, arguments)
        second = tool.execute(large, arguments)

        assert first.description == second.description == HAMMER_PER_AREA_ROLLING_DESCRIPTION
        assert first.brackets != second.brackets

    def test_other_artist_has_no_data(self, registry: ToolRegistry, build_service) -> None:
        service = build_service([make_sale("2020-01-01")])
        response = registry.get(ESTIMATE_ROLLING).execute(
            service, {"artist_id": "00000000-0000-0000-0000-000000000001"}
        )
        assert response.count == 0
        assert response.description == "No data found for the specified filters."


def test_categories(build_service) -> None:
    service = build_service([make_sale("2020-01-01", category="Print"), make_sale("2020-02-01")])
    assert service.categories() == ["Painting", "Print"]
