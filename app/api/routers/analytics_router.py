"""
app/api/routers/analytics_router.py

Query-string endpoints for chart clients.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from analytics.inflation import MissingInflationIndexError
from app.api.dependencies import get_sales_analytics_service
from app.services.sales_analytics_service import SalesAnalyticsService
from app.tools.parameters import parse_sale_filter

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/hammer-per-area")
def get_hammer_per_area(
    request: Request,
    service: SalesAnalyticsService = Depends(get_sales_analytics_service),
) -> JSONResponse:
    """
    Paginated hammer price per area.  Accepts the same filters as the
    ``get_artwork_sales_hammer_per_area_timeseries`` tool as query
    parameters, in camelCase or snake_case.
    """

    sale_filter = parse_sale_filter(request.query_params)
    try:
        response = service.hammer_per_area_timeseries(sale_filter)
    except MissingInflationIndexError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    return JSONResponse(content=response.model_dump(mode="json", by_alias=True))


@router.get("/categories", response_model=list[str])
def get_categories(
    service: SalesAnalyticsService = Depends(get_sales_analytics_service),
) -> list[str]:
    return service.categories()
