"""
app/services package marker.
"""

from app.services.inflation_refresh_service import (
    InflationRefreshService,
    get_inflation_refresh_service,
)
from app.services.sales_analytics_service import SalesAnalyticsService

__all__ = [
    "InflationRefreshService",
    "get_inflation_refresh_service",
    "SalesAnalyticsService",
]
