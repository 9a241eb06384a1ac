"""
app/schemas package marker.
"""

from app.schemas.analytics import (
    AnalyticsResponse,
    BracketedResponse,
    PaginatedResponse,
    TimeSeriesResponse,
    ToolDefinition,
)

__all__ = [
    "AnalyticsResponse",
    "BracketedResponse",
    "PaginatedResponse",
    "TimeSeriesResponse",
    "ToolDefinition",
]
