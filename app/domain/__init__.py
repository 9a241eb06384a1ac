"""
app/domain package marker.
"""

from app.domain.artwork_sales import SaleFilter, SaleRecord
from app.domain.inflation_refresh import InflationRefreshSummary

__all__ = [
    "InflationRefreshSummary",
    "SaleFilter",
    "SaleRecord",
]
