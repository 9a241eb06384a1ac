"""
app/api/dependencies.py

Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import get_analytics_settings, get_inflation_settings
from app.repositories import ArtworkSaleRepository, InflationIndexRepository
from app.services.sales_analytics_service import SalesAnalyticsService
from db.session import get_db


def get_sales_analytics_service(db: Session = Depends(get_db)) -> SalesAnalyticsService:
    """
    Build a request-scoped analytics service bound to the request's session.
    """

    return SalesAnalyticsService(
        sales=ArtworkSaleRepository(db),
        index_source=InflationIndexRepository(db),
        settings=get_analytics_settings(),
        inflation_settings=get_inflation_settings(),
    )
