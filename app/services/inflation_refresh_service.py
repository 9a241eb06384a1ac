"""
app/services/inflation_refresh_service.py

Fetches the latest HICP observations and upserts them into
``inflation_index``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_external_http_settings, get_inflation_settings
from app.connectors import BaseConnector, ConnectorRequestError, EcbHicpConnector
from app.domain.inflation_refresh import InflationRefreshSummary
from app.repositories.inflation_index_repository import InflationIndexRepository

logger = logging.getLogger(__name__)


class InflationRefreshService:
    """
    Coordinates connector fetching and index persistence.

    A failed fetch or write leaves the stored index untouched; the
    analytics tools keep serving from the previous values.
    """

    def __init__(self, *, connector: BaseConnector) -> None:
        self._connector = connector

    def refresh(self, db: Session) -> InflationRefreshSummary:
        try:
            fetched = self._connector.fetch_records()
        except ConnectorRequestError as exc:
            logger.error(
                "Inflation index fetch failed source=%s error=%s",
                self._connector.source,
                exc,
            )
            return InflationRefreshSummary(
                source=self._connector.source,
                points_fetched=0,
                points_written=0,
                failed_records=1,
            )

        written = 0
        failed = fetched.failed_records
        if fetched.records:
            try:
                written = InflationIndexRepository(db).upsert_points(fetched.records)
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception(
                    "Failed to persist inflation index source=%s error=%s",
                    self._connector.source,
                    exc,
                )
                failed += len(fetched.records)
                written = 0
        else:
            logger.warning("Inflation index fetch returned no points source=%s", self._connector.source)

        summary = InflationRefreshSummary(
            source=self._connector.source,
            points_fetched=len(fetched.records),
            points_written=written,
            failed_records=failed,
        )
        logger.info(
            "Inflation index refresh source=%s fetched=%d written=%d failed=%d",
            summary.source,
            summary.points_fetched,
            summary.points_written,
            summary.failed_records,
        )
        return summary


@lru_cache(maxsize=1)
def get_inflation_refresh_service() -> InflationRefreshService:
    """
    Build and cache the inflation refresh service.
    """

    return InflationRefreshService(
        connector=EcbHicpConnector(
            settings=get_inflation_settings(),
            http_settings=get_external_http_settings(),
        )
    )
