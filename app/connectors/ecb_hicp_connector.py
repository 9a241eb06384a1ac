"""
app/connectors/ecb_hicp_connector.py

ECB Statistical Data Warehouse connector for the monthly HICP index.

The service answers ``{base_url}/{series_key}?lastNObservations=N&format=csvdata``
with a CSV whose header names ``TIME_PERIOD`` (``YYYY-MM``) and
``OBS_VALUE`` among many descriptive columns.
"""

from __future__ import annotations

import csv
import io
import logging
from decimal import Decimal, InvalidOperation

import requests

from analytics.inflation import InflationIndexPoint
from app.config import ExternalHTTPSettings, InflationSettings
from app.connectors.base import BaseConnector, ConnectorFetchResult

logger = logging.getLogger(__name__)

_PERIOD_COLUMN = "TIME_PERIOD"
_VALUE_COLUMN = "OBS_VALUE"


class EcbHicpConnector(BaseConnector[InflationIndexPoint]):
    """
    Fetches HICP observations and parses them into index points.
    """

    def __init__(
        self,
        *,
        settings: InflationSettings,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="ecb_hicp", http_settings=http_settings, session=session)
        self._settings = settings

    @property
    def url(self) -> str:
        return f"{self._settings.base_url}/{self._settings.series_key}"

    def fetch_records(self) -> ConnectorFetchResult[InflationIndexPoint]:
        text = self._request_text(
            method="GET",
            url=self.url,
            params={
                "lastNObservations": self._settings.last_n_observations,
                "format": "csvdata",
            },
            headers={"Accept": "text/csv"},
        )
        return self.parse_csv(text)

    def parse_csv(self, text: str) -> ConnectorFetchResult[InflationIndexPoint]:
        """
        Parse an SDW CSV payload.

        Uses the ``TIME_PERIOD`` / ``OBS_VALUE`` columns when the header has
        them, otherwise the first two columns.  Rows with an unparseable
        period or value are counted in ``failed_records`` and skipped.
        """

        reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
        header = next(reader, None)
        if header is None:
            logger.warning("ECB HICP response was empty url=%s", self.url)
            return ConnectorFetchResult(source=self.source)

        columns = [column.strip().upper() for column in header]
        period_idx = columns.index(_PERIOD_COLUMN) if _PERIOD_COLUMN in columns else 0
        value_idx = columns.index(_VALUE_COLUMN) if _VALUE_COLUMN in columns else 1

        records: list[InflationIndexPoint] = []
        failed_records = 0
        for line_number, row in enumerate(reader, start=2):
            if not row or all(not cell.strip() for cell in row):
                continue
            point = self._parse_row(row, period_idx, value_idx)
            if point is None:
                failed_records += 1
                logger.warning("Skipping malformed ECB HICP row line=%s row=%r", line_number, row)
                continue
            records.append(point)

        logger.info(
            "Parsed ECB HICP series=%s points=%d failed=%d",
            self._settings.series_key,
            len(records),
            failed_records,
        )
        return ConnectorFetchResult(
            source=self.source,
            records=records,
            failed_records=failed_records,
        )

    @staticmethod
    def _parse_row(row: list[str], period_idx: int, value_idx: int) -> InflationIndexPoint | None:
        if len(row) <= max(period_idx, value_idx):
            return None

        period = row[period_idx].strip()
        parts = period.split("-")
        if len(parts) != 2:
            return None
        try:
            year, month = int(parts[0]), int(parts[1])
            value = Decimal(row[value_idx].strip())
        except (ValueError, InvalidOperation):
            return None

        if not 1 <= month <= 12 or not value.is_finite() or value <= 0:
            return None
        return InflationIndexPoint(year=year, month=month, index_value=value)
