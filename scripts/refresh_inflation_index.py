"""
scripts/refresh_inflation_index.py

Refresh the inflation index from the ECB HICP series from the command line.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace

from app.config import get_external_http_settings, get_inflation_settings
from app.connectors import EcbHicpConnector
from app.services.inflation_refresh_service import InflationRefreshService
from db.session import session_scope


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch ECB HICP observations and upsert inflation_index.")
    parser.add_argument(
        "--series-key",
        dest="series_key",
        default=None,
        help="Optional SDW series key (default: INFLATION_ECB_SERIES_KEY).",
    )
    parser.add_argument(
        "--last-n",
        dest="last_n",
        type=int,
        default=None,
        help="Optional number of most recent observations to request.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    settings = get_inflation_settings()
    if args.series_key:
        settings = replace(settings, series_key=args.series_key)
    if args.last_n:
        settings = replace(settings, last_n_observations=max(1, args.last_n))

    service = InflationRefreshService(
        connector=EcbHicpConnector(settings=settings, http_settings=get_external_http_settings())
    )
    with session_scope() as db:
        summary = service.refresh(db)

    payload = {
        "source": summary.source,
        "series_key": settings.series_key,
        "points_fetched": summary.points_fetched,
        "points_written": summary.points_written,
        "failed_records": summary.failed_records,
    }
    print(json.dumps(payload, indent=2))
    return 0 if summary.points_written > 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
