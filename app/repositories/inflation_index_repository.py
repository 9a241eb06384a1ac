"""
app/repositories/inflation_index_repository.py

Persistence layer for the monthly inflation index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.orm import Session

from analytics.inflation import InflationIndexPoint
from db.models.inflation_index import InflationIndex

_DEFAULT_BATCH_SIZE = 500
_UPSERT_CONSTRAINT = "uq_inflation_index_year_month"


class InflationIndexRepository:
    """
    Loads index points for the analytics engine and upserts refreshed
    values.  Callers own the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def load_points(self) -> list[InflationIndexPoint]:
        stmt = select(InflationIndex).order_by(InflationIndex.year, InflationIndex.month)
        return [
            InflationIndexPoint(year=row.year, month=row.month, index_value=row.index_value)
            for row in self._session.scalars(stmt).all()
        ]

    def upsert_points(
        self,
        points: Sequence[InflationIndexPoint],
        *,
        batch_size: int = _DEFAULT_BATCH_SIZE,
    ) -> int:
        """
        Insert or update points keyed by (year, month).

        Returns the number of rows written.
        """

        if not points:
            return 0

        # Last value wins when the same month appears twice in one batch.
        deduped: dict[tuple[int, int], InflationIndexPoint] = {
            (point.year, point.month): point for point in points
        }
        payloads: list[dict[str, Any]] = [
            {"year": p.year, "month": p.month, "index_value": p.index_value}
            for p in deduped.values()
        ]

        size = max(1, batch_size)
        written = 0
        for start in range(0, len(payloads), size):
            chunk = payloads[start : start + size]
            stmt = insert(InflationIndex).values(chunk)
            stmt = stmt.on_conflict_do_update(
                constraint=_UPSERT_CONSTRAINT,
                set_={
                    "index_value": stmt.excluded.index_value,
                    "updated_at": func.now(),
                },
            ).returning(InflationIndex.id)
            written += len(self._session.scalars(stmt).all())

        return written
