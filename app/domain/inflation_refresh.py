"""
app/domain/inflation_refresh.py

Domain models for the inflation index refresh job.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InflationRefreshSummary:
    """
    Summary for one refresh run.

    ``points_written`` counts inserted and updated rows together.
    """

    source: str
    points_fetched: int
    points_written: int
    failed_records: int
