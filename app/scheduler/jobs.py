"""
app/scheduler/jobs.py

APScheduler-based scheduler for periodic inflation index refresh.

Schedule
--------
  inflation_refresh — every ``INFLATION_REFRESH_INTERVAL_HOURS`` (default 12),
                      first run shortly after startup

Lifecycle
----------
Call ``build_scheduler()`` once to get a configured ``BackgroundScheduler``.
Start it on app boot; shut it down gracefully on app shutdown.
The scheduler is wired into FastAPI via the ``lifespan`` context in main.py.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from apscheduler.schedulers.background import BackgroundScheduler

from app.config import InflationSettings, get_inflation_settings
from app.services.inflation_refresh_service import get_inflation_refresh_service
from db.session import session_scope

logger = logging.getLogger(__name__)

_STARTUP_DELAY = timedelta(seconds=30)


# ---------------------------------------------------------------------------
# Job: Inflation index refresh
# ---------------------------------------------------------------------------


def run_inflation_refresh() -> None:
    """
    Fetch the HICP series and upsert it.  InflationRefreshService commits
    internally; a failure leaves the stored index as it was.
    """
    logger.info("Scheduler: inflation_refresh starting")

    try:
        with session_scope() as db:
            summary = get_inflation_refresh_service().refresh(db)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Scheduler: inflation_refresh failed: %s", exc)
        return

    logger.info(
        "Scheduler: inflation_refresh complete written=%d failed=%d",
        summary.points_written,
        summary.failed_records,
    )


# ---------------------------------------------------------------------------
# Scheduler factory
# ---------------------------------------------------------------------------


def build_scheduler(settings: InflationSettings | None = None) -> BackgroundScheduler:
    """
    Build and register all periodic jobs.

    Returns a configured but *not yet started* ``BackgroundScheduler``.
    The caller must call ``.start()`` and ``.shutdown(wait=True)`` at the
    appropriate lifecycle points.  No job is registered when the refresh is
    disabled.
    """
    settings = settings or get_inflation_settings()
    scheduler = BackgroundScheduler(timezone="UTC")

    if settings.refresh_enabled:
        scheduler.add_job(
            run_inflation_refresh,
            trigger="interval",
            hours=settings.refresh_interval_hours,
            next_run_time=datetime.now(tz=timezone.utc) + _STARTUP_DELAY,
            id="inflation_refresh",
            name="Inflation index refresh",
            replace_existing=True,
            misfire_grace_time=3600,
            coalesce=True,
        )

    return scheduler
