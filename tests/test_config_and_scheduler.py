"""
tests/test_config_and_scheduler.py

Settings parsing, settings validation and scheduler job registration.
"""

from __future__ import annotations

import pytest

from app.config import (
    InflationSettings,
    get_analytics_settings,
    get_inflation_settings,
    validate_inflation_settings,
)
from app.scheduler.jobs import build_scheduler


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_analytics_settings.cache_clear()
    get_inflation_settings.cache_clear()
    yield
    get_analytics_settings.cache_clear()
    get_inflation_settings.cache_clear()


class TestSettings:
    def test_analytics_settings_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ANALYTICS_PAGE_SIZE", "250")
        monkeypatch.setenv("ANALYTICS_ROLLING_WINDOW_MONTHS", "6")
        settings = get_analytics_settings()
        assert settings.page_size == 250
        assert settings.rolling_window_months == 6

    def test_fallback_policy_is_normalised(self, monkeypatch) -> None:
        monkeypatch.setenv("INFLATION_FALLBACK_POLICY", " STRICT ")
        assert get_inflation_settings().fallback_policy == "strict"

    def test_unknown_policy_is_reported(self) -> None:
        problems = validate_inflation_settings(InflationSettings(fallback_policy="interpolate"))
        assert len(problems) == 1
        assert "INFLATION_FALLBACK_POLICY" in problems[0]

    def test_defaults_are_valid(self) -> None:
        assert validate_inflation_settings(InflationSettings()) == []


class TestScheduler:
    def test_refresh_job_registered(self) -> None:
        scheduler = build_scheduler(InflationSettings(refresh_interval_hours=6))
        jobs = scheduler.get_jobs()
        assert [job.id for job in jobs] == ["inflation_refresh"]

    def test_no_job_when_disabled(self) -> None:
        scheduler = build_scheduler(InflationSettings(refresh_enabled=False))
        assert scheduler.get_jobs() == []
