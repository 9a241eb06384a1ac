"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from analytics.inflation import FALLBACK_NEAREST_PRIOR, VALID_FALLBACK_POLICIES
from db.config import load_env_files


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class AnalyticsSettings:
    """
    Runtime settings for the sales analytics tools.
    """

    page_size: int = 1000
    rolling_window_months: int = 12


@dataclass(frozen=True)
class InflationSettings:
    """
    Inflation index lookup and ECB HICP refresh settings.

    ``fallback_policy`` is ``nearest_prior`` (use the closest earlier
    published month) or ``strict`` (exact month only).
    """

    fallback_policy: str = FALLBACK_NEAREST_PRIOR
    refresh_enabled: bool = True
    refresh_interval_hours: int = 12
    base_url: str = "https://sdw-wsrest.ecb.europa.eu/service/data"
    series_key: str = "ICP.M.U2.N.000000.4.INX"
    last_n_observations: int = 600


@dataclass(frozen=True)
class ExternalHTTPSettings:
    """
    Shared HTTP behavior settings for external connectors.
    """

    timeout_seconds: float = 15.0
    max_retries: int = 3
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0
    rate_limit_per_second: float = 5.0


@lru_cache(maxsize=1)
def get_analytics_settings() -> AnalyticsSettings:
    """
    Return cached analytics settings from environment variables.
    """

    return AnalyticsSettings(
        page_size=max(1, _get_int_env("ANALYTICS_PAGE_SIZE", 1000)),
        rolling_window_months=max(1, _get_int_env("ANALYTICS_ROLLING_WINDOW_MONTHS", 12)),
    )


@lru_cache(maxsize=1)
def get_inflation_settings() -> InflationSettings:
    """
    Return cached inflation settings from environment variables.

    An unknown ``INFLATION_FALLBACK_POLICY`` is passed through unchanged so
    that startup validation can report it.
    """

    return InflationSettings(
        fallback_policy=_get_str_env("INFLATION_FALLBACK_POLICY", FALLBACK_NEAREST_PRIOR).lower(),
        refresh_enabled=_get_bool_env("INFLATION_REFRESH_ENABLED", True),
        refresh_interval_hours=max(1, _get_int_env("INFLATION_REFRESH_INTERVAL_HOURS", 12)),
        base_url=_get_str_env(
            "INFLATION_ECB_BASE_URL", "https://sdw-wsrest.ecb.europa.eu/service/data"
        ).rstrip("/"),
        series_key=_get_str_env("INFLATION_ECB_SERIES_KEY", "ICP.M.U2.N.000000.4.INX"),
        last_n_observations=max(1, _get_int_env("INFLATION_ECB_LAST_N_OBSERVATIONS", 600)),
    )


@lru_cache(maxsize=1)
def get_external_http_settings() -> ExternalHTTPSettings:
    """
    Return shared connector HTTP settings from environment variables.
    """

    return ExternalHTTPSettings(
        timeout_seconds=max(1.0, _get_float_env("EXTERNAL_HTTP_TIMEOUT_SECONDS", 15.0)),
        max_retries=max(0, _get_int_env("EXTERNAL_HTTP_MAX_RETRIES", 3)),
        backoff_initial_seconds=max(0.1, _get_float_env("EXTERNAL_HTTP_BACKOFF_INITIAL_SECONDS", 0.5)),
        backoff_multiplier=max(1.0, _get_float_env("EXTERNAL_HTTP_BACKOFF_MULTIPLIER", 2.0)),
        rate_limit_per_second=max(0.1, _get_float_env("EXTERNAL_HTTP_RATE_LIMIT_PER_SECOND", 5.0)),
    )


def validate_inflation_settings(settings: InflationSettings) -> list[str]:
    """Return human-readable problems with *settings* (empty when valid)."""
    problems: list[str] = []
    if settings.fallback_policy not in VALID_FALLBACK_POLICIES:
        problems.append(
            f"INFLATION_FALLBACK_POLICY '{settings.fallback_policy}' is not valid. "
            f"Allowed values: {sorted(VALID_FALLBACK_POLICIES)}."
        )
    if not settings.series_key:
        problems.append("INFLATION_ECB_SERIES_KEY must not be empty.")
    return problems
