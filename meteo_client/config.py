"""
Centralized configuration for the Open-Meteo client.

All magic values, API URLs, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import datetime as dt
import logging
import os

from .errors import ConfigurationError


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be a number of seconds, got {raw!r}", cause=exc
        ) from exc


def _log_level_from_env(name: str, default: str) -> str:
    level = os.environ.get(name, "").strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"{name} must be a logging level name such as DEBUG or WARNING, got {level!r}"
        )
    return level


# -----------------------------------------------------------------------------
# API Base URLs
# -----------------------------------------------------------------------------

OPEN_METEO_BASE_URL = os.environ.get(
    "OPEN_METEO_BASE_URL",
    "https://api.open-meteo.com",
)

OPEN_METEO_FORECAST_PATH = "/v1/forecast"

OPEN_METEO_FORECAST_URL = OPEN_METEO_BASE_URL.rstrip("/") + OPEN_METEO_FORECAST_PATH

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = _float_from_env("METEO_HTTP_TIMEOUT_SECONDS", 30.0)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = _log_level_from_env("METEO_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# Display
# -----------------------------------------------------------------------------

# Shown in place of a field the provider did not return.
NOT_SELECTED_LABEL = "No seleccionado"

# -----------------------------------------------------------------------------
# WMO Weather Codes
# Reference: https://open-meteo.com/en/docs
# -----------------------------------------------------------------------------

WMO_WEATHER_CODES: dict[int, str] = {
    0: "Cielo despejado",
    1: "Mayormente despejado",
    2: "Parcialmente nublado",
    3: "Nublado",
    45: "Niebla",
    48: "Niebla con escarcha",
    51: "Llovizna ligera",
    53: "Llovizna moderada",
    55: "Llovizna densa",
    56: "Llovizna helada ligera",
    57: "Llovizna helada densa",
    61: "Lluvia ligera",
    63: "Lluvia moderada",
    65: "Lluvia intensa",
    66: "Lluvia helada ligera",
    67: "Lluvia helada intensa",
    71: "Nevada ligera",
    73: "Nevada moderada",
    75: "Nevada intensa",
    77: "Granos de nieve",
    80: "Chubascos ligeros",
    81: "Chubascos moderados",
    82: "Chubascos violentos",
    85: "Chubascos de nieve ligeros",
    86: "Chubascos de nieve intensos",
    95: "Tormenta",
    96: "Tormenta con granizo ligero",
    99: "Tormenta con granizo intenso",
}


def get_weather_description(code: int) -> str:
    """Get the Spanish weather description for a WMO code."""
    return WMO_WEATHER_CODES.get(code, f"Código {code}")


# -----------------------------------------------------------------------------
# CLI Defaults
# -----------------------------------------------------------------------------

DEFAULT_CURRENT_METRICS: tuple[str, ...] = ("rain", "precipitation", "cloud_cover")
DEFAULT_HISTORICAL_METRICS: tuple[str, ...] = ("temperature_2m", "precipitation")
DEFAULT_HISTORICAL_START = dt.date(2025, 4, 1)
DEFAULT_HISTORICAL_END = dt.date(2025, 4, 2)
