"""Open-Meteo weather client package."""

from .client import (
    CURRENT_DATA_MISSING,
    CURRENT_REQUEST_FAILED,
    HISTORICAL_DATA_MISSING,
    HISTORICAL_REQUEST_FAILED,
    WeatherClient,
    format_coordinate,
    format_date,
)
from .config import (
    HTTP_TIMEOUT_SECONDS,
    NOT_SELECTED_LABEL,
    OPEN_METEO_BASE_URL,
    OPEN_METEO_FORECAST_URL,
    WMO_WEATHER_CODES,
    get_weather_description,
)
from .errors import ApiRequestError, ConfigurationError, MeteoClientFailure
from .metrics import FIELD_NAMES, RequestMode, WeatherMetric
from .models import (
    HourlyObservationRecord,
    ObservationRecord,
    map_weather_data,
    normalize_current,
    normalize_hourly,
)

__all__ = [
    # Client
    "WeatherClient",
    "format_coordinate",
    "format_date",
    "CURRENT_REQUEST_FAILED",
    "CURRENT_DATA_MISSING",
    "HISTORICAL_REQUEST_FAILED",
    "HISTORICAL_DATA_MISSING",
    # Metrics
    "WeatherMetric",
    "RequestMode",
    "FIELD_NAMES",
    # Models
    "ObservationRecord",
    "HourlyObservationRecord",
    "map_weather_data",
    "normalize_current",
    "normalize_hourly",
    # Errors
    "MeteoClientFailure",
    "ApiRequestError",
    "ConfigurationError",
    # Config
    "OPEN_METEO_BASE_URL",
    "OPEN_METEO_FORECAST_URL",
    "HTTP_TIMEOUT_SECONDS",
    "NOT_SELECTED_LABEL",
    "WMO_WEATHER_CODES",
    "get_weather_description",
]
